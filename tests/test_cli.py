"""
Tests for the command-line harness.

Runs the Typer app in-process with CliRunner.
"""

import pytest
from typer.testing import CliRunner

from cli.main import app
from tests.fixtures import EDGE_LIST_TEXT, MALFORMED_WEIGHT

runner = CliRunner()


@pytest.fixture
def edge_file(tmp_path):
    """Write the sample edge list to a temporary file."""
    path = tmp_path / "graph.txt"
    path.write_text(EDGE_LIST_TEXT, encoding="utf-8")
    return path


class TestBfsCommand:
    """Tests for `adjgraph bfs`."""

    def test_bfs_table(self, edge_file):
        """Test that the table lists every node."""
        result = runner.invoke(app, ["bfs", str(edge_file), "--source", "A"])

        assert result.exit_code == 0
        for label in "ABCDE":
            assert label in result.output
        assert "4 of 5 node(s) reachable" in result.output
        assert "∞" in result.output

    def test_bfs_order(self, edge_file):
        """Test printing the visit order."""
        result = runner.invoke(app, ["bfs", str(edge_file), "-s", "A", "--order"])

        assert result.exit_code == 0
        assert "Visit order:" in result.output
        assert "A → B → D → C" in result.output

    def test_unknown_source(self, edge_file):
        """Test that an unknown source exits with an error."""
        result = runner.invoke(app, ["bfs", str(edge_file), "--source", "Z"])

        assert result.exit_code == 1
        assert "not in the graph" in result.output

    def test_malformed_file(self, tmp_path):
        """Test that parse errors exit with an error line."""
        path = tmp_path / "bad.txt"
        path.write_text(MALFORMED_WEIGHT, encoding="utf-8")

        result = runner.invoke(app, ["bfs", str(path), "--source", "A"])

        assert result.exit_code == 1
        assert "line 1" in result.output


class TestPathCommand:
    """Tests for `adjgraph path`."""

    def test_path_found(self, edge_file):
        """Test printing a shortest path."""
        result = runner.invoke(app, ["path", str(edge_file), "-s", "A", "-t", "C"])

        assert result.exit_code == 0
        assert "A → B → C" in result.output
        assert "2 hop(s)" in result.output

    def test_path_unreachable(self, edge_file):
        """Test reporting an unreachable target."""
        result = runner.invoke(app, ["path", str(edge_file), "-s", "A", "-t", "E"])

        assert result.exit_code == 1
        assert "not reachable" in result.output


class TestInfoCommand:
    """Tests for `adjgraph info`."""

    def test_info(self, edge_file):
        """Test the summary output."""
        result = runner.invoke(app, ["info", str(edge_file)])

        assert result.exit_code == 0
        assert "Nodes" in result.output
        assert "Edges" in result.output


class TestGlobalOptions:
    """Tests for options on the app callback."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "version 0.1.0" in result.output

    def test_bad_log_level(self, edge_file):
        """Test that an unknown log level is rejected."""
        result = runner.invoke(app, ["--log-level", "LOUD", "info", str(edge_file)])

        assert result.exit_code == 1
        assert "unknown log level" in result.output
