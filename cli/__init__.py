"""
CLI module for adjgraph.

The command-line harness providing bfs, path, and info commands.
"""

from cli.main import app

__all__ = ["app"]
