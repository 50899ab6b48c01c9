"""
Tests for the BFS traversal module.

Distances are checked against NetworkX as an independent oracle.
"""

import networkx as nx
import pytest
from adjgraph.exceptions import InvalidArgumentError, NullInputError
from adjgraph.graph import AdjacencyListDirectedGraph, build_graph_from_edges, to_networkx
from adjgraph.models import GraphNode, NodeColor
from adjgraph.traversal import BFSVisitor, VisitOrderRecorder, path_to
from tests.fixtures import (
    CYCLE_EDGES,
    DIAMOND_EDGES,
    GRID_EDGES,
    SIMPLE_EDGES,
    simple_graph,
)


def annotations(graph):
    """Snapshot (color, distance, predecessor label) per node label."""
    return {
        node.label: (
            node.color,
            node.distance,
            node.previous.label if node.previous is not None else None,
        )
        for node in graph.get_nodes()
    }


class TestBFSScenario:
    """Tests on the A/B/C/D/E graph."""

    def test_distances(self):
        """Test hop counts from A."""
        graph = simple_graph()

        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        distances = {node.label: node.distance for node in graph.get_nodes()}
        assert distances == {"A": 0, "B": 1, "D": 1, "C": 2, "E": None}

    def test_predecessors(self):
        """Test the traversal tree from A."""
        graph = simple_graph()

        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        assert graph.get_node_of("A").previous is None
        assert graph.get_node_of("B").previous.label == "A"
        assert graph.get_node_of("D").previous.label == "A"
        assert graph.get_node_of("C").previous.label == "B"

    def test_unreachable_node_untouched(self):
        """Test that a node with no path from the source stays unvisited."""
        graph = simple_graph()

        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        e = graph.get_node_of("E")
        assert e.color == NodeColor.UNVISITED
        assert e.distance is None
        assert e.previous is None

    def test_reached_nodes_finished(self):
        """Test that every reached node ends FINISHED."""
        graph = simple_graph()

        reached = BFSVisitor().traverse(graph, graph.get_node_of("A"))

        assert reached == 4
        for label in "ABCD":
            assert graph.get_node_of(label).color == NodeColor.FINISHED

    def test_equal_source_copy_resolves_to_graph_node(self):
        """Test that a source equal to a graph node annotates the graph's node."""
        graph = simple_graph()

        BFSVisitor().traverse(graph, GraphNode("A"))

        assert graph.get_node_of("C").distance == 2
        assert graph.get_node_of("A").distance == 0


class TestBFSAgainstNetworkX:
    """Tests comparing BFS distances with NetworkX shortest path lengths."""

    @pytest.mark.parametrize(
        "edges, source",
        [
            (SIMPLE_EDGES, "A"),
            (DIAMOND_EDGES, "s"),
            (DIAMOND_EDGES, "b"),
            (CYCLE_EDGES, 1),
            (CYCLE_EDGES, 4),
            (GRID_EDGES, (0, 0)),
            (GRID_EDGES, (2, 1)),
        ],
    )
    def test_distances_match_networkx(self, edges, source):
        """Test that every distance is a shortest hop count."""
        graph = build_graph_from_edges(edges)
        expected = nx.single_source_shortest_path_length(to_networkx(graph), source)

        BFSVisitor().traverse(graph, graph.get_node_of(source))

        for node in graph.get_nodes():
            assert node.distance == expected.get(node.label)

    @pytest.mark.parametrize("edges", [DIAMOND_EDGES, CYCLE_EDGES, GRID_EDGES])
    def test_predecessor_chain_is_shortest_path(self, edges):
        """Test that following predecessors retraces a shortest path."""
        graph = build_graph_from_edges(edges)
        source = next(iter(graph.get_nodes()))

        BFSVisitor().traverse(graph, source)

        for node in graph.get_nodes():
            path = path_to(node)
            if node.distance is None:
                assert path == []
                continue
            assert path[0] == source
            assert path[-1] == node
            assert len(path) - 1 == node.distance
            for tail, head in zip(path, path[1:]):
                assert head in graph.get_adjacent_nodes_of(tail)


class TestBFSRuns:
    """Tests for repeated and invalid runs."""

    def test_traverse_is_idempotent(self):
        """Test that two runs in a row leave identical annotations."""
        graph = build_graph_from_edges(GRID_EDGES)
        source = graph.get_node_of((0, 0))
        visitor = BFSVisitor()

        visitor.traverse(graph, source)
        first = annotations(graph)
        visitor.traverse(graph, source)

        assert annotations(graph) == first

    def test_state_from_previous_run_does_not_leak(self):
        """Test that a new source resets nodes reached by an earlier run."""
        graph = simple_graph()
        visitor = BFSVisitor()

        visitor.traverse(graph, graph.get_node_of("A"))
        visitor.traverse(graph, graph.get_node_of("B"))

        a = graph.get_node_of("A")
        assert a.color == NodeColor.UNVISITED
        assert a.distance is None
        assert graph.get_node_of("B").distance == 0
        assert graph.get_node_of("C").distance == 1

    def test_tie_break_follows_edge_insertion(self):
        """Test that among equal-length parents the first inserted edge wins."""
        graph = build_graph_from_edges([("s", "x"), ("s", "y"), ("y", "t"), ("x", "t")])

        BFSVisitor().traverse(graph, graph.get_node_of("s"))

        assert graph.get_node_of("t").previous.label == "x"

    def test_source_only(self):
        """Test a single-node graph."""
        graph = AdjacencyListDirectedGraph()
        node = GraphNode("only")
        graph.add_node(node)

        assert BFSVisitor().traverse(graph, node) == 1
        assert node.distance == 0
        assert node.color == NodeColor.FINISHED

    def test_none_arguments(self):
        """Test that None graph or source raises NullInputError."""
        graph = simple_graph()

        with pytest.raises(NullInputError):
            BFSVisitor().traverse(None, GraphNode("A"))
        with pytest.raises(NullInputError):
            BFSVisitor().traverse(graph, None)

    def test_source_not_in_graph(self):
        """Test that a foreign source raises InvalidArgumentError."""
        graph = simple_graph()

        with pytest.raises(InvalidArgumentError):
            BFSVisitor().traverse(graph, GraphNode("Z"))

    def test_failed_run_leaves_annotations(self):
        """Test that a rejected run does not reset the previous results."""
        graph = simple_graph()
        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        with pytest.raises(InvalidArgumentError):
            BFSVisitor().traverse(graph, GraphNode("Z"))

        assert graph.get_node_of("C").distance == 2


class TestVisitationHook:
    """Tests for the visit_node hook."""

    def test_default_hook_is_noop(self):
        """Test that the base visitor runs without a callback."""
        graph = simple_graph()

        assert BFSVisitor().traverse(graph, graph.get_node_of("A")) == 4

    def test_callback_called_once_per_reachable_node(self):
        """Test the injected callback."""
        graph = build_graph_from_edges(DIAMOND_EDGES, nodes=["lonely"])
        seen = []

        BFSVisitor(on_finish=seen.append).traverse(graph, graph.get_node_of("s"))

        assert sorted(node.label for node in seen) == ["a", "b", "c", "s", "t"]
        assert len(seen) == len(set(seen))

    def test_hook_sees_finished_node(self):
        """Test that the hook runs after the node turns FINISHED."""
        graph = simple_graph()
        colors = []

        BFSVisitor(on_finish=lambda node: colors.append(node.color)).traverse(
            graph, graph.get_node_of("A")
        )

        assert colors == [NodeColor.FINISHED] * 4

    def test_subclass_override(self):
        """Test overriding visit_node in a subclass."""

        class LabelCollector(BFSVisitor):
            def __init__(self):
                super().__init__()
                self.labels = []

            def visit_node(self, node):
                self.labels.append(node.label)

        graph = simple_graph()
        collector = LabelCollector()

        collector.traverse(graph, graph.get_node_of("A"))

        assert collector.labels[0] == "A"
        assert set(collector.labels) == {"A", "B", "C", "D"}

    def test_visit_order_non_decreasing_distance(self):
        """Test that nodes finish in non-decreasing distance order."""
        graph = build_graph_from_edges(GRID_EDGES)
        recorder = VisitOrderRecorder()

        recorder.traverse(graph, graph.get_node_of((0, 0)))

        distances = [node.distance for node in recorder.visited]
        assert distances == sorted(distances)
        assert len(recorder.visited) == graph.node_count

    def test_recorder_resets_between_runs(self):
        """Test that the recorder only keeps the latest run."""
        graph = simple_graph()
        recorder = VisitOrderRecorder()

        recorder.traverse(graph, graph.get_node_of("A"))
        recorder.traverse(graph, graph.get_node_of("C"))

        assert [node.label for node in recorder.visited] == ["C"]


class TestPathTo:
    """Tests for path reconstruction."""

    def test_path_to_reached_node(self):
        """Test rebuilding the path from A to C."""
        graph = simple_graph()
        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        assert [node.label for node in path_to(graph.get_node_of("C"))] == ["A", "B", "C"]

    def test_path_to_source(self):
        """Test that the source's path is itself."""
        graph = simple_graph()
        a = graph.get_node_of("A")
        BFSVisitor().traverse(graph, a)

        assert path_to(a) == [a]

    def test_path_to_unreached_node(self):
        """Test that an unreached node has no path."""
        graph = simple_graph()
        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        assert path_to(graph.get_node_of("E")) == []

    def test_path_to_none(self):
        """Test that None raises NullInputError."""
        with pytest.raises(NullInputError):
            path_to(None)

    def test_path_to_equal_copy_with_graph(self):
        """Test that an equal copy is resolved when the graph is given."""
        graph = simple_graph()
        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        path = path_to(GraphNode("C"), graph)

        assert [node.label for node in path] == ["A", "B", "C"]
        assert path[-1] is graph.get_node_of("C")

    def test_path_to_equal_copy_without_graph(self):
        """Test that a copy without annotations has no path."""
        graph = simple_graph()
        BFSVisitor().traverse(graph, graph.get_node_of("A"))

        assert path_to(GraphNode("C")) == []

    def test_path_to_node_not_in_graph(self):
        """Test that resolving a foreign node raises InvalidArgumentError."""
        graph = simple_graph()

        with pytest.raises(InvalidArgumentError):
            path_to(GraphNode("Z"), graph)
