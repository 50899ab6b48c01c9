"""
Adjacency-list directed graph backed by hash maps.

The adjacency lists are a dict mapping every node to the set of its
outgoing edges. The key set of that dict is the node set, so testing
whether a node is present is a pseudo-constant-time hash lookup, and
testing whether an edge is present is a second hash lookup in the tail's
outgoing set. Edges are stored as objects rather than bare neighbour
nodes so that each one can carry its weight.

Design Decisions:
    - Outgoing sets are insertion-ordered dicts used as sets, so edge
      iteration (and therefore BFS tie-breaking) follows insertion order
    - No reverse index: ingoing edges and predecessors cost O(V + E)
    - No removal: deleting a node would need a scan of every outgoing set
      for dangling edges, defeating the constant-time design
    - No node indices: hash-map storage has no stable ordering to index
    - The edge count is maintained incrementally

Limitations:
    Not thread-safe. Structural mutation while a query or traversal is
    running is undefined and must be prevented by the caller.
"""

import logging
from collections.abc import KeysView
from dataclasses import replace
from typing import Optional

from adjgraph.exceptions import (
    InvalidArgumentError,
    InvalidEdgeError,
    NullInputError,
    UnsupportedOperationError,
)
from adjgraph.graph.base import Graph
from adjgraph.models import GraphEdge, GraphNode, L

logger = logging.getLogger(__name__)


class AdjacencyListDirectedGraph(Graph[L]):
    """
    A directed graph stored as node -> outgoing-edge-set hash maps.

    Every node in the graph owns exactly one outgoing-edge set, possibly
    empty. The first node instance added for a label is the canonical
    one: lookups by an equal node resolve to it, and edges are stored
    pointing at canonical nodes so traversal annotations always land on
    the instances returned by get_nodes().

    Attributes:
        _adjacency: Node -> ordered set (dict keys) of outgoing edges
        _labels: Label -> canonical node, for O(1) get_node_of
        _edge_count: Number of edges, updated on every insertion

    Usage:
        graph = AdjacencyListDirectedGraph()
        a, b = GraphNode("a"), GraphNode("b")
        graph.add_node(a)
        graph.add_node(b)
        graph.add_edge(GraphEdge(a, b))
        graph.get_adjacent_nodes_of(a)  # {b}
    """

    def __init__(self) -> None:
        """Create an empty graph."""
        self._adjacency: dict[GraphNode[L], dict[GraphEdge[L], None]] = {}
        self._labels: dict[L, GraphNode[L]] = {}
        self._edge_count = 0

    @property
    def is_directed(self) -> bool:
        """This representation only holds directed graphs."""
        return True

    @property
    def node_count(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._edge_count

    def clear(self) -> None:
        """Remove all nodes and edges from the graph."""
        self._adjacency.clear()
        self._labels.clear()
        self._edge_count = 0
        logger.debug("Graph cleared")

    def get_nodes(self) -> KeysView[GraphNode[L]]:
        """
        Return the node set.

        The result is a live, read-only view: it reflects nodes added
        later and cannot be used to change the graph. Take a copy with
        set(...) before adding nodes while iterating.
        """
        return self._adjacency.keys()

    def add_node(self, node: GraphNode[L]) -> bool:
        """
        Add a node with an empty outgoing-edge set.

        Args:
            node: The node to add

        Returns:
            True if the node was added, False if a node with the same
            label was already present (the graph is left unchanged)

        Raises:
            NullInputError: If node is None
        """
        if node is None:
            raise NullInputError("Cannot add a None node")
        if node in self._adjacency:
            return False
        self._adjacency[node] = {}
        self._labels[node.label] = node
        logger.debug("Added node %r", node.label)
        return True

    def remove_node(self, node: GraphNode[L]) -> bool:
        """Node removal is not supported by this representation."""
        raise UnsupportedOperationError("Node removal is not supported")

    def contains_node(self, node: GraphNode[L]) -> bool:
        """
        Check whether a node with the same label is in the graph.

        Raises:
            NullInputError: If node is None
        """
        if node is None:
            raise NullInputError("Cannot look up a None node")
        return node in self._adjacency

    def get_node_of(self, label: L) -> Optional[GraphNode[L]]:
        """
        Retrieve the canonical node for a label.

        Args:
            label: The label to look up

        Returns:
            The node stored in the graph, or None if no node has that label

        Raises:
            NullInputError: If label is None
        """
        if label is None:
            raise NullInputError("Cannot look up a None label")
        return self._labels.get(label)

    def get_node_index_of(self, label: L) -> int:
        """Index lookups are not supported by this representation."""
        raise UnsupportedOperationError("Node indices are not supported")

    def get_node_at_index(self, index: int) -> GraphNode[L]:
        """Index lookups are not supported by this representation."""
        raise UnsupportedOperationError("Node indices are not supported")

    def get_edges_between(self, index1: int, index2: int) -> set[GraphEdge[L]]:
        """Index lookups are not supported by this representation."""
        raise UnsupportedOperationError("Node indices are not supported")

    def add_edge(self, edge: GraphEdge[L]) -> bool:
        """
        Add an edge to the outgoing set of its tail.

        Args:
            edge: The edge to add; both endpoints must already be nodes

        Returns:
            True if the edge was added, False if an edge with the same
            (tail, head) pair was already present. Weights are ignored
            for this check, so the existing weight is kept.

        Raises:
            NullInputError: If edge is None
            InvalidEdgeError: If an endpoint is not in the graph, or the
                edge is undirected
        """
        self._validate_edge(edge)
        outgoing = self._adjacency[edge.tail]
        if edge in outgoing:
            return False
        outgoing[self._canonical_edge(edge)] = None
        self._edge_count += 1
        logger.debug("Added edge %s", edge)
        return True

    def remove_edge(self, edge: GraphEdge[L]) -> bool:
        """Edge removal is not supported by this representation."""
        raise UnsupportedOperationError("Edge removal is not supported")

    def contains_edge(self, edge: GraphEdge[L]) -> bool:
        """
        Check whether an equal edge is in the graph.

        Raises:
            NullInputError: If edge is None
            InvalidEdgeError: Under the same conditions as add_edge
        """
        self._validate_edge(edge)
        return edge in self._adjacency[edge.tail]

    def get_edges_of(self, node: GraphNode[L]) -> KeysView[GraphEdge[L]]:
        """
        Return the outgoing edges of a node.

        The result is a live, read-only view in insertion order.

        Raises:
            NullInputError: If node is None
            InvalidArgumentError: If node is not in the graph
        """
        self._require_node(node)
        return self._adjacency[node].keys()

    def get_ingoing_edges_of(self, node: GraphNode[L]) -> set[GraphEdge[L]]:
        """
        Return the edges whose head is the given node.

        No reverse index is kept, so this scans every outgoing set:
        O(V + E).

        Raises:
            NullInputError: If node is None
            InvalidArgumentError: If node is not in the graph
        """
        self._require_node(node)
        return {
            edge
            for outgoing in self._adjacency.values()
            for edge in outgoing
            if edge.head == node
        }

    def get_adjacent_nodes_of(self, node: GraphNode[L]) -> set[GraphNode[L]]:
        """
        Return the nodes reachable from a node through one outgoing edge.

        Raises:
            NullInputError: If node is None
            InvalidArgumentError: If node is not in the graph
        """
        return {edge.head for edge in self.get_edges_of(node)}

    def get_predecessor_nodes_of(self, node: GraphNode[L]) -> set[GraphNode[L]]:
        """
        Return the nodes with an outgoing edge into a node. O(V + E).

        Raises:
            NullInputError: If node is None
            InvalidArgumentError: If node is not in the graph
        """
        return {edge.tail for edge in self.get_ingoing_edges_of(node)}

    def _require_node(self, node: GraphNode[L]) -> None:
        """Validate a node argument of a query."""
        if node is None:
            raise NullInputError("Node cannot be None")
        if node not in self._adjacency:
            raise InvalidArgumentError(f"Node {node.label!r} is not in the graph")

    def _validate_edge(self, edge: GraphEdge[L]) -> None:
        """Validate an edge argument before any lookup or mutation."""
        if edge is None:
            raise NullInputError("Edge cannot be None")
        if edge.tail not in self._adjacency:
            raise InvalidEdgeError(f"Tail {edge.tail.label!r} is not in the graph")
        if edge.head not in self._adjacency:
            raise InvalidEdgeError(f"Head {edge.head.label!r} is not in the graph")
        if edge.directed != self.is_directed:
            raise InvalidEdgeError(
                f"Edge {edge} is {'directed' if edge.directed else 'undirected'} "
                f"but the graph is {'directed' if self.is_directed else 'undirected'}"
            )

    def _canonical_edge(self, edge: GraphEdge[L]) -> GraphEdge[L]:
        """Return the edge re-pointed at the graph's own node instances."""
        tail = self._labels[edge.tail.label]
        head = self._labels[edge.head.label]
        if tail is edge.tail and head is edge.head:
            return edge
        return replace(edge, node1=tail, node2=head)
