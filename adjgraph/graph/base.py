"""
Abstract graph contract.

Defines the operations every graph representation in adjgraph exposes,
whether or not the representation supports them. Representations that
cannot support an operation (removal, index-based access) still implement
it by raising UnsupportedOperationError, so callers always get an explicit
failure instead of a silent no-op.

A few derived operations (get_edges, is_empty, size and the container
protocol) are implemented here on top of the abstract ones.
"""

from abc import ABC, abstractmethod
from collections.abc import Set as AbstractSet
from typing import Generic, Iterator, Optional

from adjgraph.models import GraphEdge, GraphNode, L


class Graph(ABC, Generic[L]):
    """
    A graph over nodes labelled with values of type L.

    Nodes are identified by label; edges by their endpoints (see
    GraphNode and GraphEdge). Implementations decide how adjacency is
    stored and which operations are supported.
    """

    @property
    @abstractmethod
    def is_directed(self) -> bool:
        """Whether every edge of this graph is directed."""

    @property
    @abstractmethod
    def node_count(self) -> int:
        """Number of nodes in the graph."""

    @property
    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges in the graph."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all nodes and edges."""

    @abstractmethod
    def get_nodes(self) -> AbstractSet[GraphNode[L]]:
        """Return the node set."""

    @abstractmethod
    def add_node(self, node: GraphNode[L]) -> bool:
        """Add a node; return False if a node with the same label exists."""

    @abstractmethod
    def remove_node(self, node: GraphNode[L]) -> bool:
        """Remove a node and every edge touching it."""

    @abstractmethod
    def contains_node(self, node: GraphNode[L]) -> bool:
        """Check whether a node with the same label is in the graph."""

    @abstractmethod
    def get_node_of(self, label: L) -> Optional[GraphNode[L]]:
        """Return the graph's node with the given label, or None."""

    @abstractmethod
    def get_node_index_of(self, label: L) -> int:
        """Return the index of the node with the given label."""

    @abstractmethod
    def get_node_at_index(self, index: int) -> GraphNode[L]:
        """Return the node stored at the given index."""

    @abstractmethod
    def get_edges_between(self, index1: int, index2: int) -> AbstractSet[GraphEdge[L]]:
        """Return the edges between the nodes at two indices."""

    @abstractmethod
    def add_edge(self, edge: GraphEdge[L]) -> bool:
        """Add an edge; return False if an equal edge exists."""

    @abstractmethod
    def remove_edge(self, edge: GraphEdge[L]) -> bool:
        """Remove an edge."""

    @abstractmethod
    def contains_edge(self, edge: GraphEdge[L]) -> bool:
        """Check whether an equal edge is in the graph."""

    @abstractmethod
    def get_edges_of(self, node: GraphNode[L]) -> AbstractSet[GraphEdge[L]]:
        """Return the edges leaving a node."""

    @abstractmethod
    def get_ingoing_edges_of(self, node: GraphNode[L]) -> AbstractSet[GraphEdge[L]]:
        """Return the edges entering a node."""

    @abstractmethod
    def get_adjacent_nodes_of(self, node: GraphNode[L]) -> AbstractSet[GraphNode[L]]:
        """Return the nodes one outgoing edge away from a node."""

    @abstractmethod
    def get_predecessor_nodes_of(self, node: GraphNode[L]) -> AbstractSet[GraphNode[L]]:
        """Return the nodes with an edge into a node."""

    def get_edges(self) -> set[GraphEdge[L]]:
        """
        Collect every edge of the graph.

        Returns:
            A new set holding all edges
        """
        edges: set[GraphEdge[L]] = set()
        for node in self.get_nodes():
            edges.update(self.get_edges_of(node))
        return edges

    def is_empty(self) -> bool:
        """Check whether the graph has no nodes."""
        return self.node_count == 0

    def size(self) -> int:
        """Return the number of nodes plus the number of edges."""
        return self.node_count + self.edge_count

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, node: object) -> bool:
        if not isinstance(node, GraphNode):
            return False
        return self.contains_node(node)

    def __iter__(self) -> Iterator[GraphNode[L]]:
        return iter(self.get_nodes())
