"""
Breadth-First Search for adjgraph

This module implements a generic BFS over any Graph. A run annotates every
node reached from the source with:
- distance: the minimum number of edges from the source
- previous: its parent in a shortest-path tree rooted at the source
- color: FINISHED once its outgoing edges have been examined

Nodes that cannot be reached keep color UNVISITED, distance None and no
predecessor.

Customization:
    visit_node() is called once per reached node, when it turns FINISHED.
    It does nothing by default. Either subclass BFSVisitor and override it,
    or pass a callable as on_finish. Nothing else in the algorithm is
    meant to be specialized.

Limitations:
    Traversal state is stored on the node objects themselves. Only one
    traversal may run at a time over a given set of nodes, and the graph
    must not be mutated while a traversal is running.
"""

import logging
from collections import deque
from typing import Callable, Generic, Optional

from adjgraph.exceptions import InvalidArgumentError, NullInputError
from adjgraph.graph.base import Graph
from adjgraph.models import GraphNode, L, NodeColor

logger = logging.getLogger(__name__)


class BFSVisitor(Generic[L]):
    """
    Breadth-first traversal with an overridable visitation hook.

    The visitor holds no traversal state of its own, so one instance can
    be reused for any number of runs over any graphs.

    Usage:
        visitor = BFSVisitor(on_finish=lambda node: print(node.label))
        visitor.traverse(graph, source)
        for node in graph.get_nodes():
            print(node.label, node.distance)
    """

    def __init__(self, on_finish: Optional[Callable[[GraphNode[L]], None]] = None) -> None:
        """
        Args:
            on_finish: Optional callback invoked by the default visit_node
        """
        self._on_finish = on_finish

    def traverse(self, graph: Graph[L], source: GraphNode[L]) -> int:
        """
        Run a BFS from source, annotating the nodes of graph.

        Every node is first reset, so annotations from earlier runs never
        leak into this one. Outgoing edges are examined in the order the
        graph yields them; for AdjacencyListDirectedGraph that is edge
        insertion order.

        Args:
            graph: The graph to visit
            source: The node to start from; an equal node from another
                instance is resolved to the graph's own node

        Returns:
            Number of nodes reached, source included

        Raises:
            NullInputError: If graph or source is None
            InvalidArgumentError: If source is not a node of graph
        """
        if graph is None or source is None:
            raise NullInputError("Graph and source cannot be None")
        if not graph.contains_node(source):
            raise InvalidArgumentError(f"Source {source.label!r} is not in the graph")
        source = graph.get_node_of(source.label) or source

        for node in graph.get_nodes():
            node.reset()

        source.color = NodeColor.DISCOVERED
        source.distance = 0
        frontier: deque[GraphNode[L]] = deque([source])
        finished = 0

        while frontier:
            u = frontier.popleft()
            for edge in graph.get_edges_of(u):
                v = edge.head
                if v.color is NodeColor.UNVISITED:
                    v.color = NodeColor.DISCOVERED
                    v.distance = u.distance + 1
                    v.previous = u
                    frontier.append(v)
            u.color = NodeColor.FINISHED
            finished += 1
            self.visit_node(u)

        logger.debug(
            "BFS from %r reached %d of %d nodes", source.label, finished, graph.node_count
        )
        return finished

    def visit_node(self, node: GraphNode[L]) -> None:
        """
        Hook called when a node turns FINISHED.

        Does nothing unless a callback was given; override in a subclass
        to act on each visited node.
        """
        if self._on_finish is not None:
            self._on_finish(node)


class VisitOrderRecorder(BFSVisitor[L]):
    """
    BFS visitor that records nodes in the order they finish.

    The record is cleared at the start of every traversal.

    Attributes:
        visited: Finished nodes, in visitation order
    """

    def __init__(self) -> None:
        super().__init__()
        self.visited: list[GraphNode[L]] = []

    def traverse(self, graph: Graph[L], source: GraphNode[L]) -> int:
        self.visited = []
        return super().traverse(graph, source)

    def visit_node(self, node: GraphNode[L]) -> None:
        self.visited.append(node)


def path_to(node: GraphNode[L], graph: Optional[Graph[L]] = None) -> list[GraphNode[L]]:
    """
    Rebuild the traversal-tree path ending at a node.

    Follows the predecessor links left by the last traversal back to its
    source. After a BFS this is a shortest path.

    Annotations live on the graph's own node instances. Without a graph,
    node must be one of them (from get_node_of or get_nodes); an equal
    copy carries no annotations and yields an empty path.

    Args:
        node: The last node of the path
        graph: Optional graph used to resolve node to its stored instance

    Returns:
        Nodes from the source to node, or an empty list if node was not
        reached

    Raises:
        NullInputError: If node is None
        InvalidArgumentError: If graph is given and node is not in it
    """
    if node is None:
        raise NullInputError("Node cannot be None")
    if graph is not None:
        if not graph.contains_node(node):
            raise InvalidArgumentError(f"Node {node.label!r} is not in the graph")
        node = graph.get_node_of(node.label) or node
    if node.color is NodeColor.UNVISITED:
        return []

    path: list[GraphNode[L]] = []
    current: Optional[GraphNode[L]] = node
    while current is not None:
        path.append(current)
        current = current.previous
    path.reverse()
    return path
