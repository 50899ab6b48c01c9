"""
Graph Builder for adjgraph

This module populates AdjacencyListDirectedGraph instances from plain data
and exports them to NetworkX.

Edge-List Format:
    One entry per line. Fields are separated by whitespace and "#" starts
    a comment. Blank lines are ignored.

        a            # isolated node
        a b          # edge a -> b
        a b 2.5      # edge a -> b with weight 2.5

    Nodes are created the first time a label appears. Labels read from
    text are always strings. A repeated (tail, head) pair keeps the first
    edge and its weight.

Design Decisions:
    - The graph itself never performs I/O; reading files happens here
    - Export keys NetworkX nodes by label so results can be compared with
      NetworkX algorithms directly
"""

import logging
from pathlib import Path
from typing import Hashable, Iterable, Optional, Sequence

import networkx as nx

from adjgraph.config import COMMENT_PREFIX, EDGE_LIST_ENCODING, MAX_FIELDS_PER_LINE
from adjgraph.exceptions import GraphFormatError, NullInputError
from adjgraph.graph.adjacency import AdjacencyListDirectedGraph
from adjgraph.graph.base import Graph
from adjgraph.models import GraphEdge, GraphNode

logger = logging.getLogger(__name__)


def build_graph_from_edges(
    edges: Iterable[Sequence],
    nodes: Iterable[Hashable] = (),
) -> AdjacencyListDirectedGraph:
    """
    Build a directed graph from label tuples.

    Args:
        edges: (tail, head) or (tail, head, weight) tuples of labels
        nodes: Extra labels to add, e.g. for isolated nodes. They are
            added before the edges, in the given order.

    Returns:
        A new graph holding every mentioned node and edge

    Raises:
        ValueError: If a tuple does not have two or three items

    Example:
        >>> graph = build_graph_from_edges([("a", "b"), ("b", "c", 2.0)])
        >>> graph.node_count, graph.edge_count
        (3, 2)
    """
    graph: AdjacencyListDirectedGraph = AdjacencyListDirectedGraph()

    for label in nodes:
        _ensure_node(graph, label)

    for item in edges:
        if len(item) not in (2, 3):
            raise ValueError(f"Expected (tail, head[, weight]), got {item!r}")
        tail = _ensure_node(graph, item[0])
        head = _ensure_node(graph, item[1])
        weight = item[2] if len(item) == 3 else None
        graph.add_edge(GraphEdge(tail, head, weight=weight))

    return graph


def build_graph_from_text(text: str) -> AdjacencyListDirectedGraph:
    """
    Build a directed graph from edge-list text.

    Args:
        text: Edge-list content (see module docstring for the format)

    Returns:
        A new graph

    Raises:
        GraphFormatError: If a line has too many fields or a bad weight
    """
    graph: AdjacencyListDirectedGraph = AdjacencyListDirectedGraph()

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        fields = raw_line.split(COMMENT_PREFIX, 1)[0].split()
        if not fields:
            continue
        if len(fields) > MAX_FIELDS_PER_LINE:
            raise GraphFormatError(
                f"expected at most {MAX_FIELDS_PER_LINE} fields, got {len(fields)}",
                line_number=line_number,
            )

        tail = _ensure_node(graph, fields[0])
        if len(fields) == 1:
            continue

        head = _ensure_node(graph, fields[1])
        weight: Optional[float] = None
        if len(fields) == 3:
            try:
                weight = float(fields[2])
            except ValueError:
                raise GraphFormatError(
                    f"invalid weight {fields[2]!r}", line_number=line_number
                ) from None

        if not graph.add_edge(GraphEdge(tail, head, weight=weight)):
            logger.debug("Line %d: duplicate edge %s -> %s ignored", line_number, tail, head)

    return graph


def build_graph_from_file(path: Path | str) -> AdjacencyListDirectedGraph:
    """
    Build a directed graph from an edge-list file.

    Args:
        path: Path to the file

    Returns:
        A new graph

    Raises:
        FileNotFoundError: If the file does not exist
        GraphFormatError: If the content is malformed
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")

    graph = build_graph_from_text(path.read_text(encoding=EDGE_LIST_ENCODING))
    logger.debug(
        "Loaded %s: %d nodes, %d edges", path, graph.node_count, graph.edge_count
    )
    return graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Export a graph to a NetworkX DiGraph keyed by node labels.

    Weighted edges get a "weight" attribute.

    Args:
        graph: The graph to export

    Returns:
        A new NetworkX DiGraph

    Raises:
        NullInputError: If graph is None
    """
    if graph is None:
        raise NullInputError("Graph cannot be None")

    result = nx.DiGraph()
    for node in graph.get_nodes():
        result.add_node(node.label)
        for edge in graph.get_edges_of(node):
            if edge.has_weight:
                result.add_edge(edge.tail.label, edge.head.label, weight=edge.weight)
            else:
                result.add_edge(edge.tail.label, edge.head.label)
    return result


def _ensure_node(graph: AdjacencyListDirectedGraph, label: Hashable) -> GraphNode:
    """Return the node for label, adding it first if needed."""
    node = graph.get_node_of(label)
    if node is None:
        node = GraphNode(label)
        graph.add_node(node)
    return node
