"""
adjgraph

Hash-map backed adjacency-list directed graph with a reusable
breadth-first traversal framework.
"""

from adjgraph.exceptions import (
    GraphError,
    NullInputError,
    InvalidArgumentError,
    InvalidEdgeError,
    UnsupportedOperationError,
    GraphFormatError,
)
from adjgraph.models import NodeColor, GraphNode, GraphEdge
from adjgraph.graph import Graph, AdjacencyListDirectedGraph
from adjgraph.traversal import BFSVisitor, VisitOrderRecorder, path_to

__all__ = [
    "GraphError",
    "NullInputError",
    "InvalidArgumentError",
    "InvalidEdgeError",
    "UnsupportedOperationError",
    "GraphFormatError",
    "NodeColor",
    "GraphNode",
    "GraphEdge",
    "Graph",
    "AdjacencyListDirectedGraph",
    "BFSVisitor",
    "VisitOrderRecorder",
    "path_to",
]
__version__ = "0.1.0"
