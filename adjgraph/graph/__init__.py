"""
Graph module for adjgraph.

This module provides the abstract graph contract, the hash-map backed
adjacency-list directed graph, and builders that populate graphs from
plain data or edge-list files.
"""

from adjgraph.graph.base import Graph
from adjgraph.graph.adjacency import AdjacencyListDirectedGraph
from adjgraph.graph.builder import (
    build_graph_from_edges,
    build_graph_from_text,
    build_graph_from_file,
    to_networkx,
)

__all__ = [
    "Graph",
    "AdjacencyListDirectedGraph",
    "build_graph_from_edges",
    "build_graph_from_text",
    "build_graph_from_file",
    "to_networkx",
]
