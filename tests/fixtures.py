"""
Test fixtures for adjgraph.

This module provides sample edge lists and helpers for building the
graphs used across the test suite.
"""

from adjgraph.graph import AdjacencyListDirectedGraph, build_graph_from_edges

# A -> B -> C, A -> D, plus isolated E
SIMPLE_EDGES = [("A", "B"), ("B", "C"), ("A", "D")]

# Two routes from s to t of different length, and a back edge
DIAMOND_EDGES = [
    ("s", "a"),
    ("a", "b"),
    ("b", "t"),
    ("s", "c"),
    ("c", "t"),
    ("t", "s"),
]

# A cycle with a tail hanging off it
CYCLE_EDGES = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5)]

# Larger graph with several equal-length routes
GRID_EDGES = [
    ((r, c), (r + dr, c + dc))
    for r in range(4)
    for c in range(4)
    for dr, dc in ((0, 1), (1, 0))
    if r + dr < 4 and c + dc < 4
]

EDGE_LIST_TEXT = """\
# sample routes
A B
B C 2.5
A D      # direct link
E
"""

MALFORMED_TOO_MANY_FIELDS = """\
A B
A B 1 extra
"""

MALFORMED_WEIGHT = """\
A B heavy
"""


def simple_graph() -> AdjacencyListDirectedGraph:
    """The A/B/C/D graph with an isolated node E."""
    return build_graph_from_edges(SIMPLE_EDGES, nodes=["A", "B", "C", "D", "E"])
