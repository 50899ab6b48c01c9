"""
Traversal module for adjgraph.

Provides the breadth-first search visitor and helpers to read the
traversal tree it leaves on the nodes.
"""

from adjgraph.traversal.bfs import BFSVisitor, VisitOrderRecorder, path_to

__all__ = [
    "BFSVisitor",
    "VisitOrderRecorder",
    "path_to",
]
