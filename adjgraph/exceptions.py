"""
Exceptions for adjgraph.

Every error raised by the graph and traversal code derives from GraphError.
The concrete classes also inherit from the closest built-in exception so
callers that only know about TypeError/ValueError/NotImplementedError
still catch them.

Hierarchy:
    GraphError
    ├── NullInputError          (TypeError)
    ├── InvalidArgumentError    (ValueError)
    │   └── InvalidEdgeError
    ├── UnsupportedOperationError (NotImplementedError)
    └── GraphFormatError        (ValueError)

None of these are transient: they signal a broken caller contract and are
never retried or recovered internally.
"""

from typing import Optional


class GraphError(Exception):
    """Base class for all adjgraph errors."""


class NullInputError(GraphError, TypeError):
    """
    Raised when a required argument is None.

    Checked before any other validation, so a None node or edge never
    reaches the membership tests.
    """


class InvalidArgumentError(GraphError, ValueError):
    """
    Raised when an argument is well formed but violates a graph invariant.

    Examples:
        * Querying the edges of a node that is not in the graph
        * Starting a traversal from a node that is not in the graph
    """


class InvalidEdgeError(InvalidArgumentError):
    """
    Raised when an edge cannot belong to the graph.

    Either one of its endpoints was never added as a node, or its
    directedness disagrees with the graph's.
    """


class UnsupportedOperationError(GraphError, NotImplementedError):
    """
    Raised for operations the representation permanently does not support.

    Node/edge removal and index-based access fall in this category. This is
    a design limitation, not a missing feature and not an empty result.
    """


class GraphFormatError(GraphError, ValueError):
    """
    Raised when edge-list text cannot be parsed.

    Attributes:
        line_number: 1-indexed line where parsing failed, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        super().__init__(message)

    def __str__(self) -> str:
        """Prefix the message with the offending line number."""
        if self.line_number is None:
            return super().__str__()
        return f"line {self.line_number}: {super().__str__()}"
