"""
Core Data Models for adjgraph

This module defines the value records the graph is built from:
- NodeColor: Traversal state of a node during a visit
- GraphNode: A node identified by its label, carrying traversal annotations
- GraphEdge: An ordered (or unordered) pair of nodes with an optional weight

These models are designed so that:
- Identity is value based: nodes compare by label, edges by endpoints
- Traversal annotations (color, distance, previous) are mutable and never
  take part in equality or hashing
- They can be used directly as dict keys and set members
"""

from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from typing import Any, Generic, Hashable, Optional, TypeVar

from adjgraph.exceptions import NullInputError

L = TypeVar("L", bound=Hashable)


def _check_identity_write(obj: object, name: str, identity_fields: tuple[str, ...]) -> None:
    """Reject writes to an identity field once __init__ has set it."""
    if name in identity_fields and name in obj.__dict__:
        raise FrozenInstanceError(
            f"cannot assign to field {name!r} of {type(obj).__name__}"
        )


class NodeColor(Enum):
    """
    Traversal state of a node.

    States:
        UNVISITED: Not yet reached by the current traversal.
        DISCOVERED: Reached and waiting in the frontier.
        FINISHED: Dequeued and all its outgoing edges examined.

    Transitions are monotonic: UNVISITED -> DISCOVERED -> FINISHED.
    """

    UNVISITED = "unvisited"
    DISCOVERED = "discovered"
    FINISHED = "finished"


@dataclass(unsafe_hash=True)
class GraphNode(Generic[L]):
    """
    A graph node identified by an immutable label.

    Two nodes are equal iff their labels are equal. The remaining fields
    are annotations written by traversals and are excluded from equality
    and hashing, so a node can be mutated while it sits in a set or a
    dict key.

    Attributes:
        label: Hashable identifier of the node, never None
        color: Current traversal state
        distance: Hop count from the traversal source, None while undefined
        previous: Predecessor in the traversal tree, None for the source
            and for nodes that were not reached

    Invariants:
        - label is not None
        - label is read-only: reassigning or deleting it raises
          FrozenInstanceError, the annotations stay writable
    """

    label: L
    color: NodeColor = field(default=NodeColor.UNVISITED, compare=False)
    distance: Optional[int] = field(default=None, compare=False)
    previous: Optional["GraphNode[L]"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        """Reject None labels."""
        if self.label is None:
            raise NullInputError("A node label cannot be None")

    def __setattr__(self, name: str, value: Any) -> None:
        _check_identity_write(self, name, ("label",))
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        _check_identity_write(self, name, ("label",))
        super().__delattr__(name)

    def reset(self) -> None:
        """Restore the annotations of a node that was never visited."""
        self.color = NodeColor.UNVISITED
        self.distance = None
        self.previous = None

    def __str__(self) -> str:
        return str(self.label)


@dataclass(eq=False)
class GraphEdge(Generic[L]):
    """
    An edge between two nodes.

    For a directed edge node1 is the tail and node2 the head, and equality
    is over the ordered pair (tail, head). An undirected edge compares
    equal to any undirected edge over the same two nodes in either order.
    A directed edge never equals an undirected one. The weight does not
    participate in equality: two edges over the same pair with different
    weights are the same edge.

    Attributes:
        node1: Tail of the edge
        node2: Head of the edge
        directed: Whether the edge has an orientation
        weight: Optional numeric weight, None when the edge is unweighted

    Invariants:
        - node1, node2 and directed are read-only; only weight may change
    """

    node1: GraphNode[L]
    node2: GraphNode[L]
    directed: bool = True
    weight: Optional[float] = None

    _IDENTITY_FIELDS = ("node1", "node2", "directed")

    def __post_init__(self) -> None:
        """Reject missing endpoints."""
        if self.node1 is None or self.node2 is None:
            raise NullInputError("Edge endpoints cannot be None")

    def __setattr__(self, name: str, value: Any) -> None:
        _check_identity_write(self, name, self._IDENTITY_FIELDS)
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        _check_identity_write(self, name, self._IDENTITY_FIELDS)
        super().__delattr__(name)

    @property
    def tail(self) -> GraphNode[L]:
        """Node the edge leaves from."""
        return self.node1

    @property
    def head(self) -> GraphNode[L]:
        """Node the edge points to."""
        return self.node2

    @property
    def has_weight(self) -> bool:
        """Check whether a weight was assigned."""
        return self.weight is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphEdge):
            return NotImplemented
        if self.directed != other.directed:
            return False
        if self.directed:
            return self.node1 == other.node1 and self.node2 == other.node2
        return {self.node1, self.node2} == {other.node1, other.node2}

    def __hash__(self) -> int:
        if self.directed:
            return hash((True, self.node1, self.node2))
        return hash((False, frozenset((self.node1, self.node2))))

    def __str__(self) -> str:
        arrow = "->" if self.directed else "--"
        if self.has_weight:
            return f"{self.node1} {arrow} {self.node2} ({self.weight:g})"
        return f"{self.node1} {arrow} {self.node2}"
