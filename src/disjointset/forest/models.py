"""Data models for the disjoint-set forest."""

from collections.abc import Hashable
from dataclasses import asdict, dataclass
from typing import Any


@dataclass(slots=True)
class Node:
    """A single element tracked by a disjoint-set forest.

    Attributes
    ----------
    value : Hashable
        The element's value, reported when this node is a root.
    rank : int
        Approximate upper bound on subtree height from the last time this
        node was a root. Only compared between roots.
    parent : int | None
        Arena index of the parent node, or None for a root.
    size : int
        Number of live elements in the partition. Only meaningful on roots.
    """

    value: Hashable
    rank: int = 0
    parent: int | None = None
    size: int = 1

    @property
    def is_root(self) -> bool:
        """Whether this node is the representative of its partition."""
        return self.parent is None

    def clone(self) -> "Node":
        """Return an independent copy of this node."""
        return Node(value=self.value, rank=self.rank, parent=self.parent, size=self.size)


@dataclass(frozen=True)
class ForestStats:
    """Summary counters for a disjoint-set forest.

    Attributes
    ----------
    elements : int
        Number of registered elements.
    partitions : int
        Number of distinct partitions.
    max_rank : int
        Largest rank held by any root (0 for an empty forest).
    """

    elements: int
    partitions: int
    max_rank: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
