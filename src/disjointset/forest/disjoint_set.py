"""Disjoint-set (union-find) forest with path compression and union by rank."""

from collections.abc import Hashable

from disjointset.errors import ElementNotFoundError
from disjointset.forest.models import ForestStats, Node

__all__ = ["DisjointSet"]


class DisjointSet:
    """Disjoint-set forest over arbitrary hashable values.

    Nodes live in a dense arena and refer to their parent by arena index.
    The lookup table maps each registered value to the index of its node.
    Unregistered values are reported by returning None, never by raising
    (use ``require`` for a raising lookup).

    Attributes
    ----------
    partition_count : int
        Number of distinct partitions currently tracked.
    """

    def __init__(self) -> None:
        """Initialize an empty forest."""
        self._nodes: list[Node] = []
        self._index: dict[Hashable, int] = {}
        self.partition_count = 0

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, value: object) -> bool:
        return value in self._index

    def __repr__(self) -> str:
        return f"DisjointSet(elements={len(self)}, partitions={self.partition_count})"

    def __copy__(self) -> "DisjointSet":
        return self.copy()

    def copy(self) -> "DisjointSet":
        """Return an independent forest with the same partitions and ranks.

        Returns
        -------
        DisjointSet
            Copy whose nodes can be mutated without affecting this forest.
        """
        other = DisjointSet()
        other._nodes = [node.clone() for node in self._nodes]
        other._index = dict(self._index)
        other.partition_count = self.partition_count
        return other

    def make_set(self, value: Hashable) -> None:
        """Create a singleton partition containing value.

        Re-inserting a registered value overwrites it with a fresh singleton.
        The other members of its previous partition stay together; if value
        was their representative, the earliest registered remaining member
        takes over with the old root's rank.

        Parameters
        ----------
        value : Hashable
            Element to register.
        """
        old = self._index.get(value)
        if old is not None:
            self._detach(value, old)
        self._index[value] = len(self._nodes)
        self._nodes.append(Node(value=value))
        self.partition_count += 1

    def find(self, value: Hashable) -> Hashable | None:
        """Find the representative of value's partition.

        Every node visited on the way to the root is re-pointed directly at
        the root (path compression), on every call.

        Parameters
        ----------
        value : Hashable
            Element to look up.

        Returns
        -------
        Hashable | None
            Value of the partition's root, or None if value is unregistered.
        """
        root = self._find_index(value)
        if root is None:
            return None
        return self._nodes[root].value

    def require(self, value: Hashable) -> Hashable:
        """Find the representative of value's partition or raise.

        Parameters
        ----------
        value : Hashable
            Element to look up.

        Returns
        -------
        Hashable
            Value of the partition's root.

        Raises
        ------
        ElementNotFoundError
            If value was never registered.
        """
        root = self._find_index(value)
        if root is None:
            raise ElementNotFoundError(value)
        return self._nodes[root].value

    def union(self, value_one: Hashable, value_two: Hashable) -> Hashable | None:
        """Merge the partitions containing value_one and value_two.

        The lower-rank root is attached under the higher-rank one. On a rank
        tie, value_two's root is attached under value_one's root, whose rank
        is incremented.

        Note that the return value is the root that was ABSORBED (the one
        that is no longer on top of its tree), not the surviving
        representative. When both values already share a root, that shared
        root is returned and nothing changes.

        Parameters
        ----------
        value_one : Hashable
            First element.
        value_two : Hashable
            Second element.

        Returns
        -------
        Hashable | None
            Value of the absorbed root (or the shared root), or None if
            either value is unregistered.
        """
        root_one = self._find_index(value_one)
        if root_one is None:
            return None
        root_two = self._find_index(value_two)
        if root_two is None:
            return None

        node_one = self._nodes[root_one]
        node_two = self._nodes[root_two]

        if root_one == root_two:
            return node_one.value

        if node_one.rank < node_two.rank:
            self._attach(root_one, root_two)
            return node_one.value
        if node_one.rank > node_two.rank:
            self._attach(root_two, root_one)
            return node_two.value

        self._attach(root_two, root_one)
        node_one.rank += 1
        return node_two.value

    def connected(self, value_one: Hashable, value_two: Hashable) -> bool | None:
        """Check whether two values share a partition.

        Returns
        -------
        bool | None
            None if either value is unregistered.
        """
        root_one = self._find_index(value_one)
        if root_one is None:
            return None
        root_two = self._find_index(value_two)
        if root_two is None:
            return None
        return root_one == root_two

    def size_of(self, value: Hashable) -> int | None:
        """Return the number of elements in value's partition, or None."""
        root = self._find_index(value)
        if root is None:
            return None
        return self._nodes[root].size

    def rank_of(self, value: Hashable) -> int | None:
        """Return the stored rank of value's own node, or None."""
        index = self._index.get(value)
        if index is None:
            return None
        return self._nodes[index].rank

    def parent_of(self, value: Hashable) -> Hashable | None:
        """Return the value of value's direct parent without compressing.

        Roots are their own parent. Returns None if value is unregistered.
        """
        index = self._index.get(value)
        if index is None:
            return None
        parent = self._nodes[index].parent
        if parent is None:
            return self._nodes[index].value
        return self._nodes[parent].value

    def stats(self) -> ForestStats:
        """Summarize the forest.

        Returns
        -------
        ForestStats
            Element, partition and maximum root rank counts.
        """
        max_rank = max(
            (self._nodes[i].rank for i in self._index.values() if self._nodes[i].is_root),
            default=0,
        )
        return ForestStats(
            elements=len(self._index),
            partitions=self.partition_count,
            max_rank=max_rank,
        )

    def _find_index(self, value: Hashable) -> int | None:
        index = self._index.get(value)
        if index is None:
            return None
        return self._root_of(index)

    def _root_of(self, index: int) -> int:
        nodes = self._nodes
        visited: list[int] = []
        root = index
        while nodes[root].parent is not None:
            visited.append(root)
            root = nodes[root].parent

        for i in visited:
            nodes[i].parent = root
        return root

    def _attach(self, child: int, root: int) -> None:
        self._nodes[child].parent = root
        self._nodes[root].size += self._nodes[child].size
        self.partition_count -= 1

    def _detach(self, value: Hashable, index: int) -> None:
        """Retire value's current node ahead of re-insertion.

        The retired node stays in the arena but nothing points at it
        afterwards. Remaining members of its partition are re-pointed at a
        live root. This walks the whole lookup table, so re-inserting a
        value that belongs to a larger partition costs O(n).
        """
        root = self._root_of(index)
        retired = self._nodes[index]

        if self._nodes[root].size == 1:
            self.partition_count -= 1
            return

        members = [
            i for key, i in self._index.items() if key != value and self._root_of(i) == root
        ]
        if root == index:
            root = members[0]
            self._nodes[root].parent = None
            self._nodes[root].rank = retired.rank
            self._nodes[root].size = retired.size
        for i in members:
            if i != root:
                self._nodes[i].parent = root

        self._nodes[root].size -= 1
        retired.parent = None
        retired.size = 0
