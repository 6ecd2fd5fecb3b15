"""Priority queues and a disjoint-set forest over integer ids."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Optional, Union

Weights = Union[Sequence[float], Mapping[int, float]]


class BinaryHeap:
    """Binary min-heap of ids, ordered by an external weight table."""

    def __init__(self, weights: Weights, items: Iterable[int] = ()) -> None:
        self._weights = weights
        self._elems: list[int] = list(items)
        for index in reversed(range(len(self._elems) // 2)):
            self._sift_down(index)

    def __len__(self) -> int:
        return len(self._elems)

    def push(self, item: int) -> None:
        """Add an id to the heap."""
        self._elems.append(item)
        self._sift_up(len(self._elems) - 1)

    def pop(self) -> int:
        """Remove and return the id with the smallest weight."""
        elems = self._elems
        if not elems:
            raise IndexError("pop from an empty heap")
        top = elems[0]
        last = elems.pop()
        if elems:
            elems[0] = last
            self._sift_down(0)
        return top

    def _sift_up(self, index: int) -> None:
        elems, weights = self._elems, self._weights
        item = elems[index]
        value = weights[item]
        while index:
            parent = (index - 1) >> 1
            if not value < weights[elems[parent]]:
                break
            elems[index] = elems[parent]
            index = parent
        elems[index] = item

    def _sift_down(self, index: int) -> None:
        elems, weights = self._elems, self._weights
        size = len(elems)
        item = elems[index]
        value = weights[item]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            if child + 1 < size and weights[elems[child + 1]] < weights[elems[child]]:
                child += 1
            if weights[elems[child]] < value:
                elems[index] = elems[child]
                index = child
            else:
                break
        elems[index] = item


class _Node:
    __slots__ = ("item", "weight", "child", "sibling", "prev")

    def __init__(self, item: int, weight: float) -> None:
        self.item = item
        self.weight = weight
        self.child: Optional[_Node] = None
        self.sibling: Optional[_Node] = None
        # Parent if this node is the first child, otherwise the left sibling.
        self.prev: Optional[_Node] = None


def _meld(left: Optional[_Node], right: Optional[_Node]) -> Optional[_Node]:
    if left is None:
        return right
    if right is None:
        return left
    if left.weight < right.weight:
        winner, loser = left, right
    else:
        winner, loser = right, left
    loser.sibling = winner.child
    if winner.child is not None:
        winner.child.prev = loser
    winner.child = loser
    loser.prev = winner
    winner.sibling = None
    winner.prev = None
    return winner


class PairingHeap:
    """Pairing min-heap of ids with decrease-key.

    Weights are read from the external table when an id is pushed or updated.
    """

    def __init__(self, weights: Weights) -> None:
        self._weights = weights
        self._root: Optional[_Node] = None
        self._nodes: dict[int, _Node] = {}

    def __bool__(self) -> bool:
        return self._root is not None

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, item: object) -> bool:
        return item in self._nodes

    def push(self, item: int) -> None:
        """Insert an id with its current weight."""
        if item in self._nodes:
            raise ValueError(f"item {item} is already in the heap")
        node = _Node(item, self._weights[item])
        self._nodes[item] = node
        self._root = _meld(self._root, node)

    def pop(self) -> int:
        """Remove and return the id with the smallest weight."""
        root = self._root
        if root is None:
            raise IndexError("pop from an empty heap")
        del self._nodes[root.item]
        self._root = self._combine(root.child)
        if self._root is not None:
            self._root.prev = None
        return root.item

    def update(self, item: int) -> None:
        """Re-read the (decreased) weight of an id already in the heap."""
        try:
            node = self._nodes[item]
        except KeyError:
            raise KeyError(f"item {item} is not in the heap") from None
        node.weight = self._weights[item]
        if node is self._root:
            return
        prev = node.prev
        if prev is not None:
            if prev.child is node:
                prev.child = node.sibling
            else:
                prev.sibling = node.sibling
        if node.sibling is not None:
            node.sibling.prev = prev
        node.sibling = None
        node.prev = None
        self._root = _meld(self._root, node)

    @staticmethod
    def _combine(first: Optional[_Node]) -> Optional[_Node]:
        if first is None or first.sibling is None:
            if first is not None:
                first.prev = None
            return first
        pairs: list[_Node] = []
        node = first
        while node is not None:
            partner = node.sibling
            following = partner.sibling if partner is not None else None
            node.sibling = node.prev = None
            if partner is not None:
                partner.sibling = partner.prev = None
            melded = _meld(partner, node)
            assert melded is not None
            pairs.append(melded)
            node = following
        result = pairs.pop()
        while pairs:
            result = _meld(result, pairs.pop())
        return result


class DisjointSet:
    """Union-find over ids 0..size-1 with union by height and path compression."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        # A negative entry marks a root and holds its negated height.
        self._parent = [-1] * size

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, item: int) -> None:
        if not 0 <= item < len(self._parent):
            raise IndexError(f"item {item} out of range")

    def find(self, item: int) -> int:
        """Return the representative of the class holding item."""
        self._check(item)
        parent = self._parent
        root = item
        while parent[root] >= 0:
            root = parent[root]
        while item != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, first: int, second: int) -> int:
        """Merge the classes of two items and return the new representative."""
        root1, root2 = self.find(first), self.find(second)
        if root1 == root2:
            return root1
        parent = self._parent
        if parent[root1] > parent[root2]:
            parent[root1] = root2
            return root2
        if parent[root1] == parent[root2]:
            parent[root1] -= 1
        parent[root2] = root1
        return root1