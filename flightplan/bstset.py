"""An ordered set backed by an unbalanced binary search tree."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "left", "right", "parent")

    def __init__(self, value: Any, parent: Optional["_Node"] = None) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent = parent


def _successor(node: _Node) -> Optional[_Node]:
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    parent = node.parent
    while parent is not None and parent.right is node:
        node = parent
        parent = parent.parent
    return parent


def _walk(node: Optional[_Node]) -> Iterator[Any]:
    while node is not None:
        yield node.value
        node = _successor(node)


class BSTSet(Generic[T]):
    """A set of comparable values kept in ascending order.

    Values are compared with ``==`` and ``<``. Inserting a value equal to one
    already present replaces the stored value.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Add ``value``, replacing an equal value if one is stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size = 1
            return
        cur = self._root
        while True:
            if value == cur.value:
                cur.value = value
                return
            go_left = value < cur.value
            nxt = cur.left if go_left else cur.right
            if nxt is None:
                node = _Node(value, cur)
                if go_left:
                    cur.left = node
                else:
                    cur.right = node
                self._size += 1
                return
            cur = nxt

    def _locate(self, value: T) -> Optional[_Node]:
        cur = self._root
        while cur is not None:
            if value == cur.value:
                return cur
            cur = cur.left if value < cur.value else cur.right
        return None

    def find(self, value: T) -> Iterator[T]:
        """Iterate in ascending order starting at the value equal to ``value``.

        The iterator is empty when no such value is stored.
        """
        return _walk(self._locate(value))

    def find_first_not_smaller(self, value: T) -> Iterator[T]:
        """Iterate in ascending order from the smallest stored value >= ``value``."""
        cur = self._root
        candidate: Optional[_Node] = None
        while cur is not None:
            if value == cur.value:
                return _walk(cur)
            if value < cur.value:
                candidate = cur
                cur = cur.left
            else:
                cur = cur.right
        return _walk(candidate)

    def __iter__(self) -> Iterator[T]:
        node = self._root
        if node is not None:
            while node.left is not None:
                node = node.left
        return _walk(node)

    def __contains__(self, value: object) -> bool:
        return self._locate(value) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._size