"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from dsakit.singly import _LinkedBase


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    prev: _Node | None = None
    next: _Node | None = None


class DoublyLinkedList(_LinkedBase):
    """A chain of nodes linked to both neighbours."""

    _head: _Node | None
    _tail: _Node | None

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._reset(values)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _clear(self) -> None:
        self._head = None
        self._tail = None

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _nth(self, index: int) -> _Node:
        """Walk from whichever end is nearer to ``index``."""
        self._check_index(index)
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        assert node is not None
        return node

    def push_front(self, value: Any) -> None:
        """Put ``value`` before the first element."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 0-based ``index``."""
        self._checked_insert(index, value)

    def append(self, value: Any) -> None:
        """Put ``value`` after the last element."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        return self._checked_pop_front()

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at 0-based ``index``."""
        return self._checked_delete(index)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        return self._checked_pop_back()

    def _insert_inside(self, index: int, value: Any) -> None:
        before = self._nth(index - 1)
        after = before.next
        assert after is not None
        node = _Node(value, before, after)
        before.next = node
        after.prev = node
        self._size += 1

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def _pop_front(self) -> Any:
        assert self._head is not None
        return self._unlink(self._head)

    def _delete_inside(self, index: int) -> Any:
        return self._unlink(self._nth(index))