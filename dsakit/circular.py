"""A circular singly linked list whose last node points back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.singly import Node, _LinkedBase


class CircularLinkedList(_LinkedBase):
    """A ring of nodes; iteration starts at the head and stops after one lap."""

    _tail: Node | None

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._reset(values)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def _clear(self) -> None:
        self._tail = None

    def _nodes(self) -> Iterator[Node]:
        node = self._tail
        for _ in range(self._size):
            assert node is not None and node.next is not None
            node = node.next
            yield node

    def push_front(self, value: Any) -> None:
        """Put ``value`` before the head; the last node then points to it."""
        node = Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 0-based ``index``."""
        self._checked_insert(index, value)

    def append(self, value: Any) -> None:
        """Put ``value`` after the last node, closing the ring to the head."""
        self.push_front(value)
        self._tail = self._tail.next  # type: ignore[union-attr]

    def pop_front(self) -> Any:
        """Remove and return the head element."""
        return self._checked_pop_front()

    def delete_at(self, index: int) -> Any:
        """Remove and return the element at 0-based ``index``."""
        return self._checked_delete(index)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        return self._checked_pop_back()

    def remove(self, value: Any) -> None:
        """Remove the first element, counted from the head, equal to ``value``."""
        self._remove_first(value)

    def _insert_inside(self, index: int, value: Any) -> None:
        before = self._nth(index - 1)
        before.next = Node(value, before.next)
        self._size += 1

    def _unlink_after(self, previous: Node) -> Any:
        target = previous.next
        assert target is not None
        if target is previous:
            self._tail = None
        else:
            previous.next = target.next
            if target is self._tail:
                self._tail = previous
        self._size -= 1
        return target.value

    def _pop_front(self) -> Any:
        assert self._tail is not None
        return self._unlink_after(self._tail)

    def _delete_inside(self, index: int) -> Any:
        return self._unlink_after(self._nth(index - 1))