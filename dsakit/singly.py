"""Linked lists: the behaviour they share and a singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass(eq=False, slots=True)
class Node:
    """One link of a singly linked chain."""

    value: Any
    next: Node | None = None


class _LinkedBase:
    """Positional editing shared by the linked lists.

    Subclasses provide ``_clear``, ``_nodes``, ``push_front``, ``append``,
    ``_insert_inside``, ``_pop_front`` and ``_delete_inside``, and expose
    the public operations through the checked helpers below.
    """

    _size: int

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"

    def _reset(self, values: Iterable[Any]) -> None:
        self._size = 0
        self._clear()
        for value in values:
            self.append(value)

    def _values(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def _check_index(self, index: int, *, inserting: bool = False) -> None:
        limit = self._size + 1 if inserting else self._size
        if not 0 <= index < limit:
            raise IndexError(f"index {index} out of range for {self._size} elements")

    def _require_items(self) -> None:
        if not self._size:
            raise IndexError("pop from an empty list")

    def _nth(self, index: int) -> Any:
        self._check_index(index)
        return next(islice(self._nodes(), index, None))

    def _checked_insert(self, index: int, value: Any) -> None:
        self._check_index(index, inserting=True)
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.append(value)
        else:
            self._insert_inside(index, value)

    def _checked_pop_front(self) -> Any:
        self._require_items()
        return self._pop_front()

    def _checked_delete(self, index: int) -> Any:
        self._check_index(index)
        if index == 0:
            return self._pop_front()
        return self._delete_inside(index)

    def _checked_pop_back(self) -> Any:
        self._require_items()
        return self._checked_delete(self._size - 1)

    def _remove_first(self, value: Any) -> None:
        for index, item in enumerate(self._values()):
            if item == value:
                self._checked_delete(index)
                return
        raise ValueError(f"{value!r} is not in the list")


class SinglyLinkedList(_LinkedBase):
    """A chain of nodes, each pointing to the one after it."""

    _head: Node | None
    _tail: Node | None

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._reset(values)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._size

    def _clear(self) -> None:
        self._head = None
        self._tail = None

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def node_at(self, index: int) -> Node:
        """Return the node at 0-based ``index``."""
        return self._nth(index)

    def push_front(self, value: Any) -> None:
        """Put ``value`` before the first element."""
        self._head = Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at(self, index: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at 0-based ``index``."""
        self._checked_insert(index, value)

    def append(self, value: Any) -> None:
        """Put ``value`` after the last element."""
        if self._tail is None:
            self.push_front(value)
        else:
            self._link_after(self._tail, value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert ``value`` right after ``node`` and return the new node."""
        if not any(candidate is node for candidate in self._nodes()):
            raise ValueError("node does not belong to this list")
        return self._link_after(node, value)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
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

    def _link_after(self, node: Node, value: Any) -> Node:
        new = Node(value, node.next)
        node.next = new
        if node is self._tail:
            self._tail = new
        self._size += 1
        return new

    def _insert_inside(self, index: int, value: Any) -> None:
        self._link_after(self._nth(index - 1), value)

    def _pop_front(self) -> Any:
        node = self._head
        assert node is not None
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def _delete_inside(self, index: int) -> Any:
        previous = self._nth(index - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.value