"""Queues: bounded array queue, linked queue, deque, circular and priority queues."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from dsakit.circular import CircularLinkedList
from dsakit.doubly import DoublyLinkedList
from dsakit.singly import SinglyLinkedList

DEFAULT_CAPACITY = 40


class QueueOverflow(OverflowError):
    """Raised when a value is added to a full queue."""


class QueueUnderflow(IndexError):
    """Raised when a value is taken from an empty queue."""


class ArrayQueue:
    """A first-in, first-out queue stored in an array of fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """The most values the queue can hold."""
        return self._capacity

    def is_full(self) -> bool:
        """Tell whether no more values fit."""
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._items

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueOverflow("queue overflow")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueUnderflow("queue underflow")
        return self._items.pop(0)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayQueue({self._capacity}, {self._items!r})"


class LinkedQueue:
    """A queue of linked nodes; new values go in at the head.

    Iteration runs from the most recently enqueued value to the oldest.
    """

    def __init__(self) -> None:
        self._nodes = SinglyLinkedList()

    def enqueue(self, value: Any) -> None:
        """Add ``value``; it is taken out after all earlier values."""
        self._nodes.push_front(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        if not self._nodes:
            raise QueueUnderflow("queue underflow")
        return self._nodes.pop_back()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"


class Deque:
    """A double-ended queue; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._nodes = DoublyLinkedList()

    def push_front(self, value: Any) -> None:
        """Add ``value`` at the front."""
        self._nodes.push_front(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._nodes.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if not self._nodes:
            raise QueueUnderflow("queue underflow")
        return self._nodes.pop_front()

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        if not self._nodes:
            raise QueueUnderflow("queue underflow")
        return self._nodes.pop_back()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Deque({list(self)!r})"


class CircularQueue:
    """A queue held in a ring of nodes; iteration runs from front to rear."""

    def __init__(self) -> None:
        self._ring = CircularLinkedList()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._ring.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._ring:
            raise QueueUnderflow("queue underflow")
        return self._ring.pop_front()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ring)

    def __len__(self) -> int:
        return len(self._ring)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r})"


class PriorityQueue:
    """A queue that serves the value of highest priority first.

    Among equal priorities the most recently enqueued value wins.
    Iteration runs from the most recently enqueued value to the oldest.
    """

    def __init__(self) -> None:
        self._entries: deque[tuple[Any, Any]] = deque()

    def enqueue(self, value: Any, priority: Any) -> None:
        """Add ``value`` with the given ``priority``."""
        self._entries.appendleft((value, priority))

    def _best_index(self) -> int:
        if not self._entries:
            raise QueueUnderflow("queue underflow")
        return max(range(len(self._entries)), key=lambda i: self._entries[i][1])

    def peek(self) -> Any:
        """Return the value that would be dequeued next."""
        return self._entries[self._best_index()][0]

    def dequeue(self) -> Any:
        """Remove and return the value of highest priority."""
        index = self._best_index()
        value, _ = self._entries[index]
        del self._entries[index]
        return value

    def __iter__(self) -> Iterator[Any]:
        return (value for value, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PriorityQueue({list(self._entries)!r})"