"""Fixed-capacity arrays and positional array edits."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any


class BoundedArray:
    """An array with a fixed capacity that holds at most that many items."""

    def __init__(self, capacity: int, values: Iterable[Any] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []
        for value in values:
            self.append(value)

    @property
    def capacity(self) -> int:
        """The most items the array can hold."""
        return self._capacity

    def append(self, value: Any) -> None:
        """Add ``value`` at the end; raise OverflowError when full."""
        if len(self._items) >= self._capacity:
            raise OverflowError(f"array is full ({self._capacity} items)")
        self._items.append(value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedArray({self._capacity}, {self._items!r})"


def insert_at(values: Sequence[Any], position: int, element: Any) -> list[Any]:
    """Return a copy of ``values`` with ``element`` at 1-based ``position``."""
    if not 1 <= position <= len(values) + 1:
        raise IndexError(f"position {position} out of range 1..{len(values) + 1}")
    items = list(values)
    items.insert(position - 1, element)
    return items


def delete_at(values: Sequence[Any], position: int) -> list[Any]:
    """Return a copy of ``values`` without the element at 0-based ``position``."""
    if not 0 <= position < len(values):
        raise IndexError(f"position {position} out of range 0..{len(values) - 1}")
    items = list(values)
    del items[position]
    return items


def largest_two(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the largest and the second largest element.

    When the largest value occurs more than once, it is also the second.
    """
    items = list(values)
    if len(items) < 2:
        raise ValueError("at least two elements are needed")
    largest = max(items)
    items.remove(largest)
    return largest, max(items)