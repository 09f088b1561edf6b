"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if values[middle] == target:
            return middle
        if values[middle] < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first occurrence of ``target``, or None."""
    return next((index for index, value in enumerate(values) if value == target), None)


def find_all(values: Iterable[Any], target: Any) -> list[int]:
    """Return every index at which ``target`` occurs, in ascending order."""
    return [index for index, value in enumerate(values) if value == target]