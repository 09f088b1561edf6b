"""Classic comparison sorts and merging of sorted sequences.

Every function takes any iterable and returns a new sorted list; the
input is never modified, except by :func:`partition`, which works in place.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def exchange_insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by sinking each new element into place with adjacent swaps."""
    items = list(values)
    for i in range(1, len(items)):
        for j in range(i, 0, -1):
            if not items[j] < items[j - 1]:
                break
            items[j], items[j - 1] = items[j - 1], items[j]
    return items


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by shifting larger elements right and dropping the key in the gap."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sorted(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list.

    On equal elements the one from ``second`` is taken first.
    """
    left, right = list(first), list(second)
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by recursively splitting in halves and merging them."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return merge_sorted(merge_sort(items[:middle]), merge_sort(items[middle:]))


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` in place around ``values[low]``.

    Afterwards every element left of the returned index is no greater than
    the pivot and every element right of it is greater. Returns the pivot's
    final index.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"invalid range {low}..{high} for {len(values)} elements")
    pivot = values[low]
    i, j = low + 1, high
    while True:
        while i <= high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i >= j:
            break
        values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(values: Iterable[T]) -> list[T]:
    """Sort with quicksort, taking the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = partition(items, low, high)
            pending.append((low, pivot_index - 1))
            pending.append((pivot_index + 1, high))
    return items


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping the smallest remaining element forward."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _is_sorted(values: Sequence[Any]) -> bool:
    return all(a <= b for a, b in zip(values, values[1:]))