"""Binary heap checks and conversion between min-heaps and max-heaps."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import Any


def _sift_down(
    values: MutableSequence[Any],
    index: int,
    size: int,
    before: Callable[[Any, Any], bool],
) -> None:
    if not 0 <= size <= len(values):
        raise ValueError(f"heap size {size} does not fit {len(values)} elements")
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        chosen = index
        if left < size and before(values[left], values[index]):
            chosen = left
        if right < size and before(values[right], values[chosen]):
            chosen = right
        if chosen == index:
            return
        values[index], values[chosen] = values[chosen], values[index]
        index = chosen


def max_heapify(values: MutableSequence[Any], index: int, size: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items of a max-heap."""
    _sift_down(values, index, size, operator.gt)


def min_heapify(values: MutableSequence[Any], index: int, size: int) -> None:
    """Sift ``values[index]`` down within the first ``size`` items of a min-heap."""
    _sift_down(values, index, size, operator.lt)


def _holds(values: Sequence[Any], ordered: Callable[[Any, Any], bool]) -> bool:
    return all(ordered(values[(child - 1) // 2], values[child]) for child in range(1, len(values)))


def is_max_heap(values: Sequence[Any]) -> bool:
    """Tell whether every parent is no smaller than its children."""
    return _holds(values, operator.ge)


def is_min_heap(values: Sequence[Any]) -> bool:
    """Tell whether every parent is no greater than its children."""
    return _holds(values, operator.le)


def _build(values: Iterable[Any], heapify: Callable[[MutableSequence[Any], int, int], None]) -> list[Any]:
    items = list(values)
    size = len(items)
    for index in range((size - 2) // 2, -1, -1):
        heapify(items, index, size)
    return items


def to_min_heap(values: Iterable[Any]) -> list[Any]:
    """Return the elements rearranged into a min-heap."""
    return _build(values, min_heapify)


def to_max_heap(values: Iterable[Any]) -> list[Any]:
    """Return the elements rearranged into a max-heap."""
    return _build(values, max_heapify)


def max_to_min(values: Iterable[Any]) -> tuple[bool, list[Any]]:
    """Report whether ``values`` was a max-heap and return it as a min-heap."""
    items = list(values)
    return is_max_heap(items), to_min_heap(items)


def min_to_max(values: Iterable[Any]) -> tuple[bool, list[Any]]:
    """Report whether ``values`` was a min-heap and return it as a max-heap."""
    items = list(values)
    return is_min_heap(items), to_max_heap(items)