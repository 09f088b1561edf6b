"""A linked stack and bracket-balance checking built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_PAIRS.values())


class StackUnderflow(IndexError):
    """Raised when an empty stack is read from."""


@dataclass(slots=True)
class _Node:
    value: Any
    below: _Node | None


class LinkedStack:
    """A last-in, first-out stack of linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflow("pop from an empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self, position: int) -> Any:
        """Return the value at 1-based ``position`` counted from the top."""
        if not 1 <= position <= self._size:
            raise IndexError(f"no element at position {position}")
        for index, value in enumerate(self, start=1):
            if index == position:
                return value
        raise IndexError(f"no element at position {position}")

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflow("stack is empty")
        return self._top.value

    def bottom(self) -> Any:
        """Return the bottom value without removing it."""
        if self._top is None:
            raise StackUnderflow("stack is empty")
        node = self._top
        while node.below is not None:
            node = node.below
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(reversed(list(self)))!r})"


@dataclass(frozen=True)
class BalanceResult:
    """Outcome of a bracket check; true when the expression is balanced."""

    class Problem(Enum):
        UNEXPECTED_CLOSING = "closing bracket with nothing open"
        MISMATCH = "closing bracket does not match the open one"
        UNCLOSED = "bracket left open"

    problem: Problem | None = None
    index: int | None = None
    char: str | None = None

    @property
    def balanced(self) -> bool:
        return self.problem is None

    def __bool__(self) -> bool:
        return self.balanced


def matches(opening: str, closing: str) -> bool:
    """Tell whether ``closing`` closes the bracket ``opening``."""
    return _PAIRS.get(opening) == closing


def check_brackets(expression: str) -> BalanceResult:
    """Check that (), [] and {} in ``expression`` nest properly.

    On failure the result names the problem and the offending character:
    the closing bracket for the first two kinds, and the innermost open
    bracket when some are left unclosed.
    """
    pending = LinkedStack()
    for index, char in enumerate(expression):
        if char in _PAIRS:
            pending.push((index, char))
        elif char in _CLOSERS:
            if not pending:
                return BalanceResult(BalanceResult.Problem.UNEXPECTED_CLOSING, index, char)
            _, opening = pending.pop()
            if not matches(opening, char):
                return BalanceResult(BalanceResult.Problem.MISMATCH, index, char)
    if pending:
        index, char = pending.top()
        return BalanceResult(BalanceResult.Problem.UNCLOSED, index, char)
    return BalanceResult()


def is_balanced(expression: str) -> bool:
    """Tell whether the brackets in ``expression`` are balanced."""
    return check_brackets(expression).balanced