import pytest
from hypothesis import given, strategies as st

from dsakit.stack import (
    BalanceResult,
    LinkedStack,
    StackUnderflow,
    check_brackets,
    is_balanced,
    matches,
)

CLOSING = {"(": ")", "[": "]", "{": "}"}


@given(values=st.lists(st.integers()))
def test_pop_returns_values_in_reverse(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert len(stack) == 0


@given(values=st.lists(st.integers(), min_size=1))
def test_iteration_top_first_and_ends(values):
    stack = LinkedStack(values)
    assert list(stack) == list(reversed(values))
    assert stack.top() == values[-1]
    assert stack.bottom() == values[0]
    assert stack.peek(1) == stack.top()
    assert stack.peek(len(values)) == stack.bottom()


def test_empty_stack_raises_underflow():
    stack = LinkedStack()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.top()
    with pytest.raises(StackUnderflow):
        stack.bottom()


@pytest.mark.parametrize("position", [0, 4])
def test_peek_out_of_range(position):
    with pytest.raises(IndexError):
        LinkedStack("abc").peek(position)


def test_matches():
    assert matches("(", ")")
    assert matches("[", "]")
    assert matches("{", "}")
    assert not matches("(", "]")
    assert not matches(")", "(")


@pytest.mark.parametrize("expression", ["(a+b)*[c]", "{[()]}", "", "abc"])
def test_balanced_expressions(expression):
    result = check_brackets(expression)
    assert result.balanced
    assert result.problem is None
    assert is_balanced(expression)


@pytest.mark.parametrize("expression", ["(]", ")(", "((", "{[}]"])
def test_unbalanced_expressions(expression):
    result = check_brackets(expression)
    assert not result
    assert not is_balanced(expression)


def test_closing_with_nothing_open():
    expression = "a)b"
    result = check_brackets(expression)
    assert result.problem is BalanceResult.Problem.UNEXPECTED_CLOSING
    assert result.index == expression.index(")")
    assert result.char == ")"


def test_mismatched_closing():
    expression = "x(y]"
    result = check_brackets(expression)
    assert result.problem is BalanceResult.Problem.MISMATCH
    assert result.index == expression.index("]")
    assert result.char == "]"


def test_unclosed_reports_innermost_open():
    expression = "{a[b"
    result = check_brackets(expression)
    assert result.problem is BalanceResult.Problem.UNCLOSED
    assert result.index == expression.index("[")
    assert result.char == "["


@given(openers=st.text(alphabet="([{", max_size=30))
def test_closing_in_reverse_balances(openers):
    closers = "".join(CLOSING[c] for c in reversed(openers))
    assert is_balanced(openers + closers)
    assert is_balanced(openers) == (openers == "")


@given(expression=st.text(alphabet="()[]{}x", max_size=30))
def test_bool_matches_balanced(expression):
    result = check_brackets(expression)
    assert bool(result) == result.balanced == is_balanced(expression)