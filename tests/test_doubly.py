import pytest
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, precondition, rule

from dsakit.doubly import DoublyLinkedList

CHANGES = [
    pytest.param(lambda d: d.push_front(0), None, [0, 10, 20, 30, 40], id="push_front"),
    pytest.param(lambda d: d.insert_at(2, 60), None, [10, 20, 60, 30, 40], id="insert_at"),
    pytest.param(lambda d: d.append(50), None, [10, 20, 30, 40, 50], id="append"),
    pytest.param(lambda d: d.pop_front(), 10, [20, 30, 40], id="pop_front"),
    pytest.param(lambda d: d.delete_at(1), 20, [10, 30, 40], id="delete_at"),
    pytest.param(lambda d: d.pop_back(), 40, [10, 20, 30], id="pop_back"),
]


def test_forward_and_reverse_order():
    linked = DoublyLinkedList([10, 100, 1000])
    assert list(linked) == [10, 100, 1000]
    assert list(reversed(linked)) == [1000, 100, 10]
    assert len(linked) == 3


@pytest.mark.parametrize("operation, outcome, contents", CHANGES)
def test_changes_seen_from_both_ends(operation, outcome, contents):
    linked = DoublyLinkedList([10, 20, 30, 40])
    assert operation(linked) == outcome
    assert list(linked) == contents
    assert list(reversed(linked)) == contents[::-1]


def test_pop_last_element_empties_list():
    linked = DoublyLinkedList([10])
    assert linked.pop_back() == 10
    assert list(linked) == []
    assert list(reversed(linked)) == []
    linked.append(20)
    assert list(linked) == [20]


@pytest.mark.parametrize(
    "start, operation",
    [
        ([], lambda d: d.pop_front()),
        ([], lambda d: d.pop_back()),
        ([10, 20, 30, 40], lambda d: d.insert_at(-1, 1)),
        ([10, 20, 30, 40], lambda d: d.insert_at(5, 1)),
        ([10, 20, 30, 40], lambda d: d.delete_at(-1)),
        ([10, 20, 30, 40], lambda d: d.delete_at(4)),
    ],
)
def test_out_of_range_raises_index_error(start, operation):
    linked = DoublyLinkedList(start)
    with pytest.raises(IndexError):
        operation(linked)
    assert list(linked) == start


class DoublyAgainstList(RuleBasedStateMachine):
    def __init__(self):
        super().__init__()
        self.linked = DoublyLinkedList()
        self.model = []

    @rule(value=st.integers())
    def push_front(self, value):
        self.linked.push_front(value)
        self.model.insert(0, value)

    @rule(value=st.integers())
    def append(self, value):
        self.linked.append(value)
        self.model.append(value)

    @rule(value=st.integers(), data=st.data())
    def insert_at(self, value, data):
        index = data.draw(st.integers(0, len(self.model)))
        self.linked.insert_at(index, value)
        self.model.insert(index, value)

    @precondition(lambda self: self.model)
    @rule()
    def pop_front(self):
        assert self.linked.pop_front() == self.model.pop(0)

    @precondition(lambda self: self.model)
    @rule()
    def pop_back(self):
        assert self.linked.pop_back() == self.model.pop()

    @precondition(lambda self: self.model)
    @rule(data=st.data())
    def delete_at(self, data):
        index = data.draw(st.integers(0, len(self.model) - 1))
        assert self.linked.delete_at(index) == self.model.pop(index)

    @invariant()
    def agrees_with_model(self):
        assert list(self.linked) == self.model
        assert list(reversed(self.linked)) == self.model[::-1]
        assert len(self.linked) == len(self.model)


TestDoublyAgainstList = DoublyAgainstList.TestCase