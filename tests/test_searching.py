from hypothesis import given, strategies as st

from dsakit.searching import binary_search, find_all, linear_search


def test_binary_search_finds_each_element():
    values = [2, 3, 7, 77, 91]
    for value in values:
        index = binary_search(values, value)
        assert values[index] == value


def test_binary_search_missing_returns_none():
    values = [2, 3, 7, 77, 91]
    assert binary_search(values, 4) is None
    assert binary_search([], 4) is None


@given(values=st.lists(st.integers(-100, 100)).map(sorted), target=st.integers(-100, 100))
def test_binary_search_agrees_with_membership(values, target):
    index = binary_search(values, target)
    if target in values:
        assert values[index] == target
    else:
        assert index is None


@given(values=st.lists(st.integers(-20, 20)), target=st.integers(-20, 20))
def test_linear_search_returns_first_occurrence(values, target):
    index = linear_search(values, target)
    if target in values:
        assert index == values.index(target)
    else:
        assert index is None


def test_linear_search_accepts_generators():
    values = [5, 9, 9, 1]
    assert linear_search(iter(values), 9) == values.index(9)


@given(values=st.lists(st.integers(-10, 10)), target=st.integers(-10, 10))
def test_find_all_reports_every_match(values, target):
    indices = find_all(values, target)
    assert len(indices) == values.count(target)
    assert all(values[i] == target for i in indices)
    assert indices == sorted(set(indices))


def test_find_all_without_match_is_empty():
    assert find_all([1, 2, 3], 9) == []