import pytest

from algodrills.sorting import exchange_sort, selection_sort

CASES = [
    [2, 1, 4, 3, 5, 7, 6],
    [],
    [1],
    [3, 3, 1, 1, 2],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
    [-5, 0, 12, -3, 7],
]


@pytest.mark.parametrize("data", CASES)
def test_exchange_sort_agrees_with_builtin(data):
    assert exchange_sort(data) == sorted(data)


@pytest.mark.parametrize("data", CASES)
def test_selection_sort_agrees_with_builtin(data):
    assert selection_sort(data) == sorted(data)


def test_exchange_sort_source_array():
    assert exchange_sort([2, 1, 4, 3, 5, 7, 6]) == [1, 2, 3, 4, 5, 6, 7]


def test_selection_sort_source_array():
    assert selection_sort([2, 1, 4, 3, 5, 7, 6]) == [1, 2, 3, 4, 5, 6, 7]


def test_exchange_sort_leaves_input_unchanged():
    data = [2, 1, 4, 3]
    result = exchange_sort(data)
    assert data == [2, 1, 4, 3]
    assert result == [1, 2, 3, 4]


def test_selection_sort_leaves_input_unchanged():
    data = [2, 1, 4, 3]
    result = selection_sort(data)
    assert data == [2, 1, 4, 3]
    assert result == [1, 2, 3, 4]


def test_exchange_sort_accepts_any_iterable():
    assert exchange_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_selection_sort_accepts_any_iterable():
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]