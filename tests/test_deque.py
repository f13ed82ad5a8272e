import pytest
from hypothesis import given
from hypothesis import strategies as st

from dpatterns.deque import Deque


def test_worked_example():
    d = Deque()
    for value in range(1, 7):
        d.push_back(value)
    assert (d.front(), d.back(), len(d)) == (1, 6, 6)
    d.push_front(7)
    d.push_front(8)
    d.push_front(9)
    assert (d.front(), d.back(), len(d)) == (9, 6, 9)
    assert d.pop_back() == 6
    assert d.pop_front() == 9
    assert (d.front(), d.back(), len(d)) == (8, 5, 7)


def test_empty_state():
    d = Deque()
    assert d.is_empty()
    d.push_front(1)
    assert not d.is_empty()
    d.pop_back()
    assert d.is_empty()


@pytest.mark.parametrize("method", ["pop_back", "pop_front", "front", "back"])
def test_empty_access_raises(method):
    with pytest.raises(IndexError):
        getattr(Deque(), method)()


def test_iteration_front_to_back():
    d = Deque([2, 3])
    d.push_front(1)
    d.push_back(4)
    assert list(d) == [1, 2, 3, 4]


@given(st.lists(st.integers()))
def test_push_back_pop_front_keeps_order(values):
    d = Deque()
    for value in values:
        d.push_back(value)
    assert [d.pop_front() for _ in values] == values
    assert d.is_empty()


@given(st.lists(st.integers()))
def test_push_front_pop_front_reverses(values):
    d = Deque()
    for value in values:
        d.push_front(value)
    assert [d.pop_front() for _ in values] == list(reversed(values))


@given(st.lists(st.integers(), min_size=1))
def test_single_push_is_front_and_back(values):
    d = Deque(values)
    assert d.front() == values[0]
    assert d.back() == values[-1]
    assert len(d) == len(values)