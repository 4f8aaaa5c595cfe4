import pytest

from dsakit.deque import CircularDeque


def test_insert_both_ends_orders_items():
    dq = CircularDeque(3)
    dq.insert_rear(1)
    dq.insert_rear(2)
    dq.insert_front(0)
    assert list(dq) == [0, 1, 2]
    assert dq.is_full()


def test_full_deque_rejects_inserts():
    dq = CircularDeque(2)
    dq.insert_front("a")
    dq.insert_front("b")
    with pytest.raises(OverflowError):
        dq.insert_front("c")
    with pytest.raises(OverflowError):
        dq.insert_rear("c")
    assert list(dq) == ["b", "a"]


def test_delete_from_both_ends():
    dq = CircularDeque(4)
    for value in [5, 6, 7]:
        dq.insert_rear(value)
    assert dq.delete_front() == 5
    assert dq.delete_rear() == 7
    assert list(dq) == [6]


def test_empty_deque_errors():
    dq = CircularDeque(2)
    assert dq.is_empty()
    with pytest.raises(IndexError):
        dq.delete_front()
    with pytest.raises(IndexError):
        dq.delete_rear()


def test_wraparound_keeps_fifo_order():
    values = list(range(10))
    dq = CircularDeque(3)
    out = []
    for value in values:
        if dq.is_full():
            out.append(dq.delete_front())
        dq.insert_rear(value)
    while not dq.is_empty():
        out.append(dq.delete_front())
    assert out == values


def test_front_inserts_act_as_stack():
    values = ["x", "y", "z"]
    dq = CircularDeque(len(values))
    for value in values:
        dq.insert_front(value)
    assert [dq.delete_front() for _ in values] == list(reversed(values))


def test_len_and_capacity():
    dq = CircularDeque(5)
    dq.insert_rear(1)
    dq.insert_front(2)
    assert len(dq) == len(list(dq))
    assert dq.capacity == 5


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CircularDeque(0)