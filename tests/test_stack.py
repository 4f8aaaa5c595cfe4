import pytest

from dsakit.stack import Stack


def test_pop_order_is_reverse_of_push():
    values = [10, 20, 20, 30]
    stack = Stack(5)
    for value in values:
        stack.push(value)
    popped = []
    while not stack.is_empty():
        popped.append(stack.peek())
        assert stack.pop() == popped[-1]
    assert popped == list(reversed(values))


def test_push_when_full_raises():
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push(3)
    assert stack.peek() == 2


def test_empty_stack_errors():
    stack = Stack(3)
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_len_tracks_pushes_and_pops():
    values = ["a", "b", "c"]
    stack = Stack(len(values))
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    stack.pop()
    assert len(stack) == len(values) - 1


def test_copy_is_independent():
    stack = Stack(3)
    stack.push(1)
    clone = stack.copy()
    clone.push(2)
    assert stack.peek() == 1
    assert clone.peek() == 2
    assert clone.capacity == stack.capacity


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-2)