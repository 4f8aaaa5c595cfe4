import pytest

from dsakit.array import DynamicArray, FixedArray


def _fill(arr, values):
    for value in values:
        arr.append(value)
    return arr


def test_append_and_insert_scenario():
    arr = _fill(FixedArray(5), [10, 20, 30, 40])
    arr.insert(1, 5)
    assert list(arr) == [10, 5, 20, 30, 40]
    assert arr.is_full()


def test_append_when_full_raises():
    arr = _fill(FixedArray(2), [1, 2])
    with pytest.raises(OverflowError):
        arr.append(3)
    with pytest.raises(OverflowError):
        arr.insert(0, 3)
    assert list(arr) == [1, 2]


def test_insert_at_end_and_beyond():
    arr = _fill(FixedArray(4), [1, 2])
    arr.insert(2, 3)
    assert list(arr) == [1, 2, 3]
    with pytest.raises(IndexError):
        arr.insert(5, 9)
    with pytest.raises(IndexError):
        arr.insert(-1, 9)
    assert list(arr) == [1, 2, 3]


def test_get_set_delete():
    arr = _fill(FixedArray(4), [7, 8, 9])
    assert arr[2] == 9
    arr[1] = 80
    assert list(arr) == [7, 80, 9]
    del arr[0]
    assert list(arr) == [80, 9]
    assert len(arr) == 2


@pytest.mark.parametrize("index", [3, -1, 10])
def test_invalid_index_raises(index):
    arr = _fill(FixedArray(4), [7, 8, 9])
    with pytest.raises(IndexError):
        arr[index]
    with pytest.raises(IndexError):
        arr[index] = 1
    with pytest.raises(IndexError):
        del arr[index]
    assert list(arr) == [7, 8, 9]
    assert len(arr) == 3


def test_empty_state():
    arr = FixedArray(3)
    assert arr.is_empty()
    arr.append("a")
    assert not arr.is_empty()
    assert not arr.is_full()


def test_copy_is_independent():
    arr = _fill(FixedArray(3), [1, 2])
    clone = arr.copy()
    clone.append(3)
    assert list(arr) == [1, 2]
    assert list(clone) == [1, 2, 3]
    assert clone.capacity == arr.capacity


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FixedArray(-1)


def test_dynamic_grows_when_full():
    arr = _fill(DynamicArray(5), [10, 20, 30, 40])
    arr.insert(1, 5)
    assert arr.capacity == 5
    arr.append(60)
    assert arr.capacity == 10
    assert list(arr) == [10, 5, 20, 30, 40, 60]


def test_dynamic_insert_doubles():
    arr = _fill(DynamicArray(2), ["a", "b"])
    arr.insert(0, "z")
    assert arr.capacity == 4
    assert list(arr) == ["z", "a", "b"]


def test_dynamic_shrinks_when_half_empty():
    arr = _fill(DynamicArray(4), [1, 2, 3, 4])
    del arr[0]
    assert arr.capacity == 4
    del arr[0]
    assert arr.capacity == 2
    assert list(arr) == [3, 4]


def test_dynamic_never_shrinks_below_one():
    arr = _fill(DynamicArray(1), [42])
    del arr[0]
    assert arr.capacity == 1
    assert arr.is_empty()


def test_dynamic_copy_keeps_type():
    arr = _fill(DynamicArray(2), [1, 2, 3])
    clone = arr.copy()
    assert isinstance(clone, DynamicArray)
    assert list(clone) == list(arr)
    assert clone.capacity == arr.capacity


def test_dynamic_requires_positive_capacity():
    with pytest.raises(ValueError):
        DynamicArray(0)