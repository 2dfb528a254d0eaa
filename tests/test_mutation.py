import array
from collections import deque

import pytest

from slicekit import slices, Slice, SliceBoundsError


def test_delete():
    numbers = [1, 2, 3, 4, 5]
    result = slices.delete(numbers, 1, 3)
    assert result == [1, 4, 5]
    assert result is numbers


def test_delete_empty_range_is_noop():
    numbers = [1, 2, 3]
    assert slices.delete(numbers, 1, 1) == [1, 2, 3]
    assert slices.delete(numbers, 3, 3) == [1, 2, 3]


@pytest.mark.parametrize("i,j", [(3, 2), (-1, 2), (0, 6), (6, 6)])
def test_delete_invalid_range(i, j):
    numbers = [1, 2, 3, 4, 5]
    with pytest.raises(SliceBoundsError):
        slices.delete(numbers, i, j)
    assert numbers == [1, 2, 3, 4, 5]


def test_bounds_error_is_index_error():
    with pytest.raises(IndexError, match="delete"):
        slices.delete([], 0, 1)


def test_delete_keeps_slice_capacity():
    s = Slice([1, 2, 3, 4, 5], capacity=8)
    slices.delete(s, 1, 3)
    assert s == [1, 4, 5]
    assert len(s) == 3
    assert s.capacity == 8


def test_delete_func():
    numbers = [1, 2, 3, 4, 5]
    result = slices.delete_func(numbers, lambda x: x % 2 == 0)
    assert result == [1, 3, 5]
    assert result is numbers


def test_delete_func_all_and_none():
    assert slices.delete_func([2, 4], lambda x: True) == []
    assert slices.delete_func([1, 3], lambda x: False) == [1, 3]
    assert slices.delete_func(Slice([1, 2, 3, 4]), lambda x: x > 2) == [1, 2]


def test_insert():
    numbers = [1, 2, 5]
    result = slices.insert(numbers, 2, 3, 4)
    assert result == [1, 2, 3, 4, 5]
    assert result is numbers


def test_insert_at_ends():
    assert slices.insert([2, 3], 0, 1) == [1, 2, 3]
    assert slices.insert([1, 2], 2, 3) == [1, 2, 3]
    assert slices.insert([], 0) == []


@pytest.mark.parametrize("i", [-1, 4])
def test_insert_out_of_range(i):
    numbers = [1, 2, 3]
    with pytest.raises(SliceBoundsError):
        slices.insert(numbers, i, 9)
    assert numbers == [1, 2, 3]


def test_insert_into_slice_grows_storage():
    s = Slice([1, 2])
    slices.insert(s, 1, 10, 11, 12)
    assert s == [1, 10, 11, 12, 2]
    assert s.capacity >= 5


def test_replace():
    numbers = [1, 2, 3, 4, 5]
    result = slices.replace(numbers, 1, 4, 6, 7)
    assert result == [1, 6, 7, 5]
    assert result is numbers


def test_replace_length_change():
    assert slices.replace([1, 2, 3], 1, 2, 7, 8, 9) == [1, 7, 8, 9, 3]
    assert slices.replace([1, 2, 3], 0, 3) == []


def test_replace_invalid_range_leaves_input():
    numbers = [1, 2, 3]
    with pytest.raises(SliceBoundsError):
        slices.replace(numbers, 2, 4, 0)
    with pytest.raises(SliceBoundsError):
        slices.replace(numbers, 2, 1, 0)
    assert numbers == [1, 2, 3]


def test_reverse():
    numbers = [1, 2, 3, 4, 5]
    assert slices.reverse(numbers) is None
    assert numbers == [5, 4, 3, 2, 1]


@pytest.mark.parametrize("seq", [[], [1], [1, 2], [3, 1, 2, 5], Slice("abcde", capacity=9)])
def test_reverse_twice_is_identity(seq):
    original = list(seq)
    slices.reverse(seq)
    slices.reverse(seq)
    assert list(seq) == original


def test_grow():
    s = slices.new(0, capacity=5)
    result = slices.grow(s, 10)
    assert result is s
    assert slices.cap(s) >= 10
    assert len(s) == 0


def test_grow_enough_room_is_noop():
    s = Slice([1, 2], capacity=10)
    slices.grow(s, 3)
    assert s.capacity == 10
    assert s == [1, 2]


def test_grow_list():
    numbers = [1, 2, 3]
    assert slices.grow(numbers, 100) is numbers
    assert numbers == [1, 2, 3]


def test_grow_negative():
    with pytest.raises(ValueError, match="cannot be negative"):
        slices.grow([1], -1)


def test_clip():
    s = slices.new(3, 0, capacity=10)
    result = slices.clip(s)
    assert result is s
    assert slices.cap(s) == 3
    assert s == [0, 0, 0]


def test_clip_list():
    numbers = [1, 2]
    assert slices.clip(numbers) is numbers
    assert slices.cap(numbers) == 2


def test_clone():
    original = [1, 2, 3]
    copy = slices.clone(original)
    copy[0] = 99
    assert original == [1, 2, 3]
    assert copy == [99, 2, 3]


def test_clone_is_shallow():
    inner = [1]
    copy = slices.clone([inner])
    assert copy[0] is inner


def test_clone_slice():
    s = Slice([1, 2, 3], capacity=10)
    copy = slices.clone(s)
    assert isinstance(copy, Slice)
    assert copy == s
    assert copy.capacity == 3
    copy.append(4)
    assert s == [1, 2, 3]


def test_new_and_size():
    s = slices.new(3, "x")
    assert s == ["x", "x", "x"]
    assert slices.size(s) == 3
    assert slices.cap(s) == 3
    assert slices.size([]) == 0


@pytest.mark.parametrize("size,capacity", [(-1, None), (5, 2)])
def test_new_invalid(size, capacity):
    with pytest.raises(ValueError):
        slices.new(size, capacity=capacity)


@pytest.mark.parametrize("make", [deque, lambda v: array.array('i', v)])
def test_in_place_ops_on_other_mutable_sequences(make):
    seq = make([1, 2, 3, 4, 5])
    assert slices.delete(seq, 0, 1) is seq
    assert list(seq) == [2, 3, 4, 5]
    slices.insert(seq, 1, 10, 11)
    assert list(seq) == [2, 10, 11, 3, 4, 5]
    slices.replace(seq, 1, 3, 7)
    assert list(seq) == [2, 7, 3, 4, 5]
    slices.delete_func(seq, lambda x: x % 2 == 1)
    assert list(seq) == [2, 4]
    slices.reverse(seq)
    assert list(seq) == [4, 2]


def test_invalid_range_leaves_deque_untouched():
    seq = deque([1, 2, 3])
    with pytest.raises(SliceBoundsError):
        slices.replace(seq, 1, 4, 0)
    assert list(seq) == [1, 2, 3]
