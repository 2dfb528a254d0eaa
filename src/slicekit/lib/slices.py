from typing import TypeVar, Any, Callable, Iterable, Sequence, MutableSequence

import builtins
import operator

from functools import cmp_to_key

from typing_extensions import SupportsIndex

from ..types.pair import Pair
from ..types.slice import Slice
from ..core import compare as _cmp
from ..core.errors import SliceBoundsError, EmptySliceError
from .log import logger

T = TypeVar('T')
R = TypeVar('R')
S = TypeVar('S', bound=MutableSequence)

__all__ = [
    'binary_search',
    'binary_search_func',
    'cap',
    'clip',
    'clone',
    'compact',
    'compact_func',
    'compare',
    'compare_func',
    'contains',
    'contains_func',
    'delete',
    'delete_func',
    'equal',
    'equal_func',
    'every',
    'filter',
    'find',
    'flatten',
    'grow',
    'index',
    'index_func',
    'insert',
    'is_sorted',
    'is_sorted_func',
    'map',
    'max',
    'max_func',
    'min',
    'min_func',
    'new',
    'reduce',
    'replace',
    'reverse',
    'size',
    'some',
    'sort',
    'sort_func',
    'sort_stable_func',
    'unzip',
    'zip',
]


#
# Private helper functions
#

# noinspection PyShadowingBuiltins
def _check_range(op: str, id: Sequence[Any], i: SupportsIndex, j: SupportsIndex) -> tuple[int, int]:
    """
    Validate a [i, j) range against the sequence, before anything is modified.

    :return: The range as plain ints
    """
    i = operator.index(i)
    j = operator.index(j)
    length = len(id)
    if not 0 <= i <= j <= length:
        logger.debug("%s: invalid range [%d:%d] for length %d", op, i, j, length)
        raise SliceBoundsError(f"{op}: range [{i}:{j}] out of bounds for length {length}!")
    return i, j


# noinspection PyShadowingBuiltins
def _check_not_empty(op: str, id: Sequence[Any]) -> None:
    if len(id) == 0:
        logger.debug("%s: called with an empty sequence", op)
        raise EmptySliceError(f"{op}: empty sequence!")


def _nan_first(value: Any) -> tuple[bool, Any]:
    """Sort key putting NaN values before everything else."""
    return not _cmp.is_nan(value), value


# noinspection PyShadowingBuiltins
def _splice(id: MutableSequence[Any], i: int, j: int, values: Sequence[Any] = ()) -> None:
    """
    Replace id[i:j] with values. Lists and `Slice` support slice assignment, other mutable
    sequences (e.g. deque, array) are edited one element at a time.
    """
    if isinstance(id, (list, Slice)):
        id[i:j] = values
        return
    # Delete backwards, so truncating a tail only removes from the end
    for k in builtins.range(j - 1, i - 1, -1):
        del id[k]
    for offset, v in enumerate(values):
        id.insert(i + offset, v)


# noinspection PyShadowingBuiltins
def _sort_in_place(id: MutableSequence[Any], key: Callable[[Any], Any]) -> None:
    """Stable in-place sort of any mutable sequence."""
    if isinstance(id, (list, Slice)):
        id.sort(key=key)
        return
    for i, v in enumerate(sorted(id, key=key)):
        id[i] = v


#
# Constructors and accessors
#

def new(size: int = 0, initial_value: T | None = None, capacity: int | None = None) -> Slice[T]:
    """
    Creates a new slice of the specified size, with each element initialized to the specified value.

    :param size: Number of elements
    :param initial_value: Initial value of each element
    :param capacity: Reserved storage, defaults to size
    :return: New slice
    """
    if size < 0:
        raise ValueError("Size must be >= 0!")
    return Slice([initial_value] * size, capacity)  # type: ignore


# noinspection PyShadowingBuiltins
def size(id: Sequence[Any]) -> int:
    """
    Returns the number of elements in the sequence.

    :param id: Input sequence
    :return: Number of elements
    """
    return len(id)


# noinspection PyShadowingBuiltins
def cap(id: Sequence[Any]) -> int:
    """
    Returns the capacity of the sequence. Only `Slice` reserves storage beyond its length,
    for anything else it is the length.

    :param id: Input sequence
    :return: Capacity
    """
    if isinstance(id, Slice):
        return id.capacity
    return len(id)


#
# Transformation
#

# noinspection PyShadowingBuiltins
def map(id: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    """
    Applies fn to each element and returns a new list with the results.

    :param id: Input sequence
    :param fn: Function to apply
    :return: List of results, in the same order
    """
    return [fn(v) for v in id]


# noinspection PyShadowingBuiltins
def filter(id: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """
    Returns a new list containing only the elements that satisfy fn.

    :param id: Input sequence
    :param fn: Predicate
    :return: Matching elements, in the same order
    """
    return [v for v in id if fn(v)]


# noinspection PyShadowingBuiltins
def reduce(id: Iterable[T], fn: Callable[[R, T], R], initial: R) -> R:
    """
    Folds the elements from left to right into a single value.

    :param id: Input sequence
    :param fn: Function of (accumulator, element) returning the new accumulator
    :param initial: Starting accumulator
    :return: Final accumulator
    """
    result = initial
    for v in id:
        result = fn(result, v)
    return result


# noinspection PyShadowingBuiltins
def flatten(id: Iterable[Iterable[T]]) -> list[T]:
    """
    Concatenates the inner sequences into a single list.

    :param id: Sequence of sequences
    :return: Flat list
    """
    result: list[T] = []
    for v in id:
        result.extend(v)
    return result


# noinspection PyShadowingBuiltins
def zip(id1: Iterable[T], id2: Iterable[R]) -> list[Pair[T, R]]:
    """
    Combines two sequences into a list of pairs.
    If the lengths differ, the extra elements of the longer one are dropped.

    :param id1: First sequence
    :param id2: Second sequence
    :return: List of pairs
    """
    return [Pair(a, b) for a, b in builtins.zip(id1, id2)]


# noinspection PyShadowingBuiltins
def unzip(id: Iterable[Pair[T, R] | tuple[T, R]]) -> tuple[list[T], list[R]]:
    """
    Splits a sequence of pairs into two lists.

    :param id: Sequence of pairs (or 2-tuples)
    :return: List of first values, list of second values
    """
    first: list[T] = []
    second: list[R] = []
    for a, b in id:
        first.append(a)
        second.append(b)
    return first, second


#
# Query / search
#

# noinspection PyShadowingBuiltins
def find(id: Iterable[T], fn: Callable[[T], bool], default: T | None = None) -> tuple[T | None, bool]:
    """
    Returns the first element that satisfies fn.

    :param id: Input sequence
    :param fn: Predicate
    :param default: Value returned when nothing matches
    :return: (element, True) on match, (default, False) otherwise
    """
    for v in id:
        if fn(v):
            return v, True
    return default, False


# noinspection PyShadowingBuiltins
def some(id: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """
    Returns true if at least one element satisfies fn, false for an empty sequence.

    :param id: Input sequence
    :param fn: Predicate
    """
    for v in id:
        if fn(v):
            return True
    return False


# noinspection PyShadowingBuiltins
def every(id: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """
    Returns true if all elements satisfy fn, true for an empty sequence.

    :param id: Input sequence
    :param fn: Predicate
    """
    for v in id:
        if not fn(v):
            return False
    return True


# noinspection PyShadowingBuiltins
def contains(id: Iterable[T], value: T) -> bool:
    """
    Returns true if the sequence has an element equal (==) to value.

    :param id: Input sequence
    :param value: Value to search for
    """
    for v in id:
        if v == value:
            return True
    return False


# noinspection PyShadowingBuiltins
def contains_func(id: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """
    Returns true if at least one element satisfies fn.

    :param id: Input sequence
    :param fn: Predicate
    """
    for v in id:
        if fn(v):
            return True
    return False


# noinspection PyShadowingBuiltins
def index(id: Iterable[T], value: T) -> int:
    """
    Returns the index of the first element equal to value, or -1 if not present.

    :param id: Input sequence
    :param value: Value to search for
    """
    for i, v in enumerate(id):
        if v == value:
            return i
    return -1


# noinspection PyShadowingBuiltins
def index_func(id: Iterable[T], fn: Callable[[T], bool]) -> int:
    """
    Returns the index of the first element satisfying fn, or -1 if none do.

    :param id: Input sequence
    :param fn: Predicate
    """
    for i, v in enumerate(id):
        if fn(v):
            return i
    return -1


# noinspection PyShadowingBuiltins
def binary_search(id: Sequence[T], target: T) -> tuple[int, bool]:
    """
    Searches for target in a sorted sequence.
    The sequence must be sorted in ascending order, otherwise the result is meaningless.

    :param id: Sorted input sequence
    :param target: Value to search for
    :return: (index, found) where index is the position of target if found, or the position
             where it would be inserted to keep the order
    """
    n = len(id)
    low, high = 0, n
    while low < high:
        mid = (low + high) // 2
        if _cmp.less(id[mid], target):
            low = mid + 1
        else:
            high = mid
    return low, low < n and _cmp.compare(id[low], target) == 0


# noinspection PyShadowingBuiltins
def binary_search_func(id: Sequence[T], target: R, cmp: Callable[[T, R], int]) -> tuple[int, bool]:
    """
    Like `binary_search`, but uses a comparison function, so the target may be of a different
    type than the elements (e.g. a key of them).
    The sequence must be sorted in ascending order according to cmp.

    :param id: Sorted input sequence
    :param target: Value to search for
    :param cmp: Function of (element, target) returning negative, zero or positive
    :return: (index, found)
    """
    n = len(id)
    low, high = 0, n
    while low < high:
        mid = (low + high) // 2
        if cmp(id[mid], target) < 0:
            low = mid + 1
        else:
            high = mid
    return low, low < n and cmp(id[low], target) == 0


#
# Mutation
#

# noinspection PyShadowingBuiltins
def delete(id: S, i: SupportsIndex, j: SupportsIndex) -> S:
    """
    Removes the elements id[i:j] in place.

    :param id: Input sequence
    :param i: Start index (inclusive)
    :param j: End index (exclusive)
    :return: The same sequence, shortened
    :raises SliceBoundsError: If not 0 <= i <= j <= len(id)
    """
    i, j = _check_range('delete', id, i, j)
    _splice(id, i, j)
    return id


# noinspection PyShadowingBuiltins
def delete_func(id: S, fn: Callable[[Any], bool]) -> S:
    """
    Removes all elements that satisfy fn in place, keeping the order of the others.

    :param id: Input sequence
    :param fn: Predicate selecting the elements to remove
    :return: The same sequence
    """
    k = 0
    for i in builtins.range(len(id)):
        v = id[i]
        if not fn(v):
            if k != i:
                id[k] = v
            k += 1
    _splice(id, k, len(id))
    return id


# noinspection PyShadowingBuiltins
def insert(id: S, i: SupportsIndex, *values: Any) -> S:
    """
    Inserts values at index i in place, shifting the following elements to the right.

    :param id: Input sequence
    :param i: Index to insert at, 0 <= i <= len(id)
    :param values: Values to insert
    :return: The same sequence
    :raises SliceBoundsError: If i is out of range
    """
    i, _ = _check_range('insert', id, i, i)
    _splice(id, i, i, values)
    return id


# noinspection PyShadowingBuiltins
def replace(id: S, i: SupportsIndex, j: SupportsIndex, *values: Any) -> S:
    """
    Replaces the elements id[i:j] with values in place.

    :param id: Input sequence
    :param i: Start index (inclusive)
    :param j: End index (exclusive)
    :param values: Replacement values, their number may differ from j - i
    :return: The same sequence
    :raises SliceBoundsError: If not 0 <= i <= j <= len(id)
    """
    i, j = _check_range('replace', id, i, j)
    _splice(id, i, j, values)
    return id


# noinspection PyShadowingBuiltins
def reverse(id: MutableSequence[Any]) -> None:
    """
    Reverses the order of the elements in place.

    :param id: Input sequence
    """
    id.reverse()


# noinspection PyShadowingBuiltins
def grow(id: S, n: int) -> S:
    """
    Makes sure there is room for n more elements.
    Lists manage their own storage, so only a `Slice` is changed.

    :param id: Input sequence
    :param n: Number of additional elements
    :return: The same sequence
    """
    if n < 0:
        raise ValueError("grow: cannot be negative!")
    if isinstance(id, Slice):
        id.reserve(n)
    return id


# noinspection PyShadowingBuiltins
def clip(id: S) -> S:
    """
    Removes unused capacity. Lists manage their own storage, so only a `Slice` is changed.

    :param id: Input sequence
    :return: The same sequence
    """
    if isinstance(id, Slice):
        id.shrink()
    return id


# noinspection PyShadowingBuiltins
def clone(id: Sequence[T]) -> list[T] | Slice[T]:
    """
    Returns a shallow copy of the sequence.

    :param id: Input sequence
    :return: Shallow copy, a `Slice` for a `Slice`, a list otherwise
    """
    if isinstance(id, Slice):
        return id.copy()
    return list(id)


#
# Comparison / ordering
#

def equal(id1: Sequence[Any], id2: Sequence[Any]) -> bool:
    """
    Returns true if both sequences have the same length and all elements are equal (==).
    NaN values are never equal.

    :param id1: First sequence
    :param id2: Second sequence
    """
    if len(id1) != len(id2):
        return False
    for a, b in builtins.zip(id1, id2):
        if a != b:
            return False
    return True


def equal_func(id1: Sequence[T], id2: Sequence[R], eq: Callable[[T, R], bool]) -> bool:
    """
    Returns true if both sequences have the same length and eq holds for all pairs.

    :param id1: First sequence
    :param id2: Second sequence
    :param eq: Equality function
    """
    if len(id1) != len(id2):
        return False
    for a, b in builtins.zip(id1, id2):
        if not eq(a, b):
            return False
    return True


def compare(id1: Sequence[Any], id2: Sequence[Any]) -> int:
    """
    Compares two sequences lexicographically.
    The first pair of different elements decides; if one sequence is a prefix of the other,
    the shorter one is less.

    :param id1: First sequence
    :param id2: Second sequence
    :return: -1 if id1 < id2, 0 if equal, +1 if id1 > id2
    """
    for a, b in builtins.zip(id1, id2):
        c = _cmp.compare(a, b)
        if c:
            return c
    if len(id1) < len(id2):
        return -1
    if len(id1) > len(id2):
        return 1
    return 0


def compare_func(id1: Sequence[T], id2: Sequence[R], cmp: Callable[[T, R], int]) -> int:
    """
    Compares two sequences lexicographically using cmp for the elements.

    :param id1: First sequence
    :param id2: Second sequence
    :param cmp: Function returning negative, zero or positive
    :return: The first non-zero result of cmp, or -1/0/+1 by length
    """
    for a, b in builtins.zip(id1, id2):
        c = cmp(a, b)
        if c != 0:
            return c
    if len(id1) < len(id2):
        return -1
    if len(id1) > len(id2):
        return 1
    return 0


# noinspection PyShadowingBuiltins
def is_sorted(id: Sequence[Any]) -> bool:
    """
    Returns true if the sequence is sorted in ascending order.

    :param id: Input sequence
    """
    for i in builtins.range(len(id) - 1, 0, -1):
        if _cmp.less(id[i], id[i - 1]):
            return False
    return True


# noinspection PyShadowingBuiltins
def is_sorted_func(id: Sequence[T], cmp: Callable[[T, T], int]) -> bool:
    """
    Returns true if the sequence is sorted in ascending order according to cmp.

    :param id: Input sequence
    :param cmp: Function returning negative, zero or positive
    """
    for i in builtins.range(len(id) - 1, 0, -1):
        if cmp(id[i], id[i - 1]) < 0:
            return False
    return True


# noinspection PyShadowingBuiltins
def min(id: Sequence[T]) -> T:
    """
    Returns the minimal element. If any element is NaN, that NaN is returned.

    :param id: Input sequence
    :return: Minimal element
    :raises EmptySliceError: If the sequence is empty
    """
    _check_not_empty('min', id)
    result = id[0]
    if _cmp.is_nan(result):
        return result
    for i in builtins.range(1, len(id)):
        v = id[i]
        if _cmp.is_nan(v):
            return v
        if v < result:  # type: ignore
            result = v
    return result


# noinspection PyShadowingBuiltins
def max(id: Sequence[T]) -> T:
    """
    Returns the maximal element. If any element is NaN, that NaN is returned.

    :param id: Input sequence
    :return: Maximal element
    :raises EmptySliceError: If the sequence is empty
    """
    _check_not_empty('max', id)
    result = id[0]
    if _cmp.is_nan(result):
        return result
    for i in builtins.range(1, len(id)):
        v = id[i]
        if _cmp.is_nan(v):
            return v
        if v > result:  # type: ignore
            result = v
    return result


# noinspection PyShadowingBuiltins
def min_func(id: Sequence[T], cmp: Callable[[T, T], int]) -> T:
    """
    Returns the minimal element according to cmp, the first one if there are several.

    :param id: Input sequence
    :param cmp: Function returning negative, zero or positive
    :raises EmptySliceError: If the sequence is empty
    """
    _check_not_empty('min_func', id)
    result = id[0]
    for i in builtins.range(1, len(id)):
        if cmp(id[i], result) < 0:
            result = id[i]
    return result


# noinspection PyShadowingBuiltins
def max_func(id: Sequence[T], cmp: Callable[[T, T], int]) -> T:
    """
    Returns the maximal element according to cmp, the first one if there are several.

    :param id: Input sequence
    :param cmp: Function returning negative, zero or positive
    :raises EmptySliceError: If the sequence is empty
    """
    _check_not_empty('max_func', id)
    result = id[0]
    for i in builtins.range(1, len(id)):
        if cmp(id[i], result) > 0:
            result = id[i]
    return result


# noinspection PyShadowingBuiltins
def sort(id: MutableSequence[Any]) -> None:
    """
    Sorts the elements in ascending order in place. NaN values come first.

    :param id: Input sequence
    """
    _sort_in_place(id, _nan_first)


# noinspection PyShadowingBuiltins
def sort_func(id: MutableSequence[T], cmp: Callable[[T, T], int]) -> None:
    """
    Sorts the elements in ascending order according to cmp in place.

    :param id: Input sequence
    :param cmp: Function returning negative, zero or positive
    """
    _sort_in_place(id, cmp_to_key(cmp))


# noinspection PyShadowingBuiltins
def sort_stable_func(id: MutableSequence[T], cmp: Callable[[T, T], int]) -> None:
    """
    Sorts the elements according to cmp in place, keeping the original order of elements
    that compare equal.

    :param id: Input sequence
    :param cmp: Function returning negative, zero or positive
    """
    # sorted() and list.sort are merge based, always stable
    _sort_in_place(id, cmp_to_key(cmp))


#
# Dedup
#

# noinspection PyShadowingBuiltins
def compact(id: S) -> S:
    """
    Replaces runs of equal (==) adjacent elements with a single copy, in place.
    Non-adjacent duplicates are kept.

    :param id: Input sequence
    :return: The same sequence
    """
    n = len(id)
    if n < 2:
        return id
    prev = id[0]
    k = 1
    for i in builtins.range(1, n):
        v = id[i]
        if v != prev:
            if k != i:
                id[k] = v
            k += 1
        prev = v
    _splice(id, k, len(id))
    return id


# noinspection PyShadowingBuiltins
def compact_func(id: S, eq: Callable[[Any, Any], bool]) -> S:
    """
    Like `compact`, but uses eq to compare each element with the one before it.
    For runs of equal elements the first one is kept.

    :param id: Input sequence
    :param eq: Equality function, called as eq(current, previous)
    :return: The same sequence
    """
    n = len(id)
    if n < 2:
        return id
    prev = id[0]
    k = 1
    for i in builtins.range(1, n):
        v = id[i]
        if not eq(v, prev):
            if k != i:
                id[k] = v
            k += 1
        prev = v
    _splice(id, k, len(id))
    return id
