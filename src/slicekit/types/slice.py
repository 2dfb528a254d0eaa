from __future__ import annotations
from typing import TypeVar, MutableSequence, Iterable, Iterator, Callable, Any

__all__ = ['Slice']

T = TypeVar('T')


class Slice(MutableSequence[T]):
    """
    Growable sequence with an explicit capacity

    The backing storage may be longer than the live elements. The unused tail is reserved
    room for growth, it can be enlarged by `reserve()` and released by `shrink()`.
    Capacity is never smaller than the length.
    """

    __slots__ = ('_buf', '_len')

    def __init__(self, items: Iterable[T] = (), capacity: int | None = None) -> None:
        data = list(items)
        if capacity is None:
            capacity = len(data)
        elif capacity < len(data):
            raise ValueError(f"Capacity ({capacity}) must be >= length ({len(data)})!")
        self._buf: list[Any] = data + [None] * (capacity - len(data))
        self._len = len(data)

    @property
    def capacity(self) -> int:
        """
        Size of the backing storage
        """
        return len(self._buf)

    def _items(self) -> list[T]:
        return self._buf[:self._len]

    def _ensure(self, needed: int) -> None:
        """Make the backing storage hold at least `needed` elements, doubling it when it grows."""
        if needed > len(self._buf):
            new_capacity = max(needed, 2 * len(self._buf))
            self._buf.extend([None] * (new_capacity - len(self._buf)))

    def _store(self, items: list[T]) -> None:
        """Replace the live elements with items."""
        size = len(items)
        self._ensure(size)
        self._buf[:size] = items
        # Release references held by vacated slots
        for i in range(size, self._len):
            self._buf[i] = None
        self._len = size

    def __getitem__(self, key: int | slice) -> T | Slice[T]:
        if isinstance(key, slice):
            return Slice(self._items()[key])
        return self._buf[range(self._len)[key]]

    def __setitem__(self, key: int | slice, value: T | Iterable[T]) -> None:
        if isinstance(key, slice):
            items = self._items()
            items[key] = value  # type: ignore
            self._store(items)
        else:
            self._buf[range(self._len)[key]] = value

    def __delitem__(self, key: int | slice) -> None:
        items = self._items()
        del items[key]
        self._store(items)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        for i in range(self._len):
            yield self._buf[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._items() == other._items()
        if isinstance(other, list):
            return self._items() == other
        return NotImplemented

    def insert(self, index: int, value: T) -> None:
        """Insert value before index, list semantics."""
        items = self._items()
        items.insert(index, value)
        self._store(items)

    def append(self, value: T) -> None:
        """Append value, growing the backing storage if it is full."""
        self._ensure(self._len + 1)
        self._buf[self._len] = value
        self._len += 1

    def clear(self) -> None:
        self._store([])

    def reserve(self, n: int) -> None:
        """
        Makes room for at least n more elements without another reallocation.

        :param n: Number of additional elements
        """
        if n < 0:
            raise ValueError("Cannot reserve a negative number of elements!")
        if self.capacity - self._len < n:
            self._buf.extend([None] * (self._len + n - self.capacity))

    def shrink(self) -> None:
        """Drop the reserved tail, so the capacity equals the length."""
        del self._buf[self._len:]

    def copy(self) -> Slice[T]:
        """Shallow copy with capacity equal to length."""
        return Slice(self._items())

    def sort(self, *, key: Callable[[T], Any] | None = None, reverse: bool = False) -> None:
        """Sort elements in place, list semantics."""
        items = self._items()
        items.sort(key=key, reverse=reverse)
        self._buf[:self._len] = items

    def __repr__(self) -> str:
        return f"Slice({self._items()!r}, capacity={self.capacity})"
