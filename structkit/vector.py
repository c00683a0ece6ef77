"""Growable array containers with random-access iterators."""

from __future__ import annotations

import functools
import operator
from typing import Any, Iterator, MutableSequence


@functools.total_ordering
class VectorIterator:
    """A position inside an array's storage, usable like a pointer."""

    __slots__ = ("_storage", "_index")

    def __init__(self, storage: MutableSequence[Any], index: int = 0) -> None:
        self._storage = storage
        self._index = operator.index(index)

    def _slot(self, position: int) -> int:
        if position < 0 or position >= len(self._storage):
            raise IndexError("iterator out of bounds")
        return position

    @property
    def index(self) -> int:
        """Offset of this position from the start of the storage."""
        return self._index

    def value(self) -> Any:
        """Return the element at this position."""
        return self._storage[self._slot(self._index)]

    def set(self, value: Any) -> None:
        """Replace the element at this position."""
        self._storage[self._slot(self._index)] = value

    def next(self) -> VectorIterator:
        """Move one position forward and return this iterator."""
        self._index += 1
        return self

    def prev(self) -> VectorIterator:
        """Move one position backward and return this iterator."""
        self._index -= 1
        return self

    def __add__(self, offset: int) -> VectorIterator:
        if isinstance(offset, VectorIterator):
            return NotImplemented
        return VectorIterator(self._storage, self._index + operator.index(offset))

    def __radd__(self, offset: int) -> VectorIterator:
        return self.__add__(offset)

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, VectorIterator):
            if other._storage is not self._storage:
                raise ValueError("iterators belong to different containers")
            return self._index - other._index
        return VectorIterator(self._storage, self._index - operator.index(other))

    def __iadd__(self, offset: int) -> VectorIterator:
        self._index += operator.index(offset)
        return self

    def __isub__(self, offset: int) -> VectorIterator:
        self._index -= operator.index(offset)
        return self

    def __getitem__(self, offset: int) -> Any:
        return self._storage[self._slot(self._index + operator.index(offset))]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorIterator):
            return NotImplemented
        return self._storage is other._storage and self._index == other._index

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, VectorIterator):
            return NotImplemented
        if other._storage is not self._storage:
            raise ValueError("iterators belong to different containers")
        return self._index < other._index

    def __hash__(self) -> int:
        return hash((id(self._storage), self._index))

    def __repr__(self) -> str:
        return f"VectorIterator(index={self._index})"


class BasicVector:
    """A fixed array built from an existing sequence, traversable by iterators."""

    def __init__(self, values: Any = ()) -> None:
        self._array = list(values)

    def begin(self) -> VectorIterator:
        """Iterator to the first element."""
        return VectorIterator(self._array, 0)

    def end(self) -> VectorIterator:
        """Iterator one past the last element."""
        return VectorIterator(self._array, len(self._array))

    def __iter__(self) -> Iterator[Any]:
        return iter(self._array)

    def __len__(self) -> int:
        return len(self._array)


class Vector:
    """A dynamic array that doubles its capacity when it runs out of room."""

    def __init__(self, count: int = 0, value: Any = None) -> None:
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must not be negative")
        self._array: list[Any] = [value] * count
        self._size = count

    def copy(self) -> Vector:
        """Return an independent copy with the same contents and capacity."""
        clone = Vector()
        clone._array = list(self._array)
        clone._size = self._size
        return clone

    def _grow(self) -> None:
        if not self._array:
            self._array.append(None)
            self._size = 0
        else:
            self._array.extend([None] * len(self._array))

    def _position(self, pos: Any) -> int:
        if isinstance(pos, VectorIterator):
            if pos._storage is not self._array:
                raise ValueError("iterator does not belong to this vector")
            return pos._index
        return operator.index(pos)

    def _raw_slot(self, pos: int) -> int:
        pos = operator.index(pos)
        if pos < 0 or pos >= len(self._array):
            raise IndexError("out of bounds")
        return pos

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return iter(self._array[: self._size])

    def __getitem__(self, pos: int) -> Any:
        return self._array[self._raw_slot(pos)]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._array[self._raw_slot(pos)] = value

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"

    def capacity(self) -> int:
        """Number of slots allocated."""
        return len(self._array)

    def empty(self) -> bool:
        """True when the vector holds no elements."""
        return self._size == 0 or not self._array

    def at(self, pos: int) -> Any:
        """Checked access to a slot within the allocated storage."""
        return self._array[self._raw_slot(pos)]

    def front(self) -> Any:
        """First element."""
        if self._size == 0:
            raise IndexError("front of empty vector")
        return self._array[0]

    def back(self) -> Any:
        """Last element."""
        if self._size == 0:
            raise IndexError("back of empty vector")
        return self._array[self._size - 1]

    def begin(self) -> VectorIterator:
        """Iterator to the first element."""
        return VectorIterator(self._array, 0)

    def end(self) -> VectorIterator:
        """Iterator one past the last element."""
        return VectorIterator(self._array, self._size)

    def push_back(self, value: Any) -> None:
        """Append a value, growing the storage if it is full."""
        if len(self._array) <= self._size:
            self._grow()
        self._array[self._size] = value
        self._size += 1

    def pop_back(self) -> None:
        """Drop the last element."""
        if self._size == 0:
            raise IndexError("pop from empty vector")
        self._size -= 1

    def insert(self, pos: Any, value: Any, count: int | None = None) -> VectorIterator:
        """Insert value (count copies if given) before pos; return an iterator to it."""
        i = self._position(pos)
        if i < 0 or i > self._size:
            raise IndexError("insert position out of range")
        if count is None:
            if len(self._array) <= self._size + 1:
                self._grow()
            self._size += 1
            for j in range(self._size - 1, i, -1):
                self._array[j] = self._array[j - 1]
            self._array[i] = value
            return VectorIterator(self._array, i)

        count = operator.index(count)
        if count < 0:
            raise ValueError("count must not be negative")
        while len(self._array) <= self._size + count:
            self._grow()
        self._size += count
        last = i + count - 1
        for j in range(self._size - 1, last, -1):
            self._array[j] = self._array[j - count]
        self._array[i : last + 1] = [value] * count
        return VectorIterator(self._array, i)

    def erase(self, first: Any, last: Any = None) -> VectorIterator:
        """Remove the element at first, or the range [first, last); return first."""
        i = self._position(first)
        if last is None:
            if i < 0 or i >= self._size:
                raise IndexError("erase position out of range")
            for j in range(i, self._size - 1):
                self._array[j] = self._array[j + 1]
            self._size -= 1
            return VectorIterator(self._array, i)

        j = self._position(last)
        if i < 0 or j < i or j > self._size:
            raise IndexError("erase range out of range")
        diff = j - i
        for k in range(i, self._size - diff):
            self._array[k] = self._array[k + diff]
        self._size -= diff
        return VectorIterator(self._array, i)

    def clear(self) -> None:
        """Remove every element, keeping the allocated capacity."""
        for k in range(self._size):
            self._array[k] = None
        self._size = 0