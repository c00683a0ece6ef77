"""A separately chained hash map with prime bucket counts."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator, TextIO

from structkit.primes import next_greater_prime

_MASK64 = (1 << 64) - 1


class _Entry:
    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value


class UnorderedMap:
    """Hash map whose buckets are chains; new entries go to the front of a chain.

    Iteration visits buckets in ascending order and, inside a bucket,
    the most recently inserted entry first.
    """

    def __init__(
        self,
        bucket_count: int,
        hash_function: Callable[[Any], int] | None = None,
        key_equal: Callable[[Any, Any], bool] = operator.eq,
    ) -> None:
        count = next_greater_prime(bucket_count)
        self._buckets: list[list[_Entry]] = [[] for _ in range(count)]
        self._hash = hash if hash_function is None else hash_function
        self._equal = key_equal
        self._size = 0

    def copy(self) -> UnorderedMap:
        """Return a map with the same bucket count, built by re-inserting every entry."""
        clone = UnorderedMap.__new__(UnorderedMap)
        clone._buckets = [[] for _ in self._buckets]
        clone._hash = self._hash
        clone._equal = self._equal
        clone._size = 0
        for key, value in self:
            clone.insert(key, value)
        return clone

    def clear(self) -> None:
        """Remove every entry, keeping the bucket count."""
        for chain in self._buckets:
            chain.clear()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def empty(self) -> bool:
        """True when the map holds no entries."""
        return self._size == 0

    def bucket_count(self) -> int:
        """Number of buckets."""
        return len(self._buckets)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        for chain in self._buckets:
            for entry in chain:
                yield entry.key, entry.value

    def _chain(self, n: int) -> list[_Entry]:
        n = operator.index(n)
        if n < 0 or n >= len(self._buckets):
            raise IndexError("bucket index out of range")
        return self._buckets[n]

    def bucket_items(self, n: int) -> Iterator[tuple[Any, Any]]:
        """Entries of bucket n, front of the chain first."""
        for entry in self._chain(n):
            yield entry.key, entry.value

    def bucket_size(self, n: int) -> int:
        """Number of entries in bucket n."""
        return len(self._chain(n))

    def load_factor(self) -> float:
        """Entries per bucket."""
        return self._size / len(self._buckets)

    def bucket(self, key: Any) -> int:
        """Index of the bucket that key hashes to."""
        return (self._hash(key) & _MASK64) % len(self._buckets)

    def _locate(self, key: Any) -> tuple[list[_Entry], _Entry | None]:
        chain = self._buckets[self.bucket(key)]
        for entry in chain:
            if self._equal(entry.key, key):
                return chain, entry
        return chain, None

    def insert(self, key: Any, value: Any) -> tuple[tuple[Any, Any], bool]:
        """Add key if absent; return the stored (key, value) and whether it was added."""
        chain, entry = self._locate(key)
        if entry is not None:
            return (entry.key, entry.value), False
        chain.insert(0, _Entry(key, value))
        self._size += 1
        return (key, value), True

    def find(self, key: Any) -> tuple[Any, Any] | None:
        """Stored (key, value) for key, or None when absent."""
        _, entry = self._locate(key)
        if entry is None:
            return None
        return entry.key, entry.value

    def __contains__(self, key: Any) -> bool:
        return self._locate(key)[1] is not None

    def __getitem__(self, key: Any) -> Any:
        """Value for key; an absent key is first inserted with the value None."""
        _, entry = self._locate(key)
        if entry is None:
            self.insert(key, None)
            return None
        return entry.value

    def __setitem__(self, key: Any, value: Any) -> None:
        chain, entry = self._locate(key)
        if entry is None:
            chain.insert(0, _Entry(key, value))
            self._size += 1
        else:
            entry.value = value

    def erase(self, key: Any) -> int:
        """Remove key; return the number of entries removed (0 or 1)."""
        chain, entry = self._locate(key)
        if entry is None:
            return 0
        chain.remove(entry)
        self._size -= 1
        return 1

    def __repr__(self) -> str:
        return f"UnorderedMap({dict(self)!r})"


def print_map(table: UnorderedMap, out: TextIO | None = None) -> None:
    """Write every bucket on its own line with the entries of its chain."""
    stream = sys.stdout if out is None else out
    for n in range(table.bucket_count()):
        entries = "".join(f"({k}, {v}) " for k, v in table.bucket_items(n))
        stream.write(f"{n}: {entries}\n")