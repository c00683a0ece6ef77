"""A first-in first-out queue backed by a linked list."""

from __future__ import annotations

from typing import Any, Iterator

from structkit.linked_list import LinkedList


class Queue:
    """FIFO queue: push at the back, pop from the front."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def front(self) -> Any:
        """Oldest element."""
        return self._items.front()

    def back(self) -> Any:
        """Newest element."""
        return self._items.back()

    def empty(self) -> bool:
        """True when the queue holds no elements."""
        return self._items.empty()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def push(self, value: Any) -> None:
        """Add value at the back."""
        self._items.push_back(value)

    def pop(self) -> None:
        """Remove the front element."""
        self._items.pop_front()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Queue):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self._items, other._items))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"