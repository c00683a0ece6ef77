"""A doubly linked list with sentinel nodes and bidirectional iterators."""

from __future__ import annotations

import operator
from typing import Any, Iterable, Iterator


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class ListIterator:
    """A position inside a LinkedList, movable in both directions."""

    __slots__ = ("_owner", "_node")

    def __init__(self, owner: LinkedList, node: _Node) -> None:
        self._owner = owner
        self._node = node

    def _is_sentinel(self, node: _Node | None) -> bool:
        return node is None or node is self._owner._head or node is self._owner._tail

    def value(self) -> Any:
        """Return the element at this position."""
        if self._is_sentinel(self._node):
            raise IndexError("iterator does not point at an element")
        return self._node.value

    def set(self, value: Any) -> None:
        """Replace the element at this position."""
        if self._is_sentinel(self._node):
            raise IndexError("iterator does not point at an element")
        self._node.value = value

    def next(self) -> ListIterator:
        """Move one position forward and return this iterator."""
        if self._node is self._owner._tail:
            raise IndexError("cannot advance past the end")
        self._node = self._node.next
        return self

    def prev(self) -> ListIterator:
        """Move one position backward and return this iterator."""
        target = self._node.prev
        if target is None or target is self._owner._head:
            raise IndexError("cannot move before the beginning")
        self._node = target
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))

    def __repr__(self) -> str:
        if self._is_sentinel(self._node):
            return "ListIterator(<end>)"
        return f"ListIterator({self._node.value!r})"


class LinkedList:
    """A doubly linked list holding its elements between two sentinel nodes."""

    def __init__(self, count: int = 0, value: Any = None) -> None:
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must not be negative")
        self._head = _Node()
        self._tail = _Node()
        self._reset()
        for _ in range(count):
            self.push_back(value)

    def _reset(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    @classmethod
    def _from_iterable(cls, values: Iterable[Any]) -> LinkedList:
        result = cls()
        for value in values:
            result.push_back(value)
        return result

    def copy(self) -> LinkedList:
        """Return an independent list with the same elements in the same order."""
        return LinkedList._from_iterable(self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def empty(self) -> bool:
        """True when the list holds no elements."""
        return self._size == 0

    def front(self) -> Any:
        """First element."""
        if self._size == 0:
            raise IndexError("front of empty list")
        return self._head.next.value

    def back(self) -> Any:
        """Last element."""
        if self._size == 0:
            raise IndexError("back of empty list")
        return self._tail.prev.value

    def begin(self) -> ListIterator:
        """Iterator to the first element (equal to end() when empty)."""
        return ListIterator(self, self._head.next)

    def end(self) -> ListIterator:
        """Iterator one past the last element."""
        return ListIterator(self, self._tail)

    def clear(self) -> None:
        """Remove every element."""
        self._reset()

    def _node_of(self, pos: ListIterator) -> _Node:
        if not isinstance(pos, ListIterator) or pos._owner is not self:
            raise ValueError("iterator does not belong to this list")
        return pos._node

    def _link_before(self, node: _Node, value: Any) -> _Node:
        new = _Node(value)
        new.prev = node.prev
        new.next = node
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def _unlink(self, node: _Node) -> _Node:
        following = node.next
        node.prev.next = following
        following.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return following

    def insert(self, pos: ListIterator, value: Any) -> ListIterator:
        """Insert value before pos and return an iterator to the new element."""
        node = self._node_of(pos)
        if node is self._head or node.prev is None:
            raise IndexError("invalid insert position")
        return ListIterator(self, self._link_before(node, value))

    def erase(self, pos: ListIterator) -> ListIterator:
        """Remove the element at pos and return an iterator to the one after it."""
        node = self._node_of(pos)
        if node is self._head or node is self._tail or node.prev is None:
            raise IndexError("cannot erase at this position")
        return ListIterator(self, self._unlink(node))

    def push_back(self, value: Any) -> None:
        """Append value at the end."""
        self._link_before(self._tail, value)

    def pop_back(self) -> None:
        """Remove the last element."""
        if self._size == 0:
            raise IndexError("pop from empty list")
        self._unlink(self._tail.prev)

    def push_front(self, value: Any) -> None:
        """Prepend value at the start."""
        self._link_before(self._head.next, value)

    def pop_front(self) -> None:
        """Remove the first element."""
        if self._size == 0:
            raise IndexError("pop from empty list")
        self._unlink(self._head.next)