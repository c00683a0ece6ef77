"""A binary-heap priority queue with a configurable ordering."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Sequence


class PriorityQueue:
    """Heap whose top is the element no other element is ordered after.

    With the default ``operator.lt`` the largest element is on top;
    with ``operator.gt`` the smallest is.
    """

    def __init__(self, compare: Callable[[Any, Any], bool] = operator.lt) -> None:
        self._heap: list[Any] = []
        self._compare = compare

    @staticmethod
    def _parent(index: int) -> int:
        return (index - 1) // 2

    @staticmethod
    def _left(index: int) -> int:
        return 2 * index + 1

    @staticmethod
    def _right(index: int) -> int:
        return 2 * (index + 1)

    def _upheap(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = self._parent(index)
            if not self._compare(heap[parent], heap[index]):
                return
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _downheap(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while self._left(index) < size:
            left, right = self._left(index), self._right(index)
            if right >= size or self._compare(heap[right], heap[left]):
                child = left
            else:
                child = right
            if not self._compare(heap[index], heap[child]):
                return
            heap[index], heap[child] = heap[child], heap[index]
            index = child

    def top(self) -> Any:
        """Element at the top of the heap."""
        if not self._heap:
            raise IndexError("top of empty priority queue")
        return self._heap[0]

    def empty(self) -> bool:
        """True when the queue holds no elements."""
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, value: Any) -> None:
        """Insert value, keeping the heap order."""
        self._heap.append(value)
        self._upheap(len(self._heap) - 1)

    def pop(self) -> None:
        """Remove the top element."""
        heap = self._heap
        if not heap:
            raise IndexError("pop from empty priority queue")
        heap[0], heap[-1] = heap[-1], heap[0]
        heap.pop()
        self._downheap(0)


def _drain(queue: PriorityQueue) -> list[Any]:
    out = []
    while not queue.empty():
        out.append(queue.top())
        queue.pop()
    return out


def main(argv: Sequence[str] | None = None) -> int:
    """Fill a max and a min queue with sample values and print them in pop order."""
    max_pq = PriorityQueue()
    min_pq = PriorityQueue(operator.gt)
    for i in range(10):
        value = -i if i % 2 else i
        max_pq.push(value)
        min_pq.push(value)

    out = sys.stdout
    out.write("Max Priority Queue:\n")
    out.write("".join(f"{v} " for v in _drain(max_pq)))
    out.write("is sorted descending?\n")
    out.write("Min Priority Queue:\n")
    out.write("".join(f"{v} " for v in _drain(min_pq)))
    out.write("is sorted ascending?\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())