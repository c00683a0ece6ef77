import operator
import random

import pytest

from structkit.priority_queue import PriorityQueue, main


def drain(pq):
    out = []
    while not pq.empty():
        out.append(pq.top())
        pq.pop()
    return out


def test_empty_queue():
    pq = PriorityQueue()
    assert pq.empty()
    assert len(pq) == 0


def test_top_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().top()


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().pop()


def test_max_heap_top_is_largest():
    pq = PriorityQueue()
    for v in [3, 9, 1, 7]:
        pq.push(v)
    assert pq.top() == 9
    assert len(pq) == 4


def test_max_heap_drains_descending():
    values = [5, -2, 8, 0, 8, 3, -7, 11, 4]
    pq = PriorityQueue()
    for v in values:
        pq.push(v)
    assert drain(pq) == sorted(values, reverse=True)


def test_min_heap_drains_ascending():
    values = [5, -2, 8, 0, 8, 3, -7, 11, 4]
    pq = PriorityQueue(operator.gt)
    for v in values:
        pq.push(v)
    assert drain(pq) == sorted(values)


def test_random_values_sorted():
    rng = random.Random(42)
    values = [rng.randint(-1000, 1000) for _ in range(200)]
    pq = PriorityQueue()
    for v in values:
        pq.push(v)
    assert drain(pq) == sorted(values, reverse=True)


def test_interleaved_push_pop():
    pq = PriorityQueue()
    pq.push(4)
    pq.push(10)
    pq.pop()
    pq.push(6)
    assert pq.top() == 6
    pq.pop()
    assert pq.top() == 4
    assert len(pq) == 1


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Max Priority Queue:"
    assert lines[2] == "Min Priority Queue:"
    assert lines[1].endswith("is sorted descending?")
    assert lines[3].endswith("is sorted ascending?")
    expected = {(-i if i % 2 else i) for i in range(10)}
    max_vals = [int(x) for x in lines[1].split()[:10]]
    min_vals = [int(x) for x in lines[3].split()[:10]]
    assert set(max_vals) == expected
    assert max_vals == sorted(max_vals, reverse=True)
    assert min_vals == sorted(min_vals)
    assert min_vals == list(reversed(max_vals))