import pytest

from structkit.fifo_queue import Queue


def filled(values):
    q = Queue()
    for v in values:
        q.push(v)
    return q


def test_new_queue_is_empty():
    q = Queue()
    assert q.empty()
    assert len(q) == 0


def test_fifo_order():
    q = filled([1, 2, 3])
    assert q.front() == 1
    assert q.back() == 3
    out = []
    while not q.empty():
        out.append(q.front())
        q.pop()
    assert out == [1, 2, 3]


def test_size_tracks_pushes_and_pops():
    q = filled(["a", "b"])
    assert len(q) == 2
    q.pop()
    assert len(q) == 1
    assert q.front() == "b"


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Queue().pop()


def test_front_empty_raises():
    with pytest.raises(IndexError):
        Queue().front()
    with pytest.raises(IndexError):
        Queue().back()


def test_equality():
    assert filled([1, 2, 3]) == filled([1, 2, 3])
    assert not (filled([1, 2, 3]) == filled([1, 2]))
    assert not (filled([1, 2, 3]) == filled([1, 5, 3]))
    assert Queue() == Queue()


def test_equality_with_other_type():
    assert (filled([1]) == [1]) is False


def test_iteration_matches_order():
    q = filled([4, 5, 6])
    assert list(q) == [4, 5, 6]