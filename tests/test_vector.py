import pytest

from structkit.vector import BasicVector, Vector, VectorIterator


def make(values):
    v = Vector()
    for x in values:
        v.push_back(x)
    return v


def test_fill_constructor():
    v = Vector(3, "x")
    assert list(v) == ["x", "x", "x"]
    assert len(v) == 3
    assert v.capacity() == 3


def test_default_constructor_is_empty():
    v = Vector()
    assert v.empty()
    assert len(v) == 0
    assert v.capacity() == 0


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_push_back_doubles_capacity():
    v = Vector()
    capacities = []
    for x in range(5):
        v.push_back(x)
        capacities.append(v.capacity())
    assert capacities == [1, 2, 4, 4, 8]
    assert list(v) == [0, 1, 2, 3, 4]


def test_front_back_and_pop():
    v = make([10, 20, 30])
    assert v.front() == 10
    assert v.back() == 30
    v.pop_back()
    assert v.back() == 20
    assert len(v) == 2


def test_empty_access_raises():
    v = Vector()
    with pytest.raises(IndexError):
        v.front()
    with pytest.raises(IndexError):
        v.back()
    with pytest.raises(IndexError):
        v.pop_back()


def test_at_checks_capacity():
    v = make([1, 2, 3])
    assert v.at(1) == 2
    with pytest.raises(IndexError):
        v.at(v.capacity())
    with pytest.raises(IndexError):
        v.at(-1)


def test_setitem_and_getitem():
    v = make(["a", "b"])
    v[1] = "z"
    assert v[1] == "z"
    assert list(v) == ["a", "z"]


def test_copy_is_independent():
    v = make([1, 2, 3])
    c = v.copy()
    c[0] = 99
    c.push_back(4)
    assert list(v) == [1, 2, 3]
    assert list(c) == [99, 2, 3, 4]
    assert c.capacity() >= v.capacity()


def test_insert_single_middle():
    v = make([1, 2, 4])
    it = v.insert(v.begin() + 2, 3)
    assert list(v) == [1, 2, 3, 4]
    assert it.value() == 3
    assert it - v.begin() == 2


def test_insert_at_end_and_front():
    v = make([2])
    v.insert(v.end(), 3)
    v.insert(v.begin(), 1)
    assert list(v) == [1, 2, 3]


def test_insert_count():
    v = make([1, 5])
    it = v.insert(v.begin() + 1, 0, 3)
    assert list(v) == [1, 0, 0, 0, 5]
    assert it == v.begin() + 1
    assert v.capacity() > len(v)


def test_insert_count_zero_is_noop():
    v = make([1, 2])
    v.insert(1, "x", 0)
    assert list(v) == [1, 2]


def test_insert_out_of_range():
    v = make([1])
    with pytest.raises(IndexError):
        v.insert(5, 0)


def test_erase_single():
    v = make([1, 2, 3, 4])
    it = v.erase(v.begin() + 1)
    assert list(v) == [1, 3, 4]
    assert it.value() == 3


def test_erase_range():
    v = make([1, 2, 3, 4, 5])
    it = v.erase(v.begin() + 1, v.begin() + 3)
    assert list(v) == [1, 4, 5]
    assert it.value() == 4


def test_erase_out_of_range():
    v = make([1])
    with pytest.raises(IndexError):
        v.erase(v.end())


def test_foreign_iterator_rejected():
    a = make([1, 2])
    b = make([1, 2])
    with pytest.raises(ValueError):
        a.erase(b.begin())


def test_clear_keeps_capacity():
    v = make([1, 2, 3])
    cap = v.capacity()
    v.clear()
    assert v.empty()
    assert list(v) == []
    assert v.capacity() == cap


def test_iterator_walk_matches_contents():
    values = [3, 1, 4, 1, 5]
    v = make(values)
    seen = []
    it = v.begin()
    while it != v.end():
        seen.append(it.value())
        it.next()
    assert seen == values


def test_iterator_arithmetic_and_ordering():
    v = make([10, 20, 30, 40])
    b = v.begin()
    e = v.end()
    assert e - b == len(v)
    assert (2 + b) == (b + 2)
    assert (e - 1).value() == 40
    assert b < e and e > b and b <= b and e >= b
    assert b[3] == 40
    it = v.begin()
    it += 3
    it -= 1
    assert it.value() == 30
    it.prev()
    assert it.value() == 20


def test_iterator_set_writes_through():
    v = make([1, 2, 3])
    (v.begin() + 1).set("two")
    assert list(v) == [1, "two", 3]


def test_iterator_hash_consistent_with_eq():
    v = make([1, 2])
    assert {v.begin(), v.begin() + 0} == {v.begin()}


def test_iterator_out_of_bounds_value():
    it = VectorIterator([1, 2], 0)
    it.prev()
    with pytest.raises(IndexError):
        it.value()


def test_basic_vector_iteration():
    values = ["a", "b", "c"]
    bv = BasicVector(values)
    assert list(bv) == values
    assert len(bv) == len(values)
    assert bv.end() - bv.begin() == len(values)
    collected = []
    it = bv.begin()
    while it != bv.end():
        collected.append(it.value())
        it.next()
    assert collected == values