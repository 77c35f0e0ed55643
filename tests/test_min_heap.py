import pytest

from dsakit.min_heap import MinHeap


def test_push_and_pop():
    h = MinHeap()
    h.push(3)
    h.push(1)
    h.push(2)
    assert len(h) == 3
    assert h.pop() == 1
    assert len(h) == 2


def test_pops_in_ascending_order():
    h = MinHeap([5, 2, 8, 1, 9, 3])
    assert [h.pop() for _ in range(6)] == [1, 2, 3, 5, 8, 9]


def test_push_type_check():
    h = MinHeap()
    with pytest.raises(TypeError):
        h.push("not-an-int")


def test_constructor_type_check():
    with pytest.raises(TypeError):
        MinHeap([1, "two"])


def test_pop_empty():
    with pytest.raises(IndexError):
        MinHeap().pop()