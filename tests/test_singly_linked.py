import pytest

from listas.singly_linked import LinkedList


def test_worked_example_sequence():
    lista = LinkedList()
    lista.push_back(1)
    lista.push_back(2)
    lista.push_front(0)
    lista.insert(3, 0)
    lista.insert(3, 4)
    assert list(lista) == [3, 0, 1, 2, 3]
    assert len(lista) == 5
    assert lista.format() == "3\n0\n1\n2\n3\n"


def test_insert_in_middle():
    lista = LinkedList(["a", "c", "d"])
    lista.insert("b", 1)
    assert list(lista) == ["a", "b", "c", "d"]
    lista.insert("x", 3)
    assert list(lista) == ["a", "b", "c", "x", "d"]


def test_push_back_after_middle_insert_keeps_tail():
    lista = LinkedList([1, 3])
    lista.insert(2, 1)
    lista.push_back(4)
    assert list(lista) == [1, 2, 3, 4]


def test_insert_beyond_size_raises():
    lista = LinkedList([1, 2])
    with pytest.raises(IndexError):
        lista.insert(5, 3)
    assert list(lista) == [1, 2]


def test_insert_negative_raises():
    lista = LinkedList([1])
    with pytest.raises(IndexError):
        lista.insert(5, -1)
    assert len(lista) == 1


def test_format_lines_roundtrip():
    items = [4, 8, 15, 16]
    lista = LinkedList(items)
    assert [int(line) for line in lista.format().splitlines()] == items


def test_clear_and_reuse():
    lista = LinkedList([1, 2, 3])
    lista.clear()
    assert len(lista) == 0
    assert lista.format() == ""
    lista.push_front(9)
    lista.push_back(10)
    assert list(lista) == [9, 10]