import pytest

from listas.doubly_linked import DoublyLinkedList


def test_worked_example_sequence():
    lista = DoublyLinkedList()
    lista.push_front(10)
    assert list(lista) == [10]
    lista.push_back(20)
    assert list(lista) == [10, 20]
    lista.insert(15, 1)
    assert list(lista) == [10, 15, 20]
    lista.insert(5, 0)
    assert list(lista) == [5, 10, 15, 20]
    lista.insert(25, 4)
    assert list(lista) == [5, 10, 15, 20, 25]
    assert lista.format() == "5 10 15 20 25 "


def test_empty_then_one_element():
    lista = DoublyLinkedList()
    assert lista.format() == ""
    assert len(lista) == 0
    lista.push_back(3)
    assert lista.format() == "3 "
    assert len(lista) == 1


def test_reversed_matches_forward():
    lista = DoublyLinkedList(["a", "b", "c", "d"])
    lista.insert("x", 2)
    assert list(reversed(lista)) == list(lista)[::-1]


def test_push_front_on_empty_sets_both_ends():
    lista = DoublyLinkedList()
    lista.push_front(7)
    assert list(lista) == [7]
    assert list(reversed(lista)) == [7]


def test_len_tracks_insertions():
    lista = DoublyLinkedList()
    for i, value in enumerate(range(0, 50, 5)):
        lista.insert(value, i // 2)
        assert len(lista) == i + 1
    assert sorted(lista) == list(range(0, 50, 5))


@pytest.mark.parametrize("pos", [-1, 4])
def test_insert_out_of_range(pos):
    lista = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        lista.insert(9, pos)
    assert list(lista) == [1, 2, 3]


def test_clear():
    lista = DoublyLinkedList([1, 2, 3])
    lista.clear()
    assert len(lista) == 0
    assert list(lista) == []
    assert list(reversed(lista)) == []
    lista.push_back(4)
    assert list(lista) == [4]