# listas

Three small list containers, each with its own storage strategy:

- `listas.singly_linked.LinkedList` is a singly linked list that keeps a reference to its last node.
- `listas.doubly_linked.DoublyLinkedList` is a doubly linked list. It can also be walked backwards.
- `listas.contiguous.ContiguousList` is a growable array with an explicit capacity and bounds-checked indexing.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Linked lists

```python
from listas.doubly_linked import DoublyLinkedList

items = DoublyLinkedList()
items.push_front(10)
items.push_back(20)
items.insert(15, 1)
items.insert(5, 0)
items.insert(25, 4)

list(items)            # [5, 10, 15, 20, 25]
list(reversed(items))  # [25, 20, 15, 10, 5]
len(items)             # 5
items.format()         # "5 10 15 20 25 "
items.clear()
len(items)             # 0
```

Both linked lists can be built from any iterable, for example
`DoublyLinkedList([1, 2, 3])`. Each one also has a `repr` that shows its
elements.

`insert(elem, pos)` puts `elem` at index `pos`. Any position from `0` to
`len(items)` is accepted. Any other position raises `IndexError`.

`LinkedList` has the same `push_back`, `push_front`, `insert(elem, pos)`,
`clear`, `len()` and iteration. It does not support `reversed()`. Its
`format()` writes one element per line:

```python
from listas.singly_linked import LinkedList

chain = LinkedList()
chain.push_back(1)
chain.push_back(2)
chain.push_front(0)
chain.insert(3, 0)
chain.insert(3, 4)
list(chain)      # [3, 0, 1, 2, 3]
chain.format()   # "3\n0\n1\n2\n3\n"
```

## Contiguous list

```python
from listas.contiguous import ContiguousList, ContiguousListError

values = ContiguousList()
for n in (10, 20, 30, 40):
    values.push_back(n)

values[0]            # 10
values[1] = 21
values.insert(2, 25) # [10, 21, 25, 30, 40]
duplicate = values.copy()
values.capacity()    # number of reserved slots

try:
    values[99]
except ContiguousListError as err:
    print(err)       # Índice fora dos limites.

values.clear()
len(values)          # 0
values.capacity()    # 0
```

### Capacity

`ContiguousList(n, init)` reserves `n` slots filled with `init`. The new list
still holds no elements. A negative `n` raises `ValueError`.

When the storage is full, `push_back` doubles the capacity. It starts from one
slot. `insert` grows the capacity by one slot only.

`copy()` returns an independent list with the same elements and the same
capacity. `clear()` drops the elements and releases all capacity.

### Indexing and errors

Indexing accepts only integer positions from `0` to `len(values) - 1`.
Negative indices are not counted from the end. Like any position out of range,
they raise `ContiguousListError`.

`insert(pos, elem)` accepts any position from `0` to `len(values)`. Any other
position raises `ContiguousListError` with the message
`Erro na funcao insert: posicao invalida`.

`ContiguousListError` is a subclass of `IndexError`.

### Argument order

Note that the argument order of `insert` differs between the containers.
`ContiguousList.insert` takes the position first, as `insert(pos, elem)`. The
linked lists take the element first, as `insert(elem, pos)`.

## Running the tests

```
pip install .[test]
pytest
```