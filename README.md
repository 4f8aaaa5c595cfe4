# dsakit

Classic data structures with Python protocols, plus a small lending-library
catalogue and a binary file of fixed-size book records, each with an
interactive command.

## Installation

```
pip install dsakit
```

To run the tests:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module              | Contents |
|---------------------|----------|
| `dsakit.array`      | `FixedArray` (bounded) and `DynamicArray` (doubles when full, halves when half empty) |
| `dsakit.stack`      | `Stack`, a bounded last-in, first-out stack |
| `dsakit.deque`      | `CircularDeque`, a bounded deque in a ring of slots |
| `dsakit.priority`   | `PriorityQueue`, highest priority first, insertion order among equals |
| `dsakit.sll`        | `SinglyLinkedList` |
| `dsakit.dll`        | `DoublyLinkedList` and `CircularDoublyLinkedList` |
| `dsakit.cll`        | `CircularLinkedList` |
| `dsakit.bst`        | `BinarySearchTree` of distinct items |
| `dsakit.library`    | `Book`, `Library`, `BookRecord`, `append_record`, `read_records`, `main` |
| `dsakit.complexnum` | `ComplexPair`, an integer pair with `+` and unary `-` |
| `dsakit.item`       | `Item`, holding one class-wide value (initially 20) |

### Containers

- `FixedArray(capacity)` supports `append`, `insert(index, item)`, indexing,
  assignment and `del` by index, `len()`, iteration, `copy()`, `is_empty()`,
  `is_full()` and a `capacity` property. Adding to a full array raises
  `OverflowError`; a bad index raises `IndexError`.
- `DynamicArray(capacity)` has the same interface but never fills up: its
  `capacity` doubles when an item is added to a full array and halves when a
  deletion leaves it half full.
- `Stack(capacity)`: `push`, `pop` and `peek` (both return the top item),
  `is_empty`, `is_full`, `len()` and `copy()`. Pushing onto a full stack raises
  `OverflowError`; popping or peeking an empty one raises `IndexError`.
- `CircularDeque(capacity)`: `insert_front`, `insert_rear`, `delete_front`,
  `delete_rear` (the deletes return the removed item), `is_empty`, `is_full`,
  `len()` and iteration from front to rear.
- `PriorityQueue()`: `insert(item, priority)`, `pop()` and `peek()`; iteration
  yields `(item, priority)` pairs from highest to lowest priority.
- `SinglyLinkedList(items=())`: `insert_begin`, `insert_end`,
  `insert_after(target, item)`, `delete_first`, `delete_last`, `remove(item)`,
  `in`, iteration, `len()` and `copy()`.
- `DoublyLinkedList()`: `insert_begin`, `insert_end`, `insert_after`,
  `delete_first`, `in`, iteration, `reversed()` and `len()`.
- `CircularDoublyLinkedList()`: `insert_begin`, `insert_end`, `in`, iteration,
  `reversed()` and `len()`.
- `CircularLinkedList()`: `insert_begin`, `insert_end`, `insert_after`,
  `delete_first`, `delete_last`, `remove`, `in`, iteration and `len()`.
- `BinarySearchTree()`: `insert` (an equal item already present is ignored),
  `remove` (a missing item is ignored), `min_value()` (raises `ValueError` on an
  empty tree), `inorder()`, ascending iteration, `in` and `len()`.

In the linked lists, deleting from an empty list raises `IndexError`, and
`insert_after` or `remove` with an item that is not there raises `ValueError`.

## Examples

```python
from dsakit.array import FixedArray, DynamicArray
from dsakit.stack import Stack
from dsakit.priority import PriorityQueue
from dsakit.sll import SinglyLinkedList
from dsakit.bst import BinarySearchTree

arr = FixedArray(5)
for value in (10, 20, 30, 40):
    arr.append(value)
arr.insert(1, 5)
print(list(arr))          # [10, 5, 20, 30, 40]
print(arr.is_full())      # True

stack = Stack(5)
stack.push(10)
stack.push(20)
print(stack.peek())       # 20
print(len(stack))         # 2

queue = PriorityQueue()
queue.insert(10, 5)
queue.insert(20, 3)
queue.insert(5, 7)
print(queue.peek())       # 5

items = SinglyLinkedList([10, 20])
items.insert_begin(30)
print(list(items))        # [30, 10, 20]
print(20 in items)        # True

tree = BinarySearchTree()
for key in (50, 30, 70, 20):
    tree.insert(key)
print(list(tree))         # [20, 30, 50, 70]
print(tree.min_value())   # 20
```

### Library catalogue

```python
from dsakit.library import Library

library = Library()
library.add_book(1, "Dune", "Frank Herbert")
library.issue_book(1)
for book in library:
    print(book.describe())
# ID: 1, Title: Dune, Author: Frank Herbert, Status: Issued
```

`issue_book` and `return_book` raise `BookNotFoundError` for an unknown id and
`BookStateError` when the book is already issued or was not issued.

### Book record file

`BookRecord(book_id, name, price)` packs to a 28-byte little-endian record: a
32-bit id, a 20-byte NUL-padded name (at most 19 bytes of UTF-8 are kept) and
a 32-bit float price. `append_record(path, record)` appends one record to a
file; `read_records(path)` returns every complete record in it.

## Command line

```
dsakit-library
```

starts an interactive menu to add, list, issue and return books.

```
dsakit-library --records [FILE]
```

starts a menu that appends book records to, and lists them from, `FILE`
(`filedata.dat` when no file is given).

## Limitations

The lending-library catalogue lives in memory only: books added through the
`Library` class or the default menu are lost when the program ends. Only the
`--records` menu keeps anything on disk, and it has no issuing or returning.