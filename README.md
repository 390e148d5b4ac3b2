# linkedds

Small, dependency-free data structures built from linked nodes:

- `SinglyLinkedList` (`linkedds.singly_linked_list`) and `DoublyLinkedList`
  (`linkedds.doubly_linked_list`)
- `Queue`, a FIFO queue (`linkedds.linked_queue`)
- `Stack`, a LIFO stack with a fixed capacity (`linkedds.stack`)
- `BinarySearchTree`, ordered by a comparison function (`linkedds.bst`)

## Installation

```
pip install linkedds
```

## Linked lists

Both list types take an optional `print_func` that turns one value into the
text `print_list` writes for it. Without one, each value is written followed
by a space. `print_list` writes all the values in order and then a newline,
to standard output or to the file object it is given.

```python
from linkedds.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList(lambda v: f"[{v}]")
items.append(2)
items.prepend(1)
items.insert(5, 3)      # an index past the end appends
items.remove(10)        # an index past the end is ignored and gives None
items.reverse()
print(list(items))      # [3, 2, 1]
print(items.remove(0))  # 3
print(len(items), items.is_empty())  # 2 False
items.print_list()      # [2][1]
```

- `insert(index, value)` inserts before position `index`.
- `remove(index)` removes and returns the value at `index`.
- A negative index given to `insert` or `remove` raises `ValueError`.

`SinglyLinkedList` offers the same operations; `DoublyLinkedList` can also
be walked backwards with `reversed()`.

## Queue

```python
from linkedds.linked_queue import Queue

q = Queue()
q.enqueue("a")
q.enqueue("b")
q.peek()       # "a"
q.dequeue()    # "a"
q.peek()       # "b"
q.is_empty()   # False
```

On an empty queue, `peek` and `dequeue` both return `None` instead of
raising.

## Stack

```python
from linkedds.stack import Stack

s = Stack()     # holds up to 128 values by default; Stack(capacity) for other sizes
s.push(1)
s.push(2)
s.peek()        # 2
s.pop()         # 2
len(s)          # 1
```

`push` on a full stack raises `OverflowError`; `pop` and `peek` on an empty
stack raise `IndexError`. A capacity below 1 raises `ValueError`.

## Binary search tree

The tree is ordered by a comparison function `compare(a, b)` returning a
negative number, zero or a positive number; without one, values are
compared with `<` and `>`. Equal values go to the right subtree, so
duplicates are kept. An optional `print_func` turns one value into the text
`traverse` writes; by default each value is followed by a space.

```python
from linkedds.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (5, 3, 8, 1):
    tree.insert(value)
3 in tree               # True
tree.remove(3)          # True
tree.lookup(3)          # False
tree.remove(42)         # False
list(tree)              # [1, 5, 8]
tree.traverse()         # writes "1 5 8 " to standard output
```

The tree does no rebalancing.

## Running the tests

```
pip install -e ".[test]"
pytest
```