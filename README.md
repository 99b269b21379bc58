# listkit

Small container types built from linked nodes:

- `LinkedList` (`listkit.linked_list`): a singly linked list of values. `push_back` and `push_front` add at either end. `push_at_index(index, value)` inserts the value directly after the node at `index`.
- `Stack` (`listkit.stack`): a last-in, first-out stack with `push`, `pop`, `top` and `is_empty`. Iteration runs from the top down.
- `Queue` (`listkit.queue_list`): a first-in, first-out queue with `push`, `pop`, `front`, `back` and `is_empty`. Iteration runs from front to back.
- `LinkedMap` (`listkit.linked_map`): a key/value map that keeps its entries in insertion order. It has `insert`, `put`, `remove`, indexing, iteration over keys and `items()`.
- `DoublyLinkedList` (`listkit.doubly_linked_list`): a list that can be walked forwards and, with `reversed()`, backwards. It has `append`, `prepend`, `insert`, `remove`, `pop`, `shift`, `get`, `set`, `head`, `tail` and `to_list`.

Every container except `LinkedMap` supports `len()`, and every container can be iterated over. Each one also has a printing method (`print_items`, `print_elements`, `print_forward` or `print_backwards`). It writes one entry per line to the file object it is given, or to standard output if it is given none.

An operation that cannot be carried out raises an exception. Popping from an empty stack or queue, or using an index out of range, raises `IndexError`. Changing or removing a key that a `LinkedMap` does not hold raises `KeyError`.

A few behaviours to note:

- `LinkedMap.insert` appends a pair without checking whether the key is already present. Lookups, `put` and `remove` act on the first pair with a matching key.
- Reading a missing key from a `LinkedMap` adds an entry for that key. The entry's value comes from the map's `default_factory`, or is `None` when the map has no factory.
- `DoublyLinkedList.insert(index, value)` puts the value after the node at `index`. The exception is the head of a list with more than one element, where it puts the value in front.
- `DoublyLinkedList.to_list()` raises `IndexError` on an empty list.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from listkit.stack import Stack
from listkit.queue_list import Queue
from listkit.linked_map import LinkedMap
from listkit.doubly_linked_list import DoublyLinkedList

stack = Stack()
stack.push(1)
stack.push(2)
stack.top()        # 2
stack.pop()
list(stack)        # [1]

queue = Queue()
queue.push("a")
queue.push("b")
queue.front()      # "a"
queue.back()       # "b"

scores = LinkedMap(int)
scores.insert("alice", 3)
scores.put("alice", 5)
scores["bob"]      # 0: a missing key is added with a default value
list(scores.items())   # [("alice", 5), ("bob", 0)]

dll = DoublyLinkedList()
dll.append(1)
dll.append(2)
dll.prepend(0)
dll.to_list()          # [0, 1, 2]
list(reversed(dll))    # [2, 1, 0]
```

## Command line

```
listkit
```

This builds a small doubly linked list holding 0, 1, 2 and 3 as a demonstration. It prints the items, the head and tail values and the length, and then prints the items again one per line. The command takes no arguments of its own.