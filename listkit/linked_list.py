"""A singly linked list that grows at either end or after a given node."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator, Optional, TextIO


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next


def _walk(node: Optional[_Node], link: str = "next") -> Iterator[_Node]:
    """Yield nodes from ``node`` onwards, following the ``link`` attribute."""
    while node is not None:
        yield node
        node = getattr(node, link)


def _write_lines(values: Iterable[Any], file: Optional[TextIO] = None) -> None:
    for value in values:
        print(value, file=file)


class _Chain:
    """Node storage shared by the linked containers."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self._head))

    def is_empty(self) -> bool:
        return self._size < 1

    @staticmethod
    def _value_of(node: Optional[_Node], message: str) -> Any:
        if node is None:
            raise IndexError(message)
        return node.value

    def _node_at(self, index: int) -> _Node:
        return next(islice(_walk(self._head), index, None))

    def _link_back(self, node: _Node) -> None:
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _link_front(self, node: _Node) -> None:
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def _unlink_front(self, message: str) -> None:
        if self._head is None:
            raise IndexError(message)
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1


class LinkedList(_Chain):
    """Singly linked list holding values in insertion order."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        """Return the number of values held."""
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values, first to last."""
        return super().__iter__()

    def push_back(self, value: Any) -> None:
        """Append a value at the end of the list."""
        self._link_back(_Node(value))

    def push_front(self, value: Any) -> None:
        """Insert a value at the start of the list."""
        self._link_front(_Node(value))

    def push_at_index(self, index: int, value: Any) -> None:
        """Insert a value directly after the node at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError("cannot insert in this index (index out of bounds)")
        anchor = self._node_at(index)
        if anchor is self._tail:
            self._link_back(_Node(value))
            return
        anchor.next = _Node(value, anchor.next)
        self._size += 1

    def print_items(self, file: Optional[TextIO] = None) -> None:
        """Write every value on its own line, first to last."""
        _write_lines(self, file)