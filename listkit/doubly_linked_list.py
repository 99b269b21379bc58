"""A doubly linked list with access at both ends and by position."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from listkit.linked_list import _Chain, _Node, _walk, _write_lines

_TOO_FEW = "there are not enough elements in the list"


class _DNode(_Node):
    __slots__ = ("prev",)

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.prev: Optional[_DNode] = None


class DoublyLinkedList(_Chain):
    """Doubly linked list that can be walked in either direction."""

    def __init__(self) -> None:
        super().__init__()

    def __len__(self) -> int:
        """Return the number of values held."""
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values, first to last."""
        return super().__iter__()

    def head(self) -> Any:
        """Return the first value."""
        return self._value_of(self._head, "there is no head in the list")

    def tail(self) -> Any:
        """Return the last value."""
        return self._value_of(self._tail, "there is no tail in the list")

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = _DNode(value)
        node.prev = self._tail
        self._link_back(node)

    def prepend(self, value: Any) -> None:
        """Add a value at the start."""
        node = _DNode(value)
        if self._head is not None:
            self._head.prev = node
        self._link_front(node)

    def insert(self, index: int, value: Any) -> None:
        """Insert a value next to the node at ``index``.

        The value goes after that node, except when the node is the head of a
        list with more than one element, where it goes in front of it.
        """
        if not 0 <= index < self._size:
            raise IndexError(
                "index cannot be greater than the length of the doubly linked list"
            )
        anchor = self._node_at(index)
        if anchor is self._tail:
            self.append(value)
        elif anchor is self._head:
            self.prepend(value)
        else:
            node = _DNode(value)
            node.prev = anchor
            node.next = anchor.next
            anchor.next.prev = node
            anchor.next = node
            self._size += 1

    def remove(self, index: int) -> None:
        """Remove the value at ``index``."""
        if self._head is None:
            raise IndexError("cannot remove items because there are no items in the list")
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        if index == 0:
            self.shift()
        elif index == self._size - 1:
            self.pop()
        else:
            node = self._node_at(index)
            node.prev.next = node.next
            node.next.prev = node.prev
            self._size -= 1

    def pop(self) -> None:
        """Remove the last value."""
        if self._tail is None or self._head is self._tail:
            self._unlink_front(_TOO_FEW)
            return
        self._tail = self._tail.prev
        self._tail.next = None
        self._size -= 1

    def shift(self) -> None:
        """Remove the first value."""
        self._unlink_front(_TOO_FEW)
        if self._head is not None:
            self._head.prev = None

    def get(self, index: int) -> Any:
        """Return the value at ``index``."""
        if self._head is None:
            raise IndexError(_TOO_FEW)
        if not 0 <= index < self._size:
            raise IndexError("index cannot be greater than the length")
        return self._node_at(index).value

    def set(self, index: int, value: Any) -> None:
        """Replace the value at ``index``; it never adds an element."""
        if index == 0 and self._size == 0:
            raise IndexError("set function cannot be used to insert elements")
        if not 0 <= index < self._size:
            raise IndexError("index cannot be greater than length")
        self._node_at(index).value = value

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in _walk(self._tail, "prev"))

    def print_forward(self, file: Optional[TextIO] = None) -> None:
        """Write every value on its own line, first to last."""
        _write_lines(self, file)

    def print_backwards(self, file: Optional[TextIO] = None) -> None:
        """Write every value on its own line, last to first."""
        _write_lines(reversed(self), file)

    def to_list(self) -> list:
        """Return the values as a list; the list must not be empty."""
        if self._size < 1:
            raise IndexError("there are not items in the list to be added to the array")
        return list(self)