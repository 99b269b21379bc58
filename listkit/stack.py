"""A last-in, first-out stack built on linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from listkit.linked_list import _Chain, _Node, _write_lines

_EMPTY = "Stack is empty"


class Stack(_Chain):
    """Stack whose iteration runs from the top element downwards."""

    def __init__(self) -> None:
        super().__init__()

    def is_empty(self) -> bool:
        """Return whether the stack holds no values."""
        return super().is_empty()

    def __len__(self) -> int:
        """Return the number of values held."""
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values, top first."""
        return super().__iter__()

    def top(self) -> Any:
        """Return the value on top of the stack."""
        return self._value_of(self._head, _EMPTY)

    def push(self, value: Any) -> None:
        self._link_front(_Node(value))

    def pop(self) -> None:
        """Discard the value on top of the stack."""
        self._unlink_front(_EMPTY)

    def print_elements(self, file: Optional[TextIO] = None) -> None:
        """Write every value on its own line, top first."""
        _write_lines(self, file)