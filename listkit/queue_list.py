"""A first-in, first-out queue built on linked nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from listkit.linked_list import _Chain, _Node, _write_lines

_EMPTY = "Queue is empty"


class Queue(_Chain):
    """Queue whose iteration runs from front to back."""

    def __init__(self) -> None:
        super().__init__()

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return super().is_empty()

    def __len__(self) -> int:
        """Return the number of values held."""
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values, front first."""
        return super().__iter__()

    def push(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self._link_back(_Node(value))

    def pop(self) -> None:
        """Discard the value at the front of the queue."""
        self._unlink_front(_EMPTY)

    def front(self) -> Any:
        return self._value_of(self._head, _EMPTY)

    def back(self) -> Any:
        return self._value_of(self._tail, _EMPTY)

    def print_elements(self, file: Optional[TextIO] = None) -> None:
        """Write every value on its own line, front first."""
        _write_lines(self, file)