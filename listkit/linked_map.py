"""An association list mapping keys to values in insertion order."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional, TextIO, Tuple

from listkit.linked_list import _Node, _walk, _write_lines


class _Entry(_Node):
    __slots__ = ("key",)

    def __init__(self, key: Any, value: Any) -> None:
        super().__init__(value)
        self.key = key


class LinkedMap:
    """Map kept as a chain of key/value nodes.

    ``insert`` appends without checking for an existing key; lookups and
    updates act on the first node with a matching key.
    """

    def __init__(self, default_factory: Optional[Callable[[], Any]] = None) -> None:
        self._head: Optional[_Entry] = None
        self._default_factory = default_factory

    def _find(self, key: Any) -> Optional[_Entry]:
        return next((node for node in _walk(self._head) if node.key == key), None)

    def _append(self, entry: _Entry) -> None:
        last = None
        for last in _walk(self._head):
            pass
        if last is None:
            self._head = entry
        else:
            last.next = entry

    def insert(self, key: Any, value: Any) -> None:
        """Append a key/value pair at the end of the map."""
        self._append(_Entry(key, value))

    def put(self, key: Any, value: Any) -> None:
        """Replace the value of an existing key."""
        node = self._find(key)
        if node is None:
            raise KeyError("Cannot put")
        node.value = value

    def remove(self, key: Any) -> None:
        """Remove the first pair with the given key."""
        if self._head is None:
            raise KeyError("Map is empty")
        prev = None
        for node in _walk(self._head):
            if node.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                return
            prev = node
        raise KeyError("Key was not found")

    def __getitem__(self, key: Any) -> Any:
        """Return the value for ``key``, adding a default entry if it is missing."""
        node = self._find(key)
        if node is not None:
            return node.value
        value = self._default_factory() if self._default_factory is not None else None
        self._append(_Entry(key, value))
        return value

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in _walk(self._head))

    def items(self) -> Iterator[Tuple[Any, Any]]:
        return ((node.key, node.value) for node in _walk(self._head))

    def print_items(self, file: Optional[TextIO] = None) -> None:
        """Write each pair as ``key - value`` on its own line."""
        _write_lines((f"{key} - {value}" for key, value in self.items()), file)