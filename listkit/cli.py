"""Command that builds a small doubly linked list and prints it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from listkit.doubly_linked_list import DoublyLinkedList


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the demonstration list, print its contents and return 0."""
    parser = argparse.ArgumentParser(
        description="Build a doubly linked list and print its contents."
    )
    parser.parse_args(argv)

    items = DoublyLinkedList()
    items.append(1)
    items.append(2)
    items.append(3)
    items.prepend(0)

    for value in items.to_list():
        print(f"item of the arrayyy: {value}")
    print(f"head val: {items.head()}")
    print(f"tail val: {items.tail()}")
    print(f"length: {len(items)}")
    items.print_forward()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())