import io

import pytest

from listkit.doubly_linked_list import DoublyLinkedList


def make(*values):
    dll = DoublyLinkedList()
    for value in values:
        dll.append(value)
    return dll


def assert_consistent(dll, expected):
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)


def test_append_and_prepend_order():
    dll = make(1, 2, 3)
    dll.prepend(0)
    assert_consistent(dll, [0, 1, 2, 3])
    assert (dll.head(), dll.tail()) == (0, 3)


def test_prepend_into_empty():
    dll = DoublyLinkedList()
    dll.prepend(5)
    assert_consistent(dll, [5])
    assert (dll.head(), dll.tail()) == (5, 5)


@pytest.mark.parametrize(
    "start, index, expected",
    [
        (["a"], 0, ["a", "x"]),
        (["a", "b", "c"], 0, ["x", "a", "b", "c"]),
        (["a", "b", "c"], 1, ["a", "b", "x", "c"]),
        (["a", "b", "c"], 2, ["a", "b", "c", "x"]),
    ],
)
def test_insert(start, index, expected):
    dll = make(*start)
    dll.insert(index, "x")
    assert_consistent(dll, expected)
    assert (dll.head(), dll.tail()) == (expected[0], expected[-1])


@pytest.mark.parametrize(
    "index, expected",
    [(0, [2, 3, 4]), (1, [1, 3, 4]), (2, [1, 2, 4]), (3, [1, 2, 3])],
)
def test_remove(index, expected):
    dll = make(1, 2, 3, 4)
    dll.remove(index)
    assert_consistent(dll, expected)


@pytest.mark.parametrize(
    "start, action, match",
    [
        ([], lambda d: d.head(), "no head"),
        ([], lambda d: d.tail(), "no tail"),
        ([1, 2, 3], lambda d: d.insert(-1, 9), "length"),
        ([1, 2, 3], lambda d: d.insert(3, 9), "length"),
        ([1, 2, 3], lambda d: d.insert(10, 9), "length"),
        ([], lambda d: d.insert(0, 1), "length"),
        ([], lambda d: d.remove(0), "no items"),
        ([1, 2], lambda d: d.remove(2), "out of bounds"),
        ([1, 2], lambda d: d.remove(-1), "out of bounds"),
        ([], lambda d: d.pop(), "not enough"),
        ([], lambda d: d.shift(), "not enough"),
        ([], lambda d: d.get(0), "not enough"),
        ([1], lambda d: d.get(1), "greater than the length"),
        ([], lambda d: d.set(0, 1), "cannot be used to insert"),
        ([1, 2], lambda d: d.set(2, 5), "greater than length"),
        ([], lambda d: d.to_list(), "not items"),
    ],
)
def test_errors_leave_list_unchanged(start, action, match):
    dll = make(*start)
    with pytest.raises(IndexError, match=match):
        action(dll)
    assert_consistent(dll, start)


def test_pop_and_shift():
    dll = make(1, 2, 3)
    steps = [(dll.pop, [1, 2]), (dll.shift, [2]), (dll.pop, [])]
    for step, expected in steps:
        step()
        assert_consistent(dll, expected)


def test_shift_last_element_empties():
    dll = make(7)
    dll.shift()
    assert_consistent(dll, [])
    with pytest.raises(IndexError):
        dll.head()


def test_get_and_set():
    dll = make(1, 2, 3)
    assert [dll.get(i) for i in range(3)] == [1, 2, 3]
    dll.set(0, 99)
    assert (dll.get(0), dll.head()) == (99, 99)


def test_to_list():
    assert make(0, 1, 2).to_list() == [0, 1, 2]


def test_print_forward_and_backwards():
    dll = make(1, 2, 3)
    forward, backward = io.StringIO(), io.StringIO()
    dll.print_forward(forward)
    dll.print_backwards(backward)
    assert forward.getvalue().splitlines() == ["1", "2", "3"]
    assert backward.getvalue().splitlines() == ["3", "2", "1"]