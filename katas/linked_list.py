"""Singly and doubly linked lists of integers, plus an m-th-to-last command."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None = None


@dataclass(eq=False)
class _DoubleNode:
    value: int
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


def _format(values: Iterable[int]) -> str:
    """Join values with commas, or return ``"empty"`` when there are none."""
    return ",".join(str(value) for value in values) or "empty"


class LinkedList:
    """A singly linked list."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        node = next(islice(self._nodes(), index, None), None)
        if node is None:
            raise IndexError(f"index {index} out of range")
        return node

    def insert(self, value: int) -> None:
        """Append a value to the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_start(self, value: int) -> None:
        """Put a value in front of the current head."""
        self._head = _Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at(self, index: int, value: int) -> None:
        """Insert a value so that it ends up at ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.insert_at_start(value)
        elif index == self._size:
            self.insert(value)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(value, before.next)
            self._size += 1

    def delete_at(self, index: int) -> None:
        """Remove the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            assert self._head is not None
            self._head = self._head.next
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(index - 1)
            target = before.next
            assert target is not None
            before.next = target.next
            if target is self._tail:
                self._tail = before
        self._size -= 1

    def mth_to_last(self, m: int) -> int:
        """Return the m-th value from the end; 1 is the last value.

        Values of ``m`` below 1 give the last value.
        """
        if self._size == 0 or m > self._size:
            raise IndexError("invalid index")
        return self._node_at(self._size - max(m, 1)).value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        return _format(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def _nodes(self) -> Iterator[_DoubleNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _DoubleNode:
        node = next(islice(self._nodes(), index, None), None)
        if node is None:
            raise IndexError(f"index {index} out of range")
        return node

    def insert(self, value: int) -> None:
        """Append a value to the end of the list."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_start(self, value: int) -> None:
        """Put a value in front of the current head."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at(self, index: int, value: int) -> None:
        """Insert a value so that it ends up at ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            self.insert_at_start(value)
        elif index == self._size:
            self.insert(value)
        else:
            before = self._node_at(index - 1)
            after = before.next
            assert after is not None
            node = _DoubleNode(value, next=after, prev=before)
            after.prev = node
            before.next = node
            self._size += 1

    def delete_at(self, index: int) -> None:
        """Remove the value at ``index``."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        target = self._node_at(index)
        if target.prev is None:
            self._head = target.next
        else:
            target.prev.next = target.next
        if target.next is None:
            self._tail = target.prev
        else:
            target.next.prev = target.prev
        self._size -= 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        return _format(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def parse_traversal_input(num_text: str, list_text: str) -> tuple[int, LinkedList]:
    """Parse the position line and the space-separated values line."""
    m = int(num_text)
    values = LinkedList(int(item) for item in list_text.split(" "))
    return m, values


def traversal_main(argv: list[str] | None = None) -> int:
    """Read m and a list from standard input; print the size and the m-th to last value."""
    num_text = sys.stdin.readline().rstrip("\r\n")
    list_text = sys.stdin.readline().rstrip("\r\n")
    try:
        m, values = parse_traversal_input(num_text, list_text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print(len(values))
    try:
        print(values.mth_to_last(m))
    except IndexError:
        print("NIL")
    return 0