"""A last-in, first-out stack and a duplicate-pair remover built on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Stack:
    """A stack; iteration goes from the bottom to the top."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("peek at an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


def remove_adjacent_duplicates(text: str) -> str:
    """Repeatedly cancel pairs of equal neighbouring characters.

    When a pair empties the stack, the cancelled character is still the one
    the next character is compared with, so a third equal character in a row
    tries to pop an empty stack and raises IndexError.
    """
    if not text:
        raise ValueError("text must not be empty")

    stack = Stack(text[0])
    previous = text[0]
    for current in text[1:]:
        if current != previous:
            stack.push(current)
            previous = current
        else:
            stack.pop()
            if not stack.is_empty():
                previous = stack.peek()
    return "".join(stack)