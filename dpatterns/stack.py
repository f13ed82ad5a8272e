"""A last-in, first-out stack with an optional capacity and an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MENU = "\n".join(
    [
        "",
        "------------------------------",
        "|    Enter choice:           |",
        "|    1) Push in stack        |",
        "|    2) Pop from stack       |",
        "|    3) Display stack        |",
        "|    4) Exit                 |",
        "------------------------------",
        "",
    ]
)


class StackOverflow(Exception):
    """Raised when pushing onto a stack that is already full."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A stack of values; unbounded unless a capacity is given."""

    def __init__(self, items: Iterable[int] = (), capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []
        for item in items:
            self.push(item)

    @property
    def capacity(self) -> int | None:
        """Largest number of values the stack holds, or None when unbounded."""
        return self._capacity

    def _full(self) -> bool:
        return self._capacity is not None and len(self._items) >= self._capacity

    def push(self, value: int) -> None:
        """Put ``value`` on top of the stack."""
        if self._full():
            raise StackOverflow("Stack Overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("Stack Underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r}, capacity={self._capacity!r})"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _as_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="stack", description="Interactive stack.")
    parser.add_argument("--capacity", type=int, default=None, help="largest stack size")
    args = parser.parse_args(argv)
    stack = Stack(capacity=args.capacity)
    tokens = _tokens(sys.stdin)

    while True:
        print(MENU)
        token = next(tokens, None)
        if token is None:
            return 0
        choice = _as_int(token)
        if choice == 1:
            print("Enter value to be pushed:")
            raw = next(tokens, None)
            if raw is None:
                return 0
            value = _as_int(raw)
            if value is None:
                print("Invalid value")
                continue
            try:
                stack.push(value)
            except StackOverflow:
                print("Stack Overflow")
        elif choice == 2:
            try:
                print(f"The popped element is {stack.pop()}")
            except StackUnderflow:
                print("Stack Underflow")
        elif choice == 3:
            if stack.is_empty():
                print("stack is empty")
            else:
                print("Stack elements are: " + " ".join(str(v) for v in stack))
        elif choice == 4:
            print("Exit")
            return 0
        else:
            print("Invalid Choice")


if __name__ == "__main__":
    sys.exit(main())