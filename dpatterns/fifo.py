"""A first-in, first-out queue with an optional capacity and an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterable, Iterator
from typing import TextIO

MENU = "\n".join(
    [
        "1) Insert element to queue",
        "2) Delete element from queue",
        "3) Display all the elements of queue",
        "4) Exit",
        "Enter your choice : ",
    ]
)


class QueueOverflow(Exception):
    """Raised when adding to a queue that is already full."""


class QueueUnderflow(Exception):
    """Raised when taking from or peeking an empty queue."""


class Queue:
    """A queue of values; unbounded unless a capacity is given."""

    def __init__(self, items: Iterable[int] = (), capacity: int | None = None) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[int] = deque()
        for item in items:
            self.enqueue(item)

    @property
    def capacity(self) -> int | None:
        """Largest number of values the queue holds, or None when unbounded."""
        return self._capacity

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueOverflow("Queue Overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items.popleft()

    def peek(self) -> int:
        """Return the front value without removing it."""
        if not self._items:
            raise QueueUnderflow("Queue Underflow")
        return self._items[0]

    def is_empty(self) -> bool:
        """Whether the queue holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Whether the queue has reached its capacity."""
        return self._capacity is not None and len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r}, capacity={self._capacity!r})"


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
    """Run the interactive queue menu on standard input and output."""
    parser = argparse.ArgumentParser(prog="queue", description="Interactive queue.")
    parser.add_argument("--capacity", type=int, default=None, help="largest queue size")
    args = parser.parse_args(argv)
    queue = Queue(capacity=args.capacity)
    tokens = _tokens(sys.stdin)

    while True:
        print(MENU)
        token = next(tokens, None)
        if token is None:
            return 0
        choice = _as_int(token)
        if choice == 1:
            if queue.is_full():
                print("Queue Overflow")
                continue
            print("Insert the element in queue : ")
            raw = next(tokens, None)
            if raw is None:
                return 0
            value = _as_int(raw)
            if value is None:
                print("Invalid value")
                continue
            queue.enqueue(value)
        elif choice == 2:
            try:
                print(f"Element deleted from queue is : {queue.dequeue()}")
            except QueueUnderflow:
                print("Queue Underflow")
        elif choice == 3:
            if queue.is_empty():
                print("Queue is empty")
            else:
                print("Queue elements are : " + " ".join(str(v) for v in queue))
        elif choice == 4:
            print("Exit")
            return 0
        else:
            print("Invalid choice")


if __name__ == "__main__":
    sys.exit(main())