"""A double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator


class Deque:
    """Values that can be added and removed at both ends."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(items)

    def push_back(self, value: int) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def push_front(self, value: int) -> None:
        """Add ``value`` at the front."""
        self._items.appendleft(value)

    def pop_back(self) -> int:
        """Remove and return the value at the back."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.pop()

    def pop_front(self) -> int:
        """Remove and return the value at the front."""
        if not self._items:
            raise IndexError("pop from an empty deque")
        return self._items.popleft()

    def front(self) -> int:
        """The value at the front."""
        if not self._items:
            raise IndexError("front of an empty deque")
        return self._items[0]

    def back(self) -> int:
        """The value at the back."""
        if not self._items:
            raise IndexError("back of an empty deque")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the deque holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Values from front to back."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Deque({list(self._items)!r})"