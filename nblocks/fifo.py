"""Fixed-capacity first-in first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque

DEFAULT_SIZE = 256


class FifoFull(Exception):
    """Raised when putting into a queue that has no room left."""


class FifoEmpty(Exception):
    """Raised when reading from a queue that holds nothing."""


class Fifo:
    """Ring-buffer style queue that holds at most ``size - 1`` items.

    One slot of the ring is always kept free to tell a full queue from an
    empty one, so the usable capacity is one less than ``size``.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("fifo size must be at least 1")
        self.size = size
        self._items: Deque[Any] = deque()

    @property
    def capacity(self) -> int:
        """Largest number of items the queue can hold."""
        return self.size - 1

    def put(self, data: Any) -> None:
        """Append ``data``; raise :class:`FifoFull` if there is no room."""
        if len(self._items) >= self.capacity:
            raise FifoFull("fifo is full")
        self._items.append(data)

    def get(self) -> Any:
        """Remove and return the oldest item; raise :class:`FifoEmpty` if none."""
        if not self._items:
            raise FifoEmpty("fifo is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the oldest item without removing it."""
        if not self._items:
            raise FifoEmpty("fifo is empty")
        return self._items[0]

    def available(self) -> int:
        """Number of items waiting to be read."""
        return len(self._items)

    def free(self) -> int:
        """Number of items that can still be put."""
        return self.capacity - len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"Fifo(size={self.size}, available={len(self._items)})"