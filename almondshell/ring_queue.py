"""A bounded single-producer single-consumer ring queue."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")

_EMPTY = object()


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class WaitFreeQueue(Generic[T]):
    """Ring buffer of ``capacity`` slots; one slot stays free, so it holds capacity - 1 items."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than zero.")
        self._buffer: list[object] = [_EMPTY] * capacity
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    def enqueue(self, item: T) -> None:
        """Add an item at the tail."""
        with self._lock:
            next_tail = (self._tail + 1) % len(self._buffer)
            if next_tail == self._head:
                raise QueueFullError("Queue is full!")
            self._buffer[self._tail] = item
            self._tail = next_tail

    def dequeue(self) -> T:
        """Remove and return the item at the head."""
        with self._lock:
            if self._head == self._tail:
                raise QueueEmptyError("Queue is empty!")
            item = self._buffer[self._head]
            if item is _EMPTY:
                raise QueueEmptyError("No valid item to dequeue at current head!")
            self._buffer[self._head] = _EMPTY
            self._head = (self._head + 1) % len(self._buffer)
            return item  # type: ignore[return-value]

    def is_empty(self) -> bool:
        """Return True when no items are queued."""
        with self._lock:
            return self._head == self._tail

    def __len__(self) -> int:
        with self._lock:
            return (self._tail - self._head) % len(self._buffer)