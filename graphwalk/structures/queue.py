"""
Linked-list FIFO queue.

Used as the frontier for breadth-first traversal and shortest-path search,
where a plain list would make every dequeue O(n).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Literal, TypeVar

T = TypeVar("T")


class _Empty(Enum):
    """Marker type for the empty-queue result."""

    EMPTY = "EMPTY"

    def __repr__(self) -> str:
        return "EMPTY"


# Returned by Queue.dequeue() when there is nothing to remove. Compare with `is`.
EMPTY = _Empty.EMPTY


@dataclass
class _QueueItem:
    value: Any
    next: _QueueItem | None = None


class Queue(Generic[T]):
    """
    First-in-first-out queue backed by a singly linked list.

    Keeps head and tail references plus a size counter, so enqueue and
    dequeue are both O(1). Invariant: size == 0 iff head is None iff
    tail is None, and tail.next is always None.
    """

    def __init__(self) -> None:
        self._head: _QueueItem | None = None
        self._tail: _QueueItem | None = None
        self._size = 0

    @property
    def size(self) -> int:
        """Number of values currently queued."""
        return self._size

    def enqueue(self, value: T) -> None:
        """
        Add a value to the end of the queue.

        Args:
            value: Any value, including None
        """
        item = _QueueItem(value)
        if self._tail is not None:
            self._tail.next = item
        self._tail = item
        if self._head is None:
            self._head = item
        self._size += 1

    def dequeue(self) -> T | Literal[_Empty.EMPTY]:
        """
        Remove and return the value at the front of the queue.

        Returns:
            The oldest queued value, or EMPTY if the queue is empty
        """
        if self._head is None:
            return EMPTY

        item = self._head
        self._head = item.next
        self._size -= 1
        if self._size == 0:
            self._tail = None
        return item.value

    def is_empty(self) -> bool:
        """Whether the queue holds no values."""
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Queue(size={self._size})"
