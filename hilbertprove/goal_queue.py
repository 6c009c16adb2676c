"""A bounded first-in, first-out queue of goals."""

from __future__ import annotations

from collections import deque

from .formula import Formula, format_formula

QUEUE_SIZE = 100


class QueueFullError(OverflowError):
    """Raised when pushing onto a queue that is at capacity."""


class QueueEmptyError(IndexError):
    """Raised when popping from an empty queue."""


class GoalQueue:
    """A FIFO queue with a fixed capacity."""

    def __init__(self, capacity: int = QUEUE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Formula] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: Formula) -> None:
        """Append ``item``; raise QueueFullError if the queue is full."""
        if len(self._items) >= self.capacity:
            raise QueueFullError("goal queue is full")
        self._items.append(item)

    def pop(self) -> Formula:
        """Remove and return the oldest item; raise QueueEmptyError if empty."""
        if not self._items:
            raise QueueEmptyError("goal queue is empty")
        return self._items.popleft()

    def format(self) -> str:
        """Render the queue from oldest to newest."""
        lines = [f"Queue (size={len(self._items)}):\n"]
        lines.extend(format_formula(item) + "\n" for item in self._items)
        lines.append("––––––––––––––––\n")
        return "".join(lines)