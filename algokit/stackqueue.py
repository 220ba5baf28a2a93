"""A first-in first-out queue built from two stacks."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class TwoStackQueue(Generic[T]):
    """FIFO queue kept in two last-in first-out stacks."""

    def __init__(self) -> None:
        self._inbox: list[T] = []
        self._outbox: list[T] = []

    def push(self, x: T) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def _front(self) -> list[T]:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")
        return self._outbox

    def pop(self) -> T:
        """Remove and return the front element."""
        return self._front().pop()

    def peek(self) -> T:
        """Return the front element without removing it."""
        return self._front()[-1]

    def is_empty(self) -> bool:
        """Return whether the queue holds no elements."""
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)