"""Stacks and queues built on fixed arrays, linked nodes and on each other."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Optional


class Underflow(IndexError):
    """Raised when reading or removing from an empty container."""


class CapacityExceeded(Exception):
    """Raised when adding to a container that is already full."""


@dataclass
class _Node:
    value: int
    next: Optional[_Node] = None


class ArrayQueue:
    """A first-in first-out queue in a fixed-size circular array."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[int]] = [None] * capacity
        self._head = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        if self._count == len(self._slots):
            raise CapacityExceeded("queue is full")
        self._slots[(self._head + self._count) % len(self._slots)] = x
        self._count += 1

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        value = self.front()
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._count -= 1
        return value

    def front(self) -> int:
        """Return the value at the front of the queue."""
        if not self._count:
            raise Underflow("queue is empty")
        value = self._slots[self._head]
        assert value is not None
        return value

    def is_empty(self) -> bool:
        return not self._count

    def __len__(self) -> int:
        return self._count


class ArrayStack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        if len(self._items) == self._capacity:
            raise CapacityExceeded("stack is full")
        self._items.append(x)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise Underflow("stack is empty")
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise Underflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LinkedListQueue:
    """A first-in first-out queue of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        node = _Node(x)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if self._head is None:
            raise Underflow("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def front(self) -> int:
        """Return the value at the front of the queue."""
        if self._head is None:
            raise Underflow("queue is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class LinkedListStack:
    """A last-in first-out stack of linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._head = _Node(x, self._head)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the top value."""
        if self._head is None:
            raise Underflow("stack is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def top(self) -> int:
        """Return the top value without removing it."""
        if self._head is None:
            raise Underflow("stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size


class MinStack:
    """A stack that reports its smallest value in constant time and space.

    A value pushed below the current minimum is stored encoded as
    ``2 * value - previous_minimum``, which lets the previous minimum be
    recovered when it is popped.
    """

    def __init__(self) -> None:
        self._items: list[int] = []
        self._min = 0

    def push(self, val: int) -> None:
        """Put ``val`` on top of the stack."""
        if not self._items:
            self._items.append(val)
            self._min = val
        elif val >= self._min:
            self._items.append(val)
        else:
            self._items.append(2 * val - self._min)
            self._min = val

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise Underflow("stack is empty")
        stored = self._items.pop()
        if stored < self._min:
            value = self._min
            self._min = 2 * self._min - stored
            return value
        return stored

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise Underflow("stack is empty")
        stored = self._items[-1]
        return self._min if stored < self._min else stored

    def get_min(self) -> int:
        """Return the smallest value on the stack."""
        if not self._items:
            raise Underflow("stack is empty")
        return self._min

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A last-in first-out stack kept in a single queue."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top, rotating older values behind it."""
        self._queue.append(x)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._queue:
            raise Underflow("stack is empty")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._queue:
            raise Underflow("stack is empty")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class StackQueue:
    """A first-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` at the back, moving it beneath the values already held."""
        spill: list[int] = []
        while self._items:
            spill.append(self._items.pop())
        self._items.append(x)
        while spill:
            self._items.append(spill.pop())

    def pop(self) -> int:
        """Remove and return the value at the front of the queue."""
        if not self._items:
            raise Underflow("queue is empty")
        return self._items.pop()

    def front(self) -> int:
        """Return the value at the front of the queue."""
        if not self._items:
            raise Underflow("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)