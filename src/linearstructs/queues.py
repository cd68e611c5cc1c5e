"""FIFO queues backed by a circular buffer or by two stacks."""

import logging
from typing import Protocol, runtime_checkable

from linearstructs.errors import (
    InvalidArgumentError,
    QueueEmptyError,
    QueueFullError,
    StackFullError,
)
from linearstructs.stack import Stack
from linearstructs.types import QueueType

logger = logging.getLogger(__name__)


@runtime_checkable
class Queue(Protocol):
    """Capability shared by every queue implementation."""

    def enqueue(self, value: int) -> int:
        """Add value at the rear and return it."""
        ...

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        ...


class CircularQueue:
    """
    Fixed-capacity queue over a circular buffer.

    Front and rear indices wrap modulo the capacity so slots freed by
    dequeue are reused. Both operations are O(1).
    """

    __slots__ = ("_front", "_rear", "_filled", "_elements")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise InvalidArgumentError(f"Queue capacity must be positive, got {capacity}")
        self._front = 0
        self._rear = 0
        self._filled = 0
        self._elements: list[int] = [0] * capacity

    @property
    def capacity(self) -> int:
        return len(self._elements)

    def enqueue(self, value: int) -> int:
        """
        Store value at the rear. O(1).

        Raises:
            QueueFullError: If every slot is filled
        """
        if self._filled == len(self._elements):
            raise QueueFullError(f"Queue is full (capacity {len(self._elements)})")
        self._elements[self._rear] = value
        self._rear = (self._rear + 1) % len(self._elements)
        self._filled += 1
        return value

    def dequeue(self) -> int:
        """
        Remove and return the front value, clearing its slot. O(1).

        Raises:
            QueueEmptyError: If the queue is empty
        """
        if self._filled == 0:
            raise QueueEmptyError("Cannot dequeue from an empty queue")
        value = self._elements[self._front]
        self._elements[self._front] = 0
        self._front = (self._front + 1) % len(self._elements)
        self._filled -= 1
        return value

    def is_empty(self) -> bool:
        return self._filled == 0

    def __len__(self) -> int:
        return self._filled

    def __repr__(self) -> str:
        values = [
            self._elements[(self._front + i) % len(self._elements)]
            for i in range(self._filled)
        ]
        return f"CircularQueue({values!r}, capacity={self.capacity})"


class StackQueue:
    """
    Queue composed from two stacks.

    Enqueued values land on the in-stack. Dequeue pops from the out-stack,
    refilling it from the in-stack only when it runs dry; the transfer
    reverses the order so the oldest value ends up on top. Each value moves
    between stacks at most once, giving amortized O(1) dequeues.
    """

    __slots__ = ("_in_stack", "_out_stack")

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise InvalidArgumentError(f"Queue capacity must be positive, got {capacity}")
        self._in_stack = Stack(capacity)
        self._out_stack = Stack(capacity)

    @property
    def capacity(self) -> int:
        """Capacity of the in-stack, which bounds consecutive enqueues."""
        return self._in_stack.capacity

    def enqueue(self, value: int) -> int:
        """
        Push value onto the in-stack. O(1).

        Raises:
            QueueFullError: If the in-stack is full
        """
        try:
            self._in_stack.push(value)
        except StackFullError as e:
            raise QueueFullError(f"Queue is full (capacity {self.capacity})") from e
        return value

    def dequeue(self) -> int:
        """
        Remove and return the oldest value. Amortized O(1), O(n) on a transfer.

        Raises:
            QueueEmptyError: If both stacks are empty
        """
        if self._out_stack.is_empty():
            moved = 0
            while not self._in_stack.is_empty():
                # Out-stack is empty and has the same capacity, so this fits
                self._out_stack.push(self._in_stack.pop())
                moved += 1
            if moved:
                logger.debug("Transferred %d elements to the out-stack", moved)

        if self._out_stack.is_empty():
            raise QueueEmptyError("Cannot dequeue from an empty queue")
        return self._out_stack.pop()

    def is_empty(self) -> bool:
        return self._in_stack.is_empty() and self._out_stack.is_empty()

    def __len__(self) -> int:
        return len(self._in_stack) + len(self._out_stack)

    def __repr__(self) -> str:
        # Oldest values sit on top of the out-stack, newest on top of the in-stack
        values = list(reversed(self._out_stack.snapshot())) + list(self._in_stack.snapshot())
        return f"StackQueue({values!r}, capacity={self.capacity})"


def new_queue(queue_type: QueueType, size: int) -> CircularQueue | StackQueue:
    """
    Create a queue of the given type and capacity.

    Args:
        queue_type: "array" for a CircularQueue, "stack" for a StackQueue
        size: Capacity of the queue

    Raises:
        InvalidArgumentError: If size is not positive or queue_type is unknown
    """
    if size <= 0:
        raise InvalidArgumentError(f"Invalid queue size: {size}")

    queue: CircularQueue | StackQueue
    if queue_type == "array":
        queue = CircularQueue(size)
    elif queue_type == "stack":
        queue = StackQueue(size)
    else:
        raise InvalidArgumentError(f"Invalid queue type: {queue_type!r}")

    logger.debug("Created %s queue with capacity %d", queue_type, size)
    return queue
