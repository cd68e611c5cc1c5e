"""Tests for the circular and two-stack queues."""

import logging

import pytest

from linearstructs import (
    CircularQueue,
    InvalidArgumentError,
    Queue,
    QueueEmptyError,
    QueueFullError,
    StackQueue,
    new_queue,
)
from linearstructs.errors import StackFullError

QUEUE_TYPES = ["array", "stack"]


@pytest.mark.parametrize("queue_type", QUEUE_TYPES)
def test_fifo_order(queue_type: str) -> None:
    """Test both variants dequeue in insertion order."""
    queue = new_queue(queue_type, 3)  # type: ignore[arg-type]
    for value in (1, 2, 3):
        assert queue.enqueue(value) == value

    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


@pytest.mark.parametrize("queue_type", QUEUE_TYPES)
def test_dequeue_empty(queue_type: str) -> None:
    """Test dequeueing an empty queue raises."""
    queue = new_queue(queue_type, 2)  # type: ignore[arg-type]
    with pytest.raises(QueueEmptyError):
        queue.dequeue()

    queue.enqueue(1)
    queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


@pytest.mark.parametrize("queue_type", QUEUE_TYPES)
def test_interleaved_operations(queue_type: str) -> None:
    """Test both variants agree under interleaved enqueue and dequeue."""
    queue = new_queue(queue_type, 3)  # type: ignore[arg-type]
    out = []
    queue.enqueue(1)
    queue.enqueue(2)
    out.append(queue.dequeue())
    queue.enqueue(3)
    queue.enqueue(4)
    out.append(queue.dequeue())
    out.append(queue.dequeue())
    queue.enqueue(5)
    out.append(queue.dequeue())
    out.append(queue.dequeue())

    assert out == [1, 2, 3, 4, 5]
    assert len(queue) == 0


@pytest.mark.parametrize("queue_type", QUEUE_TYPES)
def test_satisfies_protocol(queue_type: str) -> None:
    """Test both variants satisfy the Queue protocol."""
    assert isinstance(new_queue(queue_type, 1), Queue)  # type: ignore[arg-type]


def test_new_queue_types() -> None:
    """Test the factory selects the implementation by tag."""
    assert isinstance(new_queue("array", 2), CircularQueue)
    assert isinstance(new_queue("stack", 2), StackQueue)


@pytest.mark.parametrize("size", [0, -5])
def test_new_queue_invalid_size(size: int) -> None:
    """Test the factory rejects non-positive sizes."""
    with pytest.raises(InvalidArgumentError):
        new_queue("array", size)


def test_new_queue_invalid_type() -> None:
    """Test the factory rejects unknown tags."""
    with pytest.raises(InvalidArgumentError):
        new_queue("heap", 3)  # type: ignore[arg-type]


def test_invalid_argument_is_value_error() -> None:
    """Test invalid arguments can be caught as a builtin ValueError."""
    with pytest.raises(ValueError):
        new_queue("list", 1)  # type: ignore[arg-type]


def test_circular_queue_full() -> None:
    """Test enqueueing past capacity raises."""
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert len(queue) == 2


def test_circular_queue_wraps_around() -> None:
    """Test freed slots are reused after the indices wrap."""
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2

    queue.enqueue(4)
    queue.enqueue(5)
    assert repr(queue) == "CircularQueue([3, 4, 5], capacity=3)"
    assert [queue.dequeue() for _ in range(3)] == [3, 4, 5]


def test_circular_queue_rejects_bad_capacity() -> None:
    """Test constructing directly with a non-positive capacity raises."""
    with pytest.raises(InvalidArgumentError):
        CircularQueue(0)


def test_stack_queue_full() -> None:
    """Test a full in-stack surfaces as a queue error."""
    queue = StackQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError) as exc_info:
        queue.enqueue(3)
    assert isinstance(exc_info.value.__cause__, StackFullError)


def test_stack_queue_accepts_more_after_transfer() -> None:
    """Test the in-stack frees up once values move to the out-stack."""
    queue = StackQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.dequeue() == 1

    queue.enqueue(3)
    queue.enqueue(4)
    assert len(queue) == 3
    assert repr(queue) == "StackQueue([2, 3, 4], capacity=2)"
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]


def test_stack_queue_transfer_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test a transfer between stacks emits a debug record."""
    queue = StackQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)

    with caplog.at_level(logging.DEBUG, logger="linearstructs.queues"):
        queue.dequeue()
        queue.dequeue()
    assert caplog.text.count("Transferred 3 elements to the out-stack") == 1
