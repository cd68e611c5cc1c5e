"""Exception classes for linearstructs."""


class LinearStructError(Exception):
    """Base exception for all linearstructs errors."""


class StackFullError(LinearStructError):
    """Raised when pushing onto a stack that is at capacity."""


class StackEmptyError(LinearStructError):
    """Raised when popping or peeking an empty stack."""


class QueueFullError(LinearStructError):
    """Raised when enqueueing onto a queue that is at capacity."""


class QueueEmptyError(LinearStructError):
    """Raised when dequeueing from an empty queue."""


class EmptyListError(LinearStructError):
    """Raised when removing from an empty linked list."""


class IndexOutOfRangeError(LinearStructError, IndexError):
    """Raised when an index or position falls outside the filled elements."""


class InvalidArgumentError(LinearStructError, ValueError):
    """Raised for a non-positive capacity or k, or an unknown queue type."""
