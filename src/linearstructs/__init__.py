"""linearstructs - Classic linear data structures over integers."""

import logging

from linearstructs.array import DynamicArray
from linearstructs.errors import (
    EmptyListError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    LinearStructError,
    QueueEmptyError,
    QueueFullError,
    StackEmptyError,
    StackFullError,
)
from linearstructs.linkedlist import LinkedList, Node
from linearstructs.queues import CircularQueue, Queue, StackQueue, new_queue
from linearstructs.stack import Stack
from linearstructs.types import QueueType

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.0.1"

__all__ = [
    "DynamicArray",
    "LinkedList",
    "Node",
    "Stack",
    "Queue",
    "CircularQueue",
    "StackQueue",
    "new_queue",
    "QueueType",
    "LinearStructError",
    "StackFullError",
    "StackEmptyError",
    "QueueFullError",
    "QueueEmptyError",
    "EmptyListError",
    "IndexOutOfRangeError",
    "InvalidArgumentError",
]
