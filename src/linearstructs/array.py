"""Dynamic array with amortized O(1) append."""

import logging
from collections.abc import Iterator

from linearstructs.errors import IndexOutOfRangeError, InvalidArgumentError

logger = logging.getLogger(__name__)

# Backing length multiplier applied when the array is full
_GROWTH_FACTOR = 2


class DynamicArray:
    """
    Contiguous growable buffer of integers.

    The backing list doubles in length whenever an insert finds it full, so
    appends are amortized O(1). Removal shifts later elements left and shrinks
    the backing to the remaining element count.
    """

    __slots__ = ("_initial_capacity", "_filled", "_items")

    def __init__(self, initial_capacity: int) -> None:
        """
        Initialize the array.

        Args:
            initial_capacity: Starting length of the backing buffer.

        Raises:
            InvalidArgumentError: If initial_capacity is not positive
        """
        if initial_capacity <= 0:
            raise InvalidArgumentError(
                f"Initial capacity must be positive, got {initial_capacity}"
            )
        self._initial_capacity = initial_capacity
        self._filled = 0
        self._items: list[int] = [0] * initial_capacity

    @property
    def initial_capacity(self) -> int:
        """Capacity the array was created with."""
        return self._initial_capacity

    @property
    def capacity(self) -> int:
        """Current length of the backing buffer."""
        return len(self._items)

    def insert(self, item: int) -> None:
        """Append item, doubling the backing buffer first if it is full. Amortized O(1)."""
        if self._filled == len(self._items):
            self._grow()
        self._items[self._filled] = item
        self._filled += 1

    def _grow(self) -> None:
        old_capacity = len(self._items)
        new_capacity = max(old_capacity * _GROWTH_FACTOR, 1)
        new_items = [0] * new_capacity
        new_items[:self._filled] = self._items[:self._filled]
        self._items = new_items
        logger.debug("Grew array from %d to %d slots", old_capacity, new_capacity)

    def remove_at(self, index: int) -> int:
        """
        Remove and return the element at index. O(n).

        Elements after index shift left by one and the backing buffer shrinks
        to the new element count.

        Raises:
            IndexOutOfRangeError: If index is negative or not below len(self)
        """
        self._check_index(index)
        removed = self._items[index]
        for i in range(index, self._filled - 1):
            self._items[i] = self._items[i + 1]
        self._filled -= 1
        del self._items[self._filled:]
        logger.debug("Removed index %d, backing shrunk to %d slots", index, self._filled)
        return removed

    def index_of(self, item: int) -> int:
        """Return the position of the first occurrence of item, or -1. O(n)."""
        for i in range(self._filled):
            if self._items[i] == item:
                return i
        return -1

    def snapshot(self) -> tuple[int, ...]:
        """Return the filled elements as an immutable tuple."""
        return tuple(self._items[:self._filled])

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._filled:
            raise IndexOutOfRangeError(
                f"Index {index} out of range for array of length {self._filled}"
            )

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return isinstance(item, int) and self.index_of(item) != -1

    def __iter__(self) -> Iterator[int]:
        for i in range(self._filled):
            yield self._items[i]

    def __len__(self) -> int:
        """Return the number of filled elements."""
        return self._filled

    def __repr__(self) -> str:
        return f"DynamicArray({list(self.snapshot())!r}, capacity={self.capacity})"
