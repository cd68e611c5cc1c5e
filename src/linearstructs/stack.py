"""Fixed-capacity array-backed stack."""

from linearstructs.errors import InvalidArgumentError, StackEmptyError, StackFullError


class Stack:
    """LIFO stack of integers with a capacity fixed at construction."""

    __slots__ = ("_top", "_elements")

    def __init__(self, capacity: int) -> None:
        """
        Initialize the stack.

        Args:
            capacity: Maximum number of elements the stack can hold.

        Raises:
            InvalidArgumentError: If capacity is not positive
        """
        if capacity <= 0:
            raise InvalidArgumentError(f"Stack capacity must be positive, got {capacity}")
        self._top = 0
        self._elements: list[int] = [0] * capacity

    @property
    def capacity(self) -> int:
        """Maximum number of elements."""
        return len(self._elements)

    def push(self, value: int) -> None:
        """
        Push value onto the top of the stack. O(1).

        Raises:
            StackFullError: If the stack is at capacity
        """
        if self._top == len(self._elements):
            raise StackFullError(f"Stack is full (capacity {len(self._elements)})")
        self._elements[self._top] = value
        self._top += 1

    def pop(self) -> int:
        """
        Remove and return the top value. O(1).

        Raises:
            StackEmptyError: If the stack is empty
        """
        if self._top == 0:
            raise StackEmptyError("Cannot pop from an empty stack")
        self._top -= 1
        return self._elements[self._top]

    def peek(self) -> int:
        """
        Return the top value without removing it. O(1).

        Raises:
            StackEmptyError: If the stack is empty
        """
        if self._top == 0:
            raise StackEmptyError("Cannot peek an empty stack")
        return self._elements[self._top - 1]

    def is_empty(self) -> bool:
        return self._top == 0

    def is_full(self) -> bool:
        return self._top == len(self._elements)

    def snapshot(self) -> tuple[int, ...]:
        """Return the stacked values, bottom first, as an immutable tuple."""
        return tuple(self._elements[:self._top])

    def __len__(self) -> int:
        return self._top

    def __repr__(self) -> str:
        return f"Stack({list(self.snapshot())!r}, capacity={self.capacity})"
