"""Singly linked list with head and tail references."""

from collections.abc import Iterator

from linearstructs.errors import EmptyListError, IndexOutOfRangeError, InvalidArgumentError


class Node:
    """A node in the singly linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: Node | None = None


class LinkedList:
    """
    Singly linked list of integers.

    Keeps references to both ends so insertion at either end and removal from
    the front are O(1). Removing from the back walks from the head, since
    nodes have no back-links.
    """

    def __init__(self) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        """Return True if the list holds no nodes."""
        return self._head is None

    def add_last(self, value: int) -> None:
        """Append value after the tail. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_first(self, value: int) -> None:
        """Prepend value before the head. O(1)."""
        node = Node(value)
        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
        self._head = node
        self._size += 1

    def remove_last(self) -> int:
        """
        Remove and return the tail value. O(n).

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None or self._tail is None:
            raise EmptyListError("Cannot remove from an empty list")

        value = self._tail.value
        if self._head is self._tail:
            self._clear()
            return value

        # Find the node before the tail
        current = self._head
        while current.next is not None and current.next is not self._tail:
            current = current.next

        current.next = None
        self._tail = current
        self._size -= 1
        return value

    def remove_first(self) -> int:
        """
        Remove and return the head value. O(1).

        Raises:
            EmptyListError: If the list is empty
        """
        if self._head is None:
            raise EmptyListError("Cannot remove from an empty list")

        old_head = self._head
        if old_head is self._tail:
            self._clear()
            return old_head.value

        self._head = old_head.next
        old_head.next = None
        self._size -= 1
        return old_head.value

    def _clear(self) -> None:
        self._head = None
        self._tail = None
        self._size = 0

    def index_of(self, value: int) -> int:
        """Return the position of the first node holding value, or -1. O(n)."""
        for index, current in enumerate(self):
            if current == value:
                return index
        return -1

    def contains(self, value: int) -> bool:
        """Return True if any node holds value. O(n)."""
        return self.index_of(value) != -1

    def size(self) -> int:
        """Return the number of nodes. O(1)."""
        return self._size

    def to_list(self) -> list[int]:
        """Return the values from head to tail as a new list. O(n)."""
        return list(self)

    def reverse(self) -> None:
        """Reverse the list in place by relinking nodes. O(n)."""
        if self._head is None or self._head.next is None:
            return

        previous: Node | None = None
        current: Node | None = self._head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following

        self._head, self._tail = self._tail, self._head

    def get_kth_from_the_end(self, k: int) -> int:
        """
        Return the value k nodes from the end, where k=1 is the tail.

        Uses a lead cursor started k-1 nodes ahead of a trailing cursor, then
        advances both until the lead reaches the tail.

        Raises:
            InvalidArgumentError: If k is not positive
            IndexOutOfRangeError: If the list has fewer than k nodes
        """
        if k <= 0:
            raise InvalidArgumentError(f"k must be greater than 0, got {k}")
        if self._head is None:
            raise IndexOutOfRangeError(f"k={k} out of range for empty list")

        lead: Node = self._head
        trail: Node = self._head
        for _ in range(k - 1):
            if lead.next is None:
                raise IndexOutOfRangeError(
                    f"k={k} out of range for list of size {self._size}"
                )
            lead = lead.next

        while lead.next is not None:
            lead = lead.next
            trail = trail.next  # type: ignore[assignment]

        return trail.value

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"LinkedList({self.to_list()!r})"
