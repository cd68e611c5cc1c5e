"""Basic usage example for linearstructs."""

import logging

from linearstructs import (
    DynamicArray,
    LinkedList,
    QueueEmptyError,
    Stack,
    StackFullError,
    new_queue,
)


def main() -> None:
    """Demonstrate each structure."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=== DynamicArray ===")
    arr = DynamicArray(2)
    for value in (10, 20, 30):
        arr.insert(value)
    print(f"Contents: {arr.snapshot()}, capacity {arr.capacity}")
    arr.remove_at(0)
    print(f"After remove_at(0): {arr.snapshot()}\n")

    print("=== LinkedList ===")
    lst = LinkedList()
    for value in (1, 2, 3, 4):
        lst.add_last(value)
    lst.reverse()
    print(f"Reversed: {lst.to_list()}")
    print(f"2nd from the end: {lst.get_kth_from_the_end(2)}\n")

    print("=== Stack ===")
    stack = Stack(2)
    stack.push(1)
    stack.push(2)
    try:
        stack.push(3)
    except StackFullError as e:
        print(f"  {e}")
    print(f"Popped: {stack.pop()}\n")

    print("=== Queues ===")
    for queue_type in ("array", "stack"):
        queue = new_queue(queue_type, 3)
        for value in (1, 2, 3):
            queue.enqueue(value)
        drained = [queue.dequeue() for _ in range(3)]
        print(f"  {queue_type}: {drained}")
        try:
            queue.dequeue()
        except QueueEmptyError as e:
            print(f"  {e}")


if __name__ == "__main__":
    main()
