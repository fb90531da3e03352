"""A singly linked list with positional edits, plus cycle detection on raw nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    value: int
    next: Node | None = None


class LinkedList:
    """Singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        for value in reversed(list(values)):
            self.prepend(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        if position >= 1:
            for index, node in enumerate(self._nodes(), start=1):
                if index == position:
                    return node
        raise IndexError(f"there is no element at position {position}")

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        if self.head is None:
            self.head = Node(value)
            return
        last = self.head
        while last.next is not None:
            last = last.next
        last.next = Node(value)

    def prepend(self, value: int) -> None:
        """Add ``value`` at the front."""
        self.head = Node(value, self.head)

    def insert_after(self, position: int, value: int) -> None:
        """Insert ``value`` right after the element at ``position``."""
        node = self._node_at(position)
        node.next = Node(value, node.next)

    def insert_at(self, position: int, value: int) -> None:
        """Insert ``value`` so that it ends up at ``position`` (1..len+1).

        The list must not be empty.
        """
        if self.head is None:
            raise IndexError("list has no elements")
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.prepend(value)
        else:
            self.insert_after(position - 1, value)

    def remove(self, value: int) -> int:
        """Remove the first element equal to ``value`` and return it."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return node.value
            previous = node
        raise ValueError(f"element {value} not found")

    def remove_at(self, position: int) -> int:
        """Remove the element at ``position`` and return its value."""
        if self.head is None:
            raise IndexError("list is empty")
        if position < 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            removed = self.head
            self.head = removed.next
            return removed.value
        previous = self._node_at(position - 1)
        removed = previous.next
        if removed is None:
            raise IndexError(f"location {position} exceeds the list")
        previous.next = removed.next
        return removed.value

    def find(self, value: int) -> int | None:
        """Return the 1-based position of the first ``value``, or None."""
        for index, item in enumerate(self, start=1):
            if item == value:
                return index
        return None

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous


def find_loop_start(head: Node | None) -> Node | None:
    """Return the node where a cycle begins, or None if the chain ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return None
    slow = head
    while slow is not fast:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next  # type: ignore[union-attr]
    return slow


def break_loop(head: Node | None) -> bool:
    """Cut the cycle reachable from ``head``; return whether there was one."""
    start = find_loop_start(head)
    if start is None:
        return False
    node = start
    while node.next is not start:
        node = node.next  # type: ignore[assignment]
    node.next = None
    return True