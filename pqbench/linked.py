"""Priority queue backed by a singly linked list kept sorted by priority."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from pqbench.heap import EmptyQueueError


@dataclass
class Node:
    """One list entry: a value, its priority and the link to the next entry."""

    value: int
    priority: int
    next: Optional["Node"] = field(default=None, repr=False, compare=False)


class LinkedPriorityQueue:
    """Queue kept in ascending priority order; the head is served first.

    Entries with equal priority are served in insertion order.
    """

    def __init__(self) -> None:
        self._head: Optional[Node] = None

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield (value, priority) pairs in service order."""
        return ((node.value, node.priority) for node in self._nodes())

    def insert(self, value: int, priority: int) -> None:
        """Add a value, placed after every entry of equal or lower priority."""
        new_node = Node(value, priority)
        if self._head is None or priority < self._head.priority:
            new_node.next = self._head
            self._head = new_node
            return
        current = self._head
        while current.next is not None and current.next.priority <= priority:
            current = current.next
        new_node.next = current.next
        current.next = new_node

    def extract_max(self) -> Optional[Node]:
        """Detach and return the head node, or None when the queue is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        node.next = None
        return node

    def find_max(self) -> int:
        """Return the value at the head without removing it."""
        if self._head is None:
            raise EmptyQueueError("Kolejka jest pusta!")
        return self._head.value

    def modify_key(self, value: int, new_priority: int) -> None:
        """Re-insert the first entry holding value with a new priority.

        Does nothing when no entry holds the value.
        """
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                self.insert(value, new_priority)
                return
            previous = node