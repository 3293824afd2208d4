"""Priority queue backed by an array-based binary max-heap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 16


class EmptyQueueError(IndexError):
    """Raised when an element is requested from an empty queue."""


@dataclass
class _Entry(Generic[T]):
    element: T
    priority: int


class HeapPriorityQueue(Generic[T]):
    """Max-heap priority queue: the element with the highest priority comes out first.

    The queue keeps a nominal capacity that doubles whenever an insert finds it full.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        self._capacity = initial_capacity
        self._heap: list[_Entry[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[tuple[T, int]]:
        """Yield (element, priority) pairs in internal heap order."""
        return ((entry.element, entry.priority) for entry in self._heap)

    @property
    def capacity(self) -> int:
        """Current nominal capacity of the underlying storage."""
        return self._capacity

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, element: T, priority: int) -> None:
        """Add an element with the given priority."""
        if len(self._heap) == self._capacity:
            self._capacity *= 2
        self._heap.append(_Entry(element, priority))
        self._sift_up(len(self._heap) - 1)

    def extract_max(self) -> T:
        """Remove and return the element with the highest priority."""
        if not self._heap:
            raise EmptyQueueError("Priority queue is empty.")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return top.element

    def peek(self) -> T:
        """Return the element with the highest priority without removing it."""
        if not self._heap:
            raise EmptyQueueError("Priority queue is empty.")
        return self._heap[0].element

    def modify_key(self, element: T, new_priority: int) -> None:
        """Change the priority of the first matching element in heap order."""
        for index, entry in enumerate(self._heap):
            if entry.element == element:
                old_priority = entry.priority
                entry.priority = new_priority
                if new_priority > old_priority:
                    self._sift_up(index)
                else:
                    self._sift_down(index)
                return
        raise KeyError("Element not found in the priority queue.")

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority <= heap[parent].priority:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while index < size:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and heap[child].priority > heap[largest].priority:
                    largest = child
            if largest == index:
                break
            heap[index], heap[largest] = heap[largest], heap[index]
            index = largest