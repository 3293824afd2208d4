"""Heap and linked-list priority queues with timing benchmarks."""

__version__ = "0.1.0"
__all__ = ["heap", "linked", "heap_bench", "list_bench"]