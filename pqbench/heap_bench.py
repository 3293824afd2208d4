"""Timing benchmark for the heap-based priority queue.

Data is read from ``values_<n>.txt`` and ``priorities_<n>.txt`` files that
hold whitespace-separated integers.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from time import perf_counter_ns
from typing import Optional, Sequence, TextIO

from pqbench.heap import HeapPriorityQueue

NUM_QUEUES = 10
MODIFY_LIMIT = 1000
SIZES = (5000, 8000, 10000, 16000, 20000, 40000, 60000, 100000)

_NS_PER_MS = 1_000_000


def _read_ints(path: Path, n: int) -> list[int]:
    with open(path, encoding="ascii") as handle:
        tokens = handle.read().split()
    if len(tokens) < n:
        raise ValueError(f"{path} holds fewer than {n} numbers")
    return [int(token) for token in tokens[:n]]


def load_data_from_files(n: int, directory: str | Path = ".") -> tuple[list[int], list[int]]:
    """Read the first ``n`` values and priorities from the data files in ``directory``."""
    base = Path(directory)
    values = _read_ints(base / f"values_{n}.txt", n)
    priorities = _read_ints(base / f"priorities_{n}.txt", n)
    return values, priorities


def create_filled_queues(
    values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES
) -> list[HeapPriorityQueue[int]]:
    """Build ``count`` queues, each holding every value with its priority."""
    queues = []
    for _ in range(count):
        queue: HeapPriorityQueue[int] = HeapPriorityQueue()
        for value, priority in zip(values, priorities):
            queue.insert(value, priority)
        queues.append(queue)
    return queues


def time_insert(values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES) -> float:
    """Average milliseconds to fill one queue."""
    start = perf_counter_ns()
    create_filled_queues(values, priorities, count)
    end = perf_counter_ns()
    return (end - start) / _NS_PER_MS / count


def time_extract_max(
    values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES
) -> float:
    """Average milliseconds to empty one full queue with extract_max."""
    queues = create_filled_queues(values, priorities, count)
    start = perf_counter_ns()
    for queue in queues:
        for _ in range(len(values)):
            queue.extract_max()
    end = perf_counter_ns()
    return (end - start) / _NS_PER_MS / count


def time_peek(values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES) -> float:
    """Average nanoseconds for one peek."""
    queues = create_filled_queues(values, priorities, count)
    start = perf_counter_ns()
    for queue in queues:
        queue.peek()
    end = perf_counter_ns()
    return (end - start) / count


def time_modify_key(
    values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES
) -> float:
    """Average nanoseconds for one modify_key raising a priority by one.

    At most the first 1000 values of each queue are modified.
    """
    queues = create_filled_queues(values, priorities, count)
    limit = min(len(values), MODIFY_LIMIT)
    targets = list(zip(values[:limit], priorities[:limit]))
    start = perf_counter_ns()
    for queue in queues:
        for value, priority in targets:
            queue.modify_key(value, priority + 1)
    end = perf_counter_ns()
    if limit == 0:
        return 0.0
    return (end - start) / (count * limit)


def time_get_size(
    values: Sequence[int], priorities: Sequence[int], count: int = NUM_QUEUES
) -> float:
    """Average nanoseconds to read the size of one queue."""
    queues = create_filled_queues(values, priorities, count)
    start = perf_counter_ns()
    for queue in queues:
        len(queue)
    end = perf_counter_ns()
    return (end - start) / count


def run(
    sizes: Sequence[int] = SIZES,
    directory: str | Path = ".",
    out: Optional[TextIO] = None,
) -> None:
    """Benchmark every operation for each size and report the averages."""
    out = sys.stdout if out is None else out
    for n in sizes:
        print(f"Queue size: {n}", file=out)
        try:
            values, priorities = load_data_from_files(n, directory)
        except (OSError, ValueError):
            print(f"Error opening files for size {n}", file=sys.stderr)
            print("-----------------------------", file=out)
            continue
        print(f"Insert time: {time_insert(values, priorities):g} ms", file=out)
        print(f"Extract max time: {time_extract_max(values, priorities):g} ms", file=out)
        print(f"Peek time: {time_peek(values, priorities):g} ns", file=out)
        print(f"Modify key time: {time_modify_key(values, priorities):g} ns", file=out)
        print(f"Get size time: {time_get_size(values, priorities):g} ns", file=out)
        print("-----------------------------", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Time the heap-based priority queue.")
    parser.add_argument("sizes", nargs="*", type=int, help="queue sizes to benchmark")
    parser.add_argument("--directory", default=".", help="directory holding the data files")
    args = parser.parse_args(argv)
    run(args.sizes or SIZES, args.directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())