# pqbench

This package provides two priority queues and two small benchmarks that compare them.

## Queues

### `pqbench.heap.HeapPriorityQueue`

A max-heap held in a list.

- **Construction.** `HeapPriorityQueue(initial_capacity=16)` creates an empty queue. `initial_capacity` must be at least 1, otherwise the constructor raises `ValueError`.
- **Capacity.** The `capacity` property gives the current nominal capacity. It doubles whenever an insert finds the queue full.
- **Adding.** `insert(element, priority)` adds an element.
- **Removing and reading.** `extract_max()` removes and returns the element with the highest priority. `peek()` returns that element and leaves it in the queue. Both raise `pqbench.heap.EmptyQueueError` when the queue is empty. `EmptyQueueError` is a subclass of `IndexError`.
- **Changing a priority.** `modify_key(element, new_priority)` changes the priority of the first matching element in heap order. It raises `KeyError` if the element is not in the queue.
- **Size and contents.** `len(queue)`, `bool(queue)` and `is_empty()` report the size. Iterating yields `(element, priority)` pairs in internal heap order.

### `pqbench.linked.LinkedPriorityQueue`

A singly linked list of `Node` objects. Each node has `value`, `priority` and `next`.

- **Ordering.** The list is kept in ascending order of priority number. The head is served first, so "max" refers to the entry with the smallest priority number. Entries with equal priority are served in insertion order.
- **Adding.** `insert(value, priority)` adds a value.
- **Removing.** `extract_max()` unlinks the head node and returns it. It returns `None` when the list is empty.
- **Reading.** `find_max()` returns the value at the head. It raises `EmptyQueueError` when the list is empty.
- **Changing a priority.** `modify_key(value, new_priority)` re-inserts the first entry holding `value` with the new priority. It does nothing if no entry holds the value.
- **Size and contents.** `len(queue)` walks the whole list. Iterating yields `(value, priority)` pairs in service order.

## Usage

```python
from pqbench.heap import HeapPriorityQueue
from pqbench.linked import LinkedPriorityQueue

heap = HeapPriorityQueue(16)
heap.insert("a", 3)
heap.insert("b", 7)
heap.peek()          # "b"
heap.modify_key("a", 10)
heap.extract_max()   # "a"
len(heap)            # 1

lst = LinkedPriorityQueue()
lst.insert(42, 5)
lst.insert(7, 1)
lst.find_max()       # 7
node = lst.extract_max()
node.value, node.priority   # (7, 1)
list(lst)            # [(42, 5)]
```

## Benchmarks

Each benchmark builds ten queues for each size and prints the average time per operation. Both benchmarks use the same data files, `values_<n>.txt` and `priorities_<n>.txt`, which hold whitespace-separated integers.

By default the sizes are 5000, 8000, 10000, 16000, 20000, 40000, 60000 and 100000. You can give other sizes as positional arguments. `--directory` chooses where the data files live; it defaults to the current directory.

```
pqbench-list
pqbench-heap
pqbench-list 1000 2000 --directory data
pqbench-heap 1000 2000 --directory data
```

### `pqbench-list`

This command first writes fresh random data files for each size. Values run from 1 to 100000 and priorities from 1 to 100, one number per line.

It then times these operations on the linked-list queue:
- `insert`
- `extract_max`
- `find_max`
- `modify_key`, applied to at most the first 1000 values
- `len`

### `pqbench-heap`

This command does not create data. It reads the files that already exist. For a size whose files are missing or too short, it prints `Error opening files for size <n>` to standard error and moves on to the next size.

It times these operations on the heap queue:
- `insert`
- `extract_max`
- `peek`
- `modify_key`
- `len`

### Running both

Run `pqbench-list` first, then `pqbench-heap`, in the same directory. That way both queues are timed on the same data.

### Calling the benchmarks from Python

The same steps are available as functions in `pqbench.heap_bench` and `pqbench.list_bench`:
- `run(sizes, directory, out)`
- `create_filled_queues`
- the `time_*` functions
- `load_data_from_files` and `load_data`
- `generate_and_save_data_files`

## Tests

```
pip install -e .[test]
pytest
```