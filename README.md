# dsakit

A small library of classic data structures and algorithms, written as plain
Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sorting` | `insertion_sort`, `exchange_insertion_sort`, `selection_sort`, `merge_sort`, `merge_sorted`, `quick_sort`, `partition` |
| `dsakit.searching` | `binary_search`, `linear_search`, `find_all` |
| `dsakit.arrays` | `BoundedArray`, `insert_at`, `delete_at`, `largest_two` |
| `dsakit.heaps` | `is_max_heap`, `is_min_heap`, `max_heapify`, `min_heapify`, `to_min_heap`, `to_max_heap`, `max_to_min`, `min_to_max` |
| `dsakit.graph` | `dijkstra`, `ShortestPaths` |
| `dsakit.stack` | `LinkedStack`, `StackUnderflow`, `check_brackets`, `is_balanced`, `matches`, `BalanceResult` |
| `dsakit.singly` | `SinglyLinkedList`, `Node` |
| `dsakit.doubly` | `DoublyLinkedList` |
| `dsakit.circular` | `CircularLinkedList` |
| `dsakit.queues` | `ArrayQueue`, `LinkedQueue`, `Deque`, `CircularQueue`, `PriorityQueue`, `QueueOverflow`, `QueueUnderflow` |
| `dsakit.bst` | `BinarySearchTree`, `TreeNode`, `DuplicateKeyError`, `preorder`, `inorder`, `postorder`, `is_bst`, `search_iterative`, `search_recursive` |

A few notes on behaviour:

- The sorting functions take any iterable and return a new list; only
  `partition(values, low, high)` works in place and returns the pivot's index.
- `binary_search` and `linear_search` return an index, or `None` when the
  target is absent.
- `insert_at(values, position, element)` uses a 1-based position;
  `delete_at(values, position)` uses a 0-based one. Both return new lists.
- `max_to_min` and `min_to_max` return a pair: whether the input already was
  a heap of the first kind, and the elements rearranged into the other kind.
- `LinkedQueue` and `PriorityQueue` iterate from the newest value to the
  oldest; `Deque` and `CircularQueue` iterate from front to rear. Among equal
  priorities, `PriorityQueue` serves the most recently added value first.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Sorting and searching:

```python
from dsakit.sorting import merge_sort, quick_sort
from dsakit.searching import binary_search

data = merge_sort([12, 5, 7, 9, 2, 1])   # [1, 2, 5, 7, 9, 12]
quick_sort([2, 4, 3, 9, 1])               # [1, 2, 3, 4, 9]
binary_search(data, 9)                    # 4
binary_search(data, 100)                  # None
```

Checking brackets with a linked stack:

```python
from dsakit.stack import check_brackets, is_balanced

is_balanced("{[()()]}")     # True
is_balanced("([)]")         # False
result = check_brackets("(()")
result.problem              # BalanceResult.Problem.UNCLOSED
result.index, result.char   # (1, "(")
```

Shortest paths over an adjacency matrix (a `0` entry means "no edge"):

```python
from dsakit.graph import dijkstra

paths = dijkstra(
    [
        [0, 4, 1],
        [4, 0, 2],
        [1, 2, 0],
    ],
    start=0,
)
paths.distances   # (0, 3, 1)
paths.path(1)     # [0, 2, 1]
```

Unreachable nodes get distance `math.inf`; asking for a path to one raises
`ValueError`.

Queues and a binary search tree:

```python
from dsakit.queues import Deque, PriorityQueue
from dsakit.bst import BinarySearchTree

dq = Deque()
dq.push_front(1)
dq.push_back(2)
list(dq)            # [1, 2]

pq = PriorityQueue()
pq.enqueue(10, priority=1)
pq.enqueue(20, priority=5)
pq.dequeue()        # 20

tree = BinarySearchTree([5, 3, 6, 1, 4])
4 in tree           # True
list(tree)          # [1, 3, 4, 5, 6]
list(tree.preorder())  # [5, 3, 1, 4, 6]
```

## Errors

Errors are reported with exceptions:

- `LinkedStack.pop`, `top` and `bottom` on an empty stack raise
  `StackUnderflow` (a subclass of `IndexError`).
- Taking from any empty queue raises `QueueUnderflow`; adding to a full
  `ArrayQueue` (capacity 40 by default) raises `QueueOverflow`.
- `BoundedArray.append` beyond its capacity raises `OverflowError`.
- Linked lists raise `IndexError` for bad positions or popping an empty list,
  and `ValueError` from `remove` when the value is absent.
- `BinarySearchTree.insert` raises `DuplicateKeyError` for a value already in
  the tree; `BinarySearchTree.add` leaves the tree unchanged instead.

## What it does not do

This is a library only. It has no command-line program or interactive menus;
all input and output goes through the functions and classes above.