# containerkit

Classic container data structures and comparison sorts, written in plain
Python with no dependencies.

## What is inside

- `containerkit.sorting`: in-place sorts over any mutable sequence.
  The sorts are `bubble_sort`, `insertion_sort`, `selection_sort`,
  `quick_sort`, `merge_sort`, `heap_sort` and `intro_sort`. Each one sorts
  its argument in place and returns `None`. Each takes an optional
  `less(a, b)` predicate, which defaults to `operator.lt`. Pass
  `operator.gt` to sort in descending order.
  - The same algorithms come as strategy classes: `BubbleSort`,
    `InsertionSort`, `SelectionSort`, `QuickSort`, `MergeSort`, `HeapSort`
    and `IntroSort`. Each has a `name` and a `sort(seq, less)` method.
  - A strategy can be held by an `Algorithm`. `Algorithm.sort` does
    nothing when no strategy is set. `Algorithm.strategy_name()` then
    returns `"No strategy set"`.
- `containerkit.deque`: `Deque`, a double-ended queue stored in blocks of
  eight slots. A central map holds the blocks and doubles in size when
  either end runs out of room.
  - It offers `push_front`, `push_back`, `pop_front` and `pop_back`. The
    two pop methods return the removed value.
  - It also offers `front`, `back`, indexing (negative indices included),
    iteration, `reversed()`, `clear` and `copy`.
  - `structure()` returns a text picture of the block map.
- `containerkit.linked_list`: `LinkedList`, a circular doubly linked list
  with a sentinel node.
  - Positions are `Cursor` objects obtained from `begin()` and `end()`.
    `advance()` and `retreat()` move a cursor. Its `value` property reads
    and writes the element at that position.
  - `insert(pos, value)` and `erase(pos)` work at a cursor, and
    `splice(pos, other)` moves every node of another list before `pos`.
  - `take()` moves all nodes into a new list. `copy()` makes an
    independent copy. `visual()` returns a text picture of the nodes and
    their links.
- `containerkit.vector`: `Vector`, a growable array that tracks its
  capacity apart from its size.
  - Capacity goes from 0 to 1 and then doubles when the vector is full.
  - `reserve` raises the capacity, `shrink_to_fit` lowers it to the size,
    and `clear` keeps it.
  - `insert(value, position)` and `erase(position)` work by index.
  - `take()` moves the contents out and leaves an empty vector with no
    capacity.

Operations on an empty container raise `IndexError`. So do out-of-range
indices or positions and erasing at a list's end cursor.

## Installation

```
pip install .
```

## Examples

Sorting:

```python
import operator
from containerkit.sorting import intro_sort, Algorithm, HeapSort

data = [7, 5, 9, 1, 4, 2, 6]
intro_sort(data)
# data == [1, 2, 4, 5, 6, 7, 9]

intro_sort(data, operator.gt)
# data == [9, 7, 6, 5, 4, 2, 1]

algo = Algorithm(HeapSort())
algo.sort(data)
print(algo.strategy_name())  # Heap Sort
```

Deque:

```python
from containerkit.deque import Deque

d = Deque([2, 3])
d.push_front(1)
d.push_back(4)
print(list(d))        # [1, 2, 3, 4]
print(d.pop_front())  # 1
print(d[-1])          # 4
```

Linked list with cursors:

```python
from containerkit.linked_list import LinkedList

items = LinkedList([1, 2, 5])
pos = items.begin().advance().advance()
items.splice(pos, LinkedList([3, 4]))
print(list(items))    # [1, 2, 3, 4, 5]
```

Vector:

```python
from containerkit.vector import Vector

v = Vector([1, 2, 4])
v.insert(3, 2)
v.reserve(100)
v.shrink_to_fit()
print(v, v.capacity())   # [1, 2, 3, 4] 4
```

## What it does not do

- There are no separate first-in first-out queue or last-in first-out
  stack classes. Use `Deque` directly: `push_back` with `pop_front` for a
  queue, and `push_back` with `pop_back` for a stack.
- There is no command-line tool. The package is a library only.

## Running the tests

```
pip install .[test]
pytest
```