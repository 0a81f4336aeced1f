"""In-place sorting algorithms over mutable sequences, plus a strategy wrapper.

Every function sorts ``seq`` in place and returns ``None``. ``less`` is a
strict "comes before" predicate and defaults to ``operator.lt``. Passing
``operator.gt`` sorts in descending order.
"""

from __future__ import annotations

import math
import operator
from abc import ABC, abstractmethod
from collections.abc import Callable, MutableSequence
from typing import Any

Less = Callable[[Any, Any], bool]

_INTRO_THRESHOLD = 16


def bubble_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Sort by repeated adjacent swaps, stopping early once a pass makes none."""
    n = len(seq)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if less(seq[j + 1], seq[j]):
                seq[j], seq[j + 1] = seq[j + 1], seq[j]
                swapped = True
        if not swapped:
            break


def quick_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Iterative quicksort with the last element of each range as pivot."""
    if len(seq) <= 1:
        return
    pending = [(0, len(seq))]
    while pending:
        begin, end = pending.pop()
        if end - begin <= 1:
            continue
        pivot = seq[end - 1]
        store = begin
        for j in range(begin, end - 1):
            if less(seq[j], pivot):
                seq[store], seq[j] = seq[j], seq[store]
                store += 1
        seq[store], seq[end - 1] = seq[end - 1], seq[store]

        right = (store + 1, end)
        left = (begin, store)
        if right[1] - right[0] > left[1] - left[0]:
            pending.extend((right, left))
        else:
            pending.extend((left, right))


def _insertion_range(seq: MutableSequence, lo: int, hi: int, less: Less) -> None:
    for i in range(lo + 1, hi):
        key = seq[i]
        j = i
        while j > lo and less(key, seq[j - 1]):
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = key


def insertion_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Sort by shifting each element left into its place."""
    _insertion_range(seq, 0, len(seq), less)


def selection_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Sort by repeatedly moving the smallest remaining element forward."""
    n = len(seq)
    for i in range(n - 1):
        smallest = min(range(i, n), key=_IndexKey(seq, less))
        if smallest != i:
            seq[i], seq[smallest] = seq[smallest], seq[i]


class _IndexKey:
    """Key factory making ``min`` compare indices through ``less``.

    ``min`` keeps the first of equal items, matching a strict scan.
    """

    __slots__ = ("_seq", "_less")

    def __init__(self, seq: MutableSequence, less: Less) -> None:
        self._seq = seq
        self._less = less

    def __call__(self, index: int) -> "_Ranked":
        return _Ranked(self._seq[index], self._less)


class _Ranked:
    __slots__ = ("value", "less")

    def __init__(self, value: Any, less: Less) -> None:
        self.value = value
        self.less = less

    def __lt__(self, other: "_Ranked") -> bool:
        return bool(self.less(self.value, other.value))


def _merge(seq: MutableSequence, lo: int, mid: int, hi: int, less: Less) -> None:
    left = list(seq[lo:mid])
    right = list(seq[mid:hi])
    li = ri = 0
    dest = lo
    while li < len(left) and ri < len(right):
        if less(left[li], right[ri]):
            seq[dest] = left[li]
            li += 1
        else:
            seq[dest] = right[ri]
            ri += 1
        dest += 1
    for value in left[li:]:
        seq[dest] = value
        dest += 1
    for value in right[ri:]:
        seq[dest] = value
        dest += 1


def _merge_range(seq: MutableSequence, lo: int, hi: int, less: Less) -> None:
    if hi - lo <= 1:
        return
    mid = lo + (hi - lo) // 2
    _merge_range(seq, lo, mid, less)
    _merge_range(seq, mid, hi, less)
    _merge(seq, lo, mid, hi, less)


def merge_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Top-down merge sort."""
    _merge_range(seq, 0, len(seq), less)


def _sift_down(seq: MutableSequence, lo: int, size: int, root: int, less: Less) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and less(seq[lo + largest], seq[lo + left]):
            largest = left
        if right < size and less(seq[lo + largest], seq[lo + right]):
            largest = right
        if largest == root:
            return
        seq[lo + root], seq[lo + largest] = seq[lo + largest], seq[lo + root]
        root = largest


def _heap_range(seq: MutableSequence, lo: int, hi: int, less: Less) -> None:
    size = hi - lo
    if size <= 1:
        return
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(seq, lo, size, root, less)
    for end in range(size - 1, 0, -1):
        seq[lo], seq[lo + end] = seq[lo + end], seq[lo]
        _sift_down(seq, lo, end, 0, less)


def heap_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Heap sort using a max-heap with respect to ``less``."""
    _heap_range(seq, 0, len(seq), less)


def _intro_partition(seq: MutableSequence, lo: int, hi: int, less: Less) -> int:
    mid = lo + (hi - lo) // 2
    last = hi - 1
    if less(seq[mid], seq[lo]):
        seq[lo], seq[mid] = seq[mid], seq[lo]
    if less(seq[last], seq[lo]):
        seq[lo], seq[last] = seq[last], seq[lo]
    if less(seq[last], seq[mid]):
        seq[mid], seq[last] = seq[last], seq[mid]

    slot = hi - 2
    seq[mid], seq[slot] = seq[slot], seq[mid]
    pivot = seq[slot]

    store = lo
    for j in range(lo, slot):
        if less(seq[j], pivot):
            seq[store], seq[j] = seq[j], seq[store]
            store += 1
    seq[store], seq[slot] = seq[slot], seq[store]
    return store


def _intro_range(seq: MutableSequence, lo: int, hi: int, depth: int, less: Less) -> None:
    if hi - lo < _INTRO_THRESHOLD:
        _insertion_range(seq, lo, hi, less)
        return
    if depth == 0:
        _heap_range(seq, lo, hi, less)
        return
    pivot = _intro_partition(seq, lo, hi, less)
    _intro_range(seq, lo, pivot, depth - 1, less)
    _intro_range(seq, pivot + 1, hi, depth - 1, less)


def intro_sort(seq: MutableSequence, less: Less = operator.lt) -> None:
    """Introsort: median-of-three quicksort, heap sort past a depth limit,
    insertion sort for small ranges."""
    size = len(seq)
    if size <= 1:
        return
    depth_limit = 2 * int(math.log2(size))
    _intro_range(seq, 0, size, depth_limit, less)


class SortStrategy(ABC):
    """A named, interchangeable sorting algorithm."""

    name: str = ""

    @staticmethod
    @abstractmethod
    def _algorithm(seq: MutableSequence, less: Less) -> None:
        """Sort ``seq`` in place."""

    def sort(self, seq: MutableSequence, less: Less = operator.lt) -> None:
        """Sort ``seq`` in place with this strategy's algorithm."""
        self._algorithm(seq, less)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class BubbleSort(SortStrategy):
    name = "Bubble Sort"
    _algorithm = staticmethod(bubble_sort)


class QuickSort(SortStrategy):
    name = "Quick Sort"
    _algorithm = staticmethod(quick_sort)


class InsertionSort(SortStrategy):
    name = "Insertion Sort"
    _algorithm = staticmethod(insertion_sort)


class SelectionSort(SortStrategy):
    name = "Selection Sort"
    _algorithm = staticmethod(selection_sort)


class MergeSort(SortStrategy):
    name = "Merge Sort"
    _algorithm = staticmethod(merge_sort)


class HeapSort(SortStrategy):
    name = "Heap Sort"
    _algorithm = staticmethod(heap_sort)


class IntroSort(SortStrategy):
    name = "Intro Sort"
    _algorithm = staticmethod(intro_sort)


class Algorithm:
    """Context that sorts with whichever strategy it currently holds."""

    def __init__(self, strategy: SortStrategy | None = None) -> None:
        self.strategy = strategy

    def sort(self, seq: MutableSequence, less: Less = operator.lt) -> None:
        """Sort ``seq`` with the current strategy; do nothing if none is set."""
        if self.strategy is not None:
            self.strategy.sort(seq, less)

    def strategy_name(self) -> str:
        """Name of the current strategy, or ``"No strategy set"``."""
        return self.strategy.name if self.strategy is not None else "No strategy set"