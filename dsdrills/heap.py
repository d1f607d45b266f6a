"""Binary max- and min-heaps, plus in-place heapify and heap sort."""

from __future__ import annotations

import operator
from typing import Callable, Iterable

__all__ = ["MaxHeap", "MinHeap", "heapify", "build_max_heap", "heap_sort"]

_Before = Callable[[int, int], bool]


def _sift_up(items: list[int], before: _Before) -> None:
    index = len(items) - 1
    while index > 0:
        parent = (index - 1) // 2
        if not before(items[index], items[parent]):
            return
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: list[int], before: _Before) -> None:
    index = 0
    count = len(items)
    while True:
        best = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < count and before(items[child], items[best]):
                best = child
        if best == index:
            return
        items[index], items[best] = items[best], items[index]
        index = best


def _push(items: list[int], value: int, before: _Before) -> None:
    items.append(value)
    _sift_up(items, before)


def _pop(items: list[int], before: _Before) -> int:
    if not items:
        raise IndexError("pop from an empty heap")
    root = items[0]
    last = items.pop()
    if items:
        items[0] = last
        _sift_down(items, before)
    return root


class MaxHeap:
    """A heap whose root is its largest value."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        _push(self._items, value, operator.gt)

    def pop(self) -> int:
        """Remove and return the largest value."""
        return _pop(self._items, operator.gt)

    def items(self) -> list[int]:
        """Return the stored values in heap (array) order."""
        return list(self._items)


class MinHeap:
    """A heap whose root is its smallest value."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Add ``value`` to the heap."""
        _push(self._items, value, operator.lt)

    def pop(self) -> int:
        """Remove and return the smallest value."""
        return _pop(self._items, operator.lt)

    def top(self) -> int:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("top of an empty heap")
        return self._items[0]

    def items(self) -> list[int]:
        """Return the stored values in heap (array) order."""
        return list(self._items)


def heapify(values: list[int], size: int, index: int) -> None:
    """Sift ``values[index]`` down within the max-heap ``values[1..size]``.

    Positions are 1-based: ``values[0]`` is not part of the heap.
    """
    while True:
        largest = index
        left, right = 2 * index, 2 * index + 1
        if left <= size and values[largest] < values[left]:
            largest = left
        if right <= size and values[largest] < values[right]:
            largest = right
        if largest == index:
            return
        values[largest], values[index] = values[index], values[largest]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values rearranged into max-heap order."""
    slots = [0, *values]
    size = len(slots) - 1
    for index in range(size // 2, 0, -1):
        heapify(slots, size, index)
    return slots[1:]


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted with a max-heap."""
    slots = [0, *build_max_heap(values)]
    size = len(slots) - 1
    while size > 1:
        slots[size], slots[1] = slots[1], slots[size]
        size -= 1
        heapify(slots, size, 1)
    return slots[1:]