"""Bounded-heap selection and sorting with ``heapq``."""

from __future__ import annotations

import heapq
from typing import Iterable

__all__ = ["kth_smallest", "kth_largest", "sort_k_sorted", "max_heap_order"]


def _check_k(k: int, minimum: int) -> None:
    if k < minimum:
        raise ValueError(f"k must be at least {minimum}, got {k}")


def kth_smallest(values: Iterable[int], k: int = 3) -> int:
    """Return the k-th smallest value, kept with a max-heap of at most ``k`` items.

    With fewer than ``k`` values the largest of them is returned.
    """
    _check_k(k, 1)
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, -value)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("no values given")
    return -heap[0]


def kth_largest(values: Iterable[int], k: int = 3) -> int:
    """Return the k-th largest value, kept with a min-heap of at most ``k`` items.

    With fewer than ``k`` values the smallest of them is returned.
    """
    _check_k(k, 1)
    heap: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            heapq.heappop(heap)
    if not heap:
        raise ValueError("no values given")
    return heap[0]


def sort_k_sorted(values: Iterable[int], k: int = 3) -> list[int]:
    """Sort values each of which lies at most ``k`` places from its sorted position."""
    _check_k(k, 0)
    heap: list[int] = []
    result: list[int] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            result.append(heapq.heappop(heap))
    while heap:
        result.append(heapq.heappop(heap))
    return result


def max_heap_order(values: Iterable[int]) -> list[int]:
    """Return the values in the order a max-heap releases them (largest first)."""
    heap = [-value for value in values]
    heapq.heapify(heap)
    return [-heapq.heappop(heap) for _ in range(len(heap))]