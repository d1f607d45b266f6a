"""Queue and stack reshaping. Stacks are lists whose last element is the top."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

__all__ = ["reverse_queue", "push_bottom", "reverse_stack", "top_down"]


def reverse_queue(queue: Iterable[int]) -> deque[int]:
    """Return a new queue holding the elements in reverse order."""
    stack = list(queue)
    reversed_queue: deque[int] = deque()
    while stack:
        reversed_queue.append(stack.pop())
    return reversed_queue


def push_bottom(stack: Sequence[int], value: int) -> list[int]:
    """Return a new stack with ``value`` placed beneath every existing element."""
    return [value, *stack]


def reverse_stack(stack: Sequence[int]) -> list[int]:
    """Return a new stack whose former bottom is now the top."""
    return list(reversed(stack))


def top_down(stack: Sequence[int]) -> list[int]:
    """Return the elements from top to bottom, leaving the stack unchanged."""
    return list(reversed(stack))