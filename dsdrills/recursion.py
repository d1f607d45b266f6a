"""Small recursive exercises: counting, sums, factorial and the towers of Hanoi."""

from __future__ import annotations

from typing import Iterator

__all__ = ["count_up", "count_down", "hanoi", "factorial", "sum_to", "greetings"]

GREETING = "Good Morning"


def _check(n: int) -> None:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")


def count_up(n: int) -> list[int]:
    """Return ``1, 2, ..., n``."""
    _check(n)
    return list(range(1, n + 1))


def count_down(n: int) -> list[int]:
    """Return ``n, n - 1, ..., 1``."""
    _check(n)
    return list(range(n, 0, -1))


def _moves(n: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if n == 0:
        return
    yield from _moves(n - 1, source, target, spare)
    yield (source, target)
    yield from _moves(n - 1, spare, source, target)


def hanoi(n: int, source: str = "A", spare: str = "B", target: str = "C") -> list[tuple[str, str]]:
    """Return the ``(from, to)`` moves that carry ``n`` discs from ``source`` to ``target``."""
    _check(n)
    return list(_moves(n, source, spare, target))


def factorial(n: int) -> int:
    """Return ``n!``; both 0! and 1! are 1."""
    _check(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def sum_to(n: int) -> int:
    """Return ``1 + 2 + ... + n``; 0 for ``n == 0``."""
    _check(n)
    return sum(range(n + 1))


def greetings(n: int) -> list[str]:
    """Return the greeting repeated ``n`` times."""
    _check(n)
    return [GREETING] * n