from collections import deque

import pytest

from dsdrills.sequences import push_bottom, reverse_queue, reverse_stack, top_down

STACK = [10, 20, 30, 40, 50]


def test_reverse_queue_reverses_and_keeps_input():
    q = deque(STACK)
    result = reverse_queue(q)
    assert list(result) == STACK[::-1]
    assert list(q) == STACK


def test_reverse_queue_round_trip():
    assert reverse_queue(reverse_queue(STACK)) == deque(STACK)


def test_reverse_queue_empty():
    assert reverse_queue([]) == deque()


def test_push_bottom():
    result = push_bottom(STACK, 70)
    assert result[0] == 70
    assert result[1:] == STACK
    assert STACK == [10, 20, 30, 40, 50]


def test_push_bottom_on_empty_stack():
    assert push_bottom([], 5) == [5]


def test_push_bottom_value_comes_out_last():
    assert top_down(push_bottom(STACK, 70))[-1] == 70


@pytest.mark.parametrize("stack", [STACK, [], [1], [3, 3, 1]])
def test_reverse_stack_round_trip(stack):
    reversed_stack = reverse_stack(stack)
    assert reverse_stack(reversed_stack) == stack
    assert reversed_stack == stack[::-1]


def test_top_down_starts_at_top():
    order = top_down(STACK)
    assert order[0] == STACK[-1]
    assert order[-1] == STACK[0]
    assert sorted(order) == sorted(STACK)


def test_top_down_does_not_consume():
    stack = list(STACK)
    top_down(stack)
    assert stack == STACK