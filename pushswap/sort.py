"""Sorting stack a with the fewest moves the cost heuristic finds."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Callable

from .stacks import Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when values never decrease from first to last."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


def _above_median(stack: deque[int], value: int) -> bool:
    return stack.index(value) <= len(stack) // 2


def _distance(stack: deque[int], value: int) -> int:
    position = stack.index(value)
    return position if position <= len(stack) // 2 else len(stack) - position


def _target_in_b(value: int, b: deque[int]) -> int:
    smaller = [v for v in b if v < value]
    return max(smaller) if smaller else max(b)


def _target_in_a(value: int, a: deque[int]) -> int:
    bigger = [v for v in a if v > value]
    return min(bigger) if bigger else min(a)


def _cheapest(a: deque[int], b: deque[int]) -> tuple[int, int]:
    """The element of a cheapest to push onto b, with its target in b."""
    best: tuple[int, int] | None = None
    best_cost = 0
    for value in a:
        target = _target_in_b(value, b)
        cost = _distance(a, value) + _distance(b, target)
        if best is None or cost < best_cost:
            best, best_cost = (value, target), cost
    assert best is not None
    return best


def _bring_to_top(
    stack: deque[int],
    value: int,
    up: Callable[[], None],
    down: Callable[[], None],
) -> None:
    rotate = up if _above_median(stack, value) else down
    while stack[0] != value:
        rotate()


def _move_a_to_b(stacks: Stacks) -> None:
    a, b = stacks.a, stacks.b
    value, target = _cheapest(a, b)
    value_up = _above_median(a, value)
    target_up = _above_median(b, target)
    if value_up and target_up:
        while b[0] != target and a[0] != value:
            stacks.rr()
    elif not value_up and not target_up:
        while b[0] != target and a[0] != value:
            stacks.rrr()
    _bring_to_top(a, value, stacks.ra, stacks.rra)
    _bring_to_top(b, target, stacks.rb, stacks.rrb)
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    target = _target_in_a(stacks.b[0], stacks.a)
    _bring_to_top(stacks.a, target, stacks.ra, stacks.rra)
    stacks.pa()


def sort_three(stacks: Stacks) -> None:
    """Order a stack of three in at most two moves."""
    a = stacks.a
    if not a:
        return
    biggest = a.index(max(a))
    if biggest == 0:
        stacks.ra()
    elif biggest == 1:
        stacks.rra()
    if len(a) > 1 and a[0] > a[1]:
        stacks.sa()


def sort_big(stacks: Stacks) -> None:
    """Sort stack a of more than three elements, using b as scratch space."""
    a = stacks.a
    remaining = len(a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(a):
            stacks.pb()
        remaining -= 1
    while remaining > 3 and not is_sorted(a):
        remaining -= 1
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _move_b_to_a(stacks)
    _bring_to_top(a, min(a), stacks.ra, stacks.rra)


def solve(values: Iterable[int]) -> list[str]:
    """Return the moves that sort values, top of the stack first."""
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            sort_three(stacks)
        else:
            sort_big(stacks)
    return stacks.moves