"""The two stacks and the moves that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Optional


class Stacks:
    """Stacks a and b, top first, with a record of the moves performed.

    A move that changes nothing is not recorded, except rr and rrr,
    which are always recorded.
    """

    def __init__(
        self,
        a: Optional[Iterable[int]] = None,
        b: Optional[Iterable[int]] = None,
    ) -> None:
        self.a: deque[int] = deque(a or ())
        self.b: deque[int] = deque(b or ())
        self.moves: list[str] = []

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        first = stack.popleft()
        stack.insert(1, first)
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def pa(self) -> None:
        """Move the top of b onto a."""
        if self._push(self.b, self.a):
            self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if self._push(self.a, self.b):
            self.moves.append("pb")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if self._swap(self.a):
            self.moves.append("sa")

    def sb(self) -> None:
        """Swap the two top elements of b."""
        if self._swap(self.b):
            self.moves.append("sb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        if self._rotate(self.a, -1):
            self.moves.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        if self._rotate(self.b, -1):
            self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        if self._rotate(self.a, 1):
            self.moves.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        if self._rotate(self.b, 1):
            self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self.moves.append("rrr")

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"