"""Wall-clock budget shared by every stage of a solve."""

from __future__ import annotations

import time
from typing import Callable


class Deadline:
    """
    Soft time budget measured from the instant the object is created.

    The clock is injectable so tests can simulate an expired or ample
    budget without sleeping.  All checks are cooperative polls; a slow
    step between two polls can overrun a threshold.

    Parameters
    ----------
    budget_seconds : float
        Total wall-clock budget.
    clock : callable
        Monotonic time source returning seconds.
    """

    def __init__(self, budget_seconds: float, clock: Callable[[], float] = time.perf_counter) -> None:
        self.budget_seconds = budget_seconds
        self._clock = clock
        self._start = clock()

    def elapsed(self) -> float:
        return self._clock() - self._start

    def passed(self, fraction: float = 1.0) -> bool:
        """True once more than ``fraction`` of the budget has been used."""
        return self.elapsed() > self.budget_seconds * fraction

    def within(self, fraction: float = 1.0) -> bool:
        """True while strictly less than ``fraction`` of the budget has been used."""
        return self.elapsed() < self.budget_seconds * fraction

    def __repr__(self) -> str:
        return f"<Deadline budget={self.budget_seconds}s elapsed={self.elapsed():.3f}s>"
