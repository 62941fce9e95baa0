"""Shared fixtures: a controllable clock and a few small graphs."""

import pytest

from vcover.core.deadline import Deadline
from vcover.core.graph import Graph


class FakeClock:
    """Clock that only moves when told to, or by ``step`` per reading."""

    def __init__(self, now: float = 0.0, step: float = 0.0) -> None:
        self.now = now
        self.step = step

    def __call__(self) -> float:
        t = self.now
        self.now += self.step
        return t


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def ample(clock):
    """A deadline that never runs out (the clock stands still)."""
    return Deadline(1.0, clock=clock)


@pytest.fixture()
def expired():
    clock = FakeClock()
    deadline = Deadline(1.0, clock=clock)
    clock.now = 100.0
    return deadline


@pytest.fixture()
def triangle():
    return Graph.from_lines(["1,2", "2,3", "3,1"])


@pytest.fixture()
def path5():
    return Graph.from_lines(["1,2", "2,3", "3,4", "4,5"])


@pytest.fixture()
def star():
    return Graph.from_lines(["1,2", "1,3", "1,4", "1,5"])


@pytest.fixture()
def ticking():
    """A deadline that advances a millisecond per clock reading."""
    return Deadline(1.0, clock=FakeClock(step=0.001))
