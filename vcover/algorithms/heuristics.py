"""Algorithm wrappers around the solve pipeline and its stages."""

from __future__ import annotations

from vcover.algorithms.base import AlgorithmWrapper
from vcover.config import SolverConfig
from vcover.core.deadline import Deadline
from vcover.core.graph import Graph
from vcover.core.greedy import greedy_degree_cover
from vcover.core.matching import matching_cover
from vcover.core.solver import Solver


class HeuristicCover(AlgorithmWrapper):
    """Full pipeline: both heuristics, local search, final minimization."""
    name = "heuristic"

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    def solve(self, graph: Graph, deadline: Deadline) -> dict:
        report = Solver(graph, self.config).solve_with_report(deadline)
        return {
            "solution": {"vertices": report.cover},
            "metadata": report.model_dump(exclude={"cover"}, mode="json"),
        }


class MatchingOnlyCover(AlgorithmWrapper):
    """Minimized matching-based 2-approximation on its own."""
    name = "matching_only"

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    def solve(self, graph: Graph, deadline: Deadline) -> dict:
        cover = matching_cover(graph, deadline, self.config.construction_fraction)
        return {"solution": {"vertices": cover}, "metadata": {}}


class GreedyDegreeOnlyCover(AlgorithmWrapper):
    """Minimized greedy max-residual-degree cover on its own."""
    name = "greedy_only"

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    def solve(self, graph: Graph, deadline: Deadline) -> dict:
        cover = greedy_degree_cover(graph, deadline, self.config.construction_fraction)
        return {"solution": {"vertices": cover}, "metadata": {}}
