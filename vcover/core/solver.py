"""
Solve orchestration.

Runs both constructive heuristics, keeps the smaller cover (matching wins
ties), then hands it to local search and the final minimizer.
"""

from __future__ import annotations

import logging
from typing import Iterable

from vcover.config import Heuristic, SolveReport, SolverConfig
from vcover.core.deadline import Deadline
from vcover.core.graph import Graph
from vcover.core.greedy import greedy_degree_cover
from vcover.core.local_search import improve
from vcover.core.matching import matching_cover
from vcover.core.minimize import covers_all, minimize

logger = logging.getLogger(__name__)


class Solver:
    """
    Approximate minimum vertex cover under a wall-clock budget.

    Usage
    -----
    >>> graph = Graph.from_lines(["1,2", "2,3", "3,1"])
    >>> len(Solver(graph).solve())
    2
    """

    def __init__(self, graph: Graph, config: SolverConfig | None = None) -> None:
        self.graph = graph
        self.config = config or SolverConfig()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def new_deadline(self) -> Deadline:
        return Deadline(self.config.time_budget_seconds)

    def solve(self, deadline: Deadline | None = None) -> list[int]:
        """Return a feasible, inclusion-minimal cover in ascending order."""
        return self.solve_with_report(deadline).cover

    def solve_with_report(self, deadline: Deadline | None = None) -> SolveReport:
        """Like :meth:`solve`, but also report what each stage produced."""
        if deadline is None:
            deadline = self.new_deadline()

        if not self.graph.has_edges():
            return SolveReport(elapsed_seconds=deadline.elapsed())

        cfg = self.config
        matching = matching_cover(self.graph, deadline, cfg.construction_fraction)
        greedy = greedy_degree_cover(self.graph, deadline, cfg.construction_fraction)

        # A heuristic cut short by the deadline may hand back a partial
        # cover; only feasible candidates compete.  Matching wins ties.
        best: list[int] | None = None
        chosen: Heuristic | None = None
        if covers_all(self.graph, matching):
            best, chosen = matching, Heuristic.MATCHING
        if covers_all(self.graph, greedy) and (best is None or len(greedy) < len(best)):
            best, chosen = greedy, Heuristic.GREEDY_DEGREE
        if best is None:
            logger.warning("Both heuristics stopped before covering every edge; falling back to all active vertices")
            best = minimize(self.graph, self.graph.vertices())

        best = improve(self.graph, best, deadline, cfg.local_search_fraction)
        cover = sorted(set(best))

        report = SolveReport(
            cover=cover,
            chosen_heuristic=chosen,
            matching_size=len(matching),
            greedy_size=len(greedy),
            final_size=len(cover),
            elapsed_seconds=deadline.elapsed(),
        )
        logger.info(
            "Solved %d edges: matching=%d greedy=%d -> %d (%s, %.3fs)",
            len(self.graph), report.matching_size, report.greedy_size,
            report.final_size, chosen.value if chosen else "fallback", report.elapsed_seconds,
        )
        return report


def solve_lines(lines: Iterable[str], config: SolverConfig | None = None) -> list[int]:
    """Build a graph from raw ``u,v`` records and solve it."""
    config = config or SolverConfig()
    graph = Graph.from_lines(lines, max_vertex_id=config.max_vertex_id)
    return Solver(graph, config).solve()
