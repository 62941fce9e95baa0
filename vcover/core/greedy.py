"""Greedy max-residual-degree cover."""

from __future__ import annotations

import logging

from vcover.core.deadline import Deadline
from vcover.core.graph import Graph
from vcover.core.minimize import minimize

logger = logging.getLogger(__name__)


def greedy_degree_cover(graph: Graph, deadline: Deadline, fraction: float = 0.6) -> list[int]:
    """
    Repeatedly take the vertex with the most uncovered incident edges.

    Residual degrees live in a private array indexed by vertex id with a
    removed mark per vertex; the shared adjacency is only read.  Ties go
    to the lowest id.  Stops when no vertex has positive residual degree
    or ``fraction`` of the budget is spent, then minimizes.
    """
    n = graph.max_id
    residual = [len(nbrs) for nbrs in graph.adjacency]
    removed = bytearray(n + 1)

    candidate: list[int] = []
    while not deadline.passed(fraction):
        best, best_deg = 0, 0
        for v in range(1, n + 1):
            if residual[v] > best_deg:
                best, best_deg = v, residual[v]
        if best == 0:
            break

        candidate.append(best)
        removed[best] = 1
        residual[best] = 0
        for y in graph.adjacency[best]:
            if not removed[y]:
                residual[y] -= 1

    cover = minimize(graph, candidate)
    logger.debug("Greedy heuristic: %d picked -> %d after minimize", len(candidate), len(cover))
    return cover
