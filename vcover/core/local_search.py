"""Neighbour-swap local search followed by a final cleanup."""

from __future__ import annotations

import logging

from vcover.core.deadline import Deadline
from vcover.core.graph import Graph
from vcover.core.minimize import minimize

logger = logging.getLogger(__name__)


def _all_covered(graph: Graph, in_cover: bytearray) -> bool:
    for a, b in graph.edges:
        if not (in_cover[a] or in_cover[b]):
            return False
    return True


def improve(graph: Graph, cover: list[int], deadline: Deadline, fraction: float = 0.95) -> list[int]:
    """
    Swap cover vertices with uncovered neighbours, then minimize.

    For each cover vertex ``v`` and each neighbour ``u`` outside the cover,
    the swap ``v -> u`` is kept if the whole edge set stays covered; the
    scan then restarts from the first cover vertex.  A pass without an
    accepted swap, or running past ``fraction`` of the budget, ends the
    search.  Swaps keep the size fixed; the closing :func:`minimize` is
    where they pay off.
    """
    cover = [x for x in cover if 1 <= x <= graph.max_id]
    in_cover = bytearray(graph.max_id + 1)

    def rebuild() -> None:
        in_cover[:] = bytes(len(in_cover))
        for x in cover:
            in_cover[x] = 1

    rebuild()
    swaps = 0
    improved = True
    while improved and deadline.within(fraction):
        improved = False
        for idx, v in enumerate(cover):
            for u in graph.adjacency[v]:
                if in_cover[u]:
                    continue
                in_cover[v], in_cover[u] = 0, 1
                if _all_covered(graph, in_cover):
                    cover[idx] = u
                    rebuild()
                    improved = True
                    swaps += 1
                    break
                in_cover[v], in_cover[u] = 1, 0
                if deadline.passed(fraction):
                    break
            if improved or deadline.passed(fraction):
                break

    result = minimize(graph, cover)
    logger.debug("Local search: %d swaps, %d -> %d vertices", swaps, len(cover), len(result))
    return result
