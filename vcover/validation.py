"""Cover validation used by the benchmark engine and tests."""

from __future__ import annotations

from typing import Iterable

from vcover.core.graph import Graph
from vcover.core.minimize import covers_all


def uncovered_edges(graph: Graph, cover: Iterable[int]) -> list[tuple[int, int]]:
    cover_set = set(cover)
    return [(u, v) for u, v in graph.edges if u not in cover_set and v not in cover_set]


def is_inclusion_minimal(graph: Graph, cover: Iterable[int]) -> bool:
    """True if dropping any single vertex leaves some edge uncovered."""
    cover_set = set(cover)
    for x in cover_set:
        if covers_all(graph, cover_set - {x}):
            return False
    return True


def validate_cover(graph: Graph, cover: Iterable[int]) -> dict:
    """
    Check a candidate cover against the graph.

    Returns
    -------
    dict
        ``feasible`` – every edge has an endpoint in the cover
        ``uncovered_edges`` – number of edges with no endpoint in the cover
        ``cover_size`` – number of distinct vertices
        ``in_bounds`` – every vertex is an active id no larger than ``max_id``
        ``minimal`` – feasible and inclusion-minimal
    """
    cover_set = set(cover)
    missing = uncovered_edges(graph, cover_set)
    in_bounds = all(1 <= v <= graph.max_id and graph.active[v] for v in cover_set)
    feasible = not missing
    return {
        "feasible": feasible,
        "uncovered_edges": len(missing),
        "cover_size": len(cover_set),
        "in_bounds": in_bounds,
        "minimal": feasible and is_inclusion_minimal(graph, cover_set),
    }


def compute_objective(cover: Iterable[int]) -> float:
    """Return the cover size (lower is better)."""
    return float(len(set(cover)))
