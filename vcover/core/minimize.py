"""Feasibility oracle and redundancy elimination."""

from __future__ import annotations

from typing import Iterable

from vcover.core.graph import Graph


def covers_all(graph: Graph, candidate: Iterable[int]) -> bool:
    """
    Return True if every edge has at least one endpoint in ``candidate``.

    An empty edge set is covered vacuously.  Ids outside ``1..max_id`` are
    ignored.
    """
    if not graph.edges:
        return True
    in_cover = bytearray(graph.max_id + 1)
    for v in candidate:
        if 1 <= v <= graph.max_id:
            in_cover[v] = 1
    for u, v in graph.edges:
        if not (in_cover[u] or in_cover[v]):
            return False
    return True


def minimize(graph: Graph, candidate: Iterable[int]) -> list[int]:
    """
    Strip redundant vertices, highest id first.

    Feasibility is checked once with :func:`covers_all`.  After that a
    vertex can be dropped iff all of its neighbours are still kept, which
    is exactly when the remaining set still covers every edge, so each
    decision costs the vertex's degree rather than a full edge scan.  The
    result is inclusion-minimal for this removal order.  An infeasible
    candidate comes back sorted and deduplicated but otherwise unchanged.
    """
    ordered = sorted(set(candidate))
    if not covers_all(graph, ordered):
        return ordered

    in_cover = bytearray(graph.max_id + 1)
    for v in ordered:
        if 1 <= v <= graph.max_id:
            in_cover[v] = 1
    for v in reversed(ordered):
        if not (1 <= v <= graph.max_id):
            continue
        if all(in_cover[u] for u in graph.adjacency[v]):
            in_cover[v] = 0
    return [v for v in ordered if 1 <= v <= graph.max_id and in_cover[v]]
