"""
Bounded-id undirected graph built from raw ``u,v`` edge records.

Edges are normalised (smaller id first), sorted and deduplicated once at
construction.  Adjacency and activity are derived from the final edge list
and never change afterwards; heuristics that need to mutate degrees keep
their own working state.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)

DEFAULT_MAX_VERTEX_ID = 350

# Leading integer, comma, leading integer.  Anything after the second
# integer is ignored, matching stream-style extraction.
_EDGE_RE = re.compile(r"\s*([+-]?\d+)\s*,\s*([+-]?\d+)")

Edge = tuple[int, int]


def parse_edge_line(line: str) -> Edge | None:
    """
    Parse one ``<u>,<v>`` record.

    Returns ``None`` when the separator is missing, either token is not an
    integer, or either value is not positive.  Bounds are not checked here.
    """
    m = _EDGE_RE.match(line)
    if m is None:
        return None
    u, v = int(m.group(1)), int(m.group(2))
    if u <= 0 or v <= 0:
        return None
    return u, v


class Graph:
    """
    Immutable edge set over vertex ids ``1..max_id``.

    Attributes
    ----------
    max_id : int
        Largest vertex id seen (edge endpoints and in-bound self-pairs).
    edges : tuple[tuple[int, int], ...]
        Sorted, deduplicated, normalised edges; never contains a self-pair.
    adjacency : tuple[tuple[int, ...], ...]
        ``adjacency[v]`` lists the neighbours of ``v``; index 0 is unused.
    active : tuple[bool, ...]
        ``active[v]`` is True iff ``v`` is an endpoint of some edge.
    """

    __slots__ = ("max_id", "max_vertex_id", "edges", "adjacency", "active")

    def __init__(self, max_id: int, edges: Iterable[Edge], max_vertex_id: int = DEFAULT_MAX_VERTEX_ID) -> None:
        self.max_vertex_id = max_vertex_id
        self.max_id = max_id
        self.edges = tuple(sorted(set(edges)))

        adj: list[list[int]] = [[] for _ in range(max_id + 1)]
        active = [False] * (max_id + 1)
        for u, v in self.edges:
            adj[u].append(v)
            adj[v].append(u)
            active[u] = active[v] = True
        self.adjacency = tuple(tuple(nbrs) for nbrs in adj)
        self.active = tuple(active)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_pairs(cls, pairs: Iterable[Edge], max_vertex_id: int = DEFAULT_MAX_VERTEX_ID) -> "Graph":
        """Build a graph from parsed ``(u, v)`` pairs, applying the bound rules."""
        max_id = 0
        edges: list[Edge] = []
        for u, v in pairs:
            if u <= 0 or v <= 0:
                continue
            if u == v:
                if u <= max_vertex_id:
                    max_id = max(max_id, u)
                continue
            if u > max_vertex_id or v > max_vertex_id:
                continue
            max_id = max(max_id, u, v)
            edges.append((u, v) if u < v else (v, u))
        return cls(max_id, edges, max_vertex_id=max_vertex_id)

    @classmethod
    def from_lines(cls, lines: Iterable[str], max_vertex_id: int = DEFAULT_MAX_VERTEX_ID) -> "Graph":
        """Build a graph from raw text records; unparsable lines are skipped."""
        pairs = []
        skipped = 0
        for line in lines:
            if not line.strip():
                continue
            pair = parse_edge_line(line)
            if pair is None:
                skipped += 1
                continue
            pairs.append(pair)
        graph = cls.from_pairs(pairs, max_vertex_id=max_vertex_id)
        logger.debug(
            "Loaded graph: max_id=%d edges=%d (%d malformed lines skipped)",
            graph.max_id, len(graph.edges), skipped,
        )
        return graph

    @classmethod
    def empty(cls, max_vertex_id: int = DEFAULT_MAX_VERTEX_ID) -> "Graph":
        return cls(0, (), max_vertex_id=max_vertex_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def has_edges(self) -> bool:
        return bool(self.edges)

    def degree(self, v: int) -> int:
        if 1 <= v <= self.max_id:
            return len(self.adjacency[v])
        return 0

    def vertices(self) -> list[int]:
        """Active vertex ids in ascending order."""
        return [v for v in range(1, self.max_id + 1) if self.active[v]]

    def __len__(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"<Graph max_id={self.max_id} edges={len(self.edges)}>"
