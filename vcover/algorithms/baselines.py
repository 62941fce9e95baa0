"""Reference algorithms from networkx, for comparison only."""

from __future__ import annotations

import networkx as nx
from networkx.algorithms.approximation import min_weighted_vertex_cover

from vcover.algorithms.base import AlgorithmWrapper
from vcover.core.deadline import Deadline
from vcover.core.graph import Graph


def to_networkx(graph: Graph) -> nx.Graph:
    """Convert a :class:`Graph` to a ``networkx.Graph`` over its active vertices."""
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    G.add_edges_from(graph.edges)
    return G


class NetworkxApproxCover(AlgorithmWrapper):
    """Bar-Yehuda/Even local-ratio 2-approximation (unit weights)."""
    name = "networkx_approx"

    def solve(self, graph: Graph, deadline: Deadline) -> dict:
        cover = min_weighted_vertex_cover(to_networkx(graph))
        return {"solution": {"vertices": sorted(cover)}, "metadata": {}}
