"""Barabási-Albert preferential attachment graph generator."""

from __future__ import annotations

from typing import Any

import networkx as nx

from vcover.generators.base import BaseGenerator


class BarabasiAlbertGenerator(BaseGenerator):
    """
    Hub-dominated cover instances built by preferential attachment.

    Each new vertex links to *m* existing ones, favouring high degree.
    A handful of hubs end up touching most edges; picking them first is
    exactly what the greedy degree heuristic does, while the matching
    heuristic pays for both endpoints of every hub edge it matches.

    Parameters
    ----------
    m : int, default 2
        Number of edges to attach from a new vertex to existing vertices.
    seed : int | None
        Random seed for reproducibility.
    """

    name = "barabasi_albert"

    def generate(self, size: int, **params: Any) -> dict:
        m = params.get("m", 2)
        seed = params.get("seed", None)

        # m must be < size
        m = min(m, max(1, size - 1))
        G = nx.barabasi_albert_graph(size, m, seed=seed)
        return self._nx_to_dict(G, self.name, size, {"m": m})
