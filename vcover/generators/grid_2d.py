"""2-D grid / lattice graph generator."""

from __future__ import annotations

import math
from typing import Any

import networkx as nx

from vcover.generators.base import BaseGenerator


class Grid2DGenerator(BaseGenerator):
    """
    Generates 2-D grid (lattice) graphs.

    Grids are bipartite, so the minimum cover is known (König) and easy to
    compare against.  The ``size`` parameter is the total number of
    vertices; the grid is ``rows × cols`` with the most-square
    factorisation of ``size``.
    """

    name = "grid_2d"

    def generate(self, size: int, **params: Any) -> dict:
        rows = int(math.isqrt(size))
        while rows > 0 and size % rows != 0:
            rows -= 1
        if rows == 0:
            rows = 1
        cols = size // rows

        G = nx.grid_2d_graph(rows, cols)
        G = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return self._nx_to_dict(G, self.name, size, {"rows": rows, "cols": cols})
