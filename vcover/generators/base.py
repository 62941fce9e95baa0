"""Abstract base class for all instance generators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseGenerator(ABC):
    """
    Base class for edge-list instance generators.

    Every generator produces a dict in the solver's input format::

        {
            "lines": ["1,2", "1,5", ...],
            "metadata": {
                "generator": "erdos_renyi",
                "size": 100,
                "params": {"p": 0.3},
            }
        }

    Vertex ids in ``lines`` are 1-based, so ``size`` is also the largest
    id an instance can mention.
    """

    name: str = "base"

    @abstractmethod
    def generate(self, size: int, **params: Any) -> dict:
        """
        Generate an instance.

        Parameters
        ----------
        size : int
            Number of vertices in the generated graph.
        **params
            Generator-specific parameters.

        Returns
        -------
        dict
            An instance dict with keys ``lines`` and ``metadata``.
        """

    # ------------------------------------------------------------------
    # Helpers shared by all generators
    # ------------------------------------------------------------------

    @staticmethod
    def _nx_to_dict(
        G,  # noqa: N803  (networkx convention)
        generator_name: str,
        size: int,
        params: dict[str, Any],
    ) -> dict:
        """Render a ``networkx.Graph`` with 0-based integer nodes as ``u,v`` lines."""
        lines = [f"{u + 1},{v + 1}" for u, v in G.edges()]
        return {
            "lines": lines,
            "metadata": {
                "generator": generator_name,
                "size": size,
                "params": params,
            },
        }
