"""Abstract base class for cover algorithm wrappers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vcover.core.deadline import Deadline
from vcover.core.graph import Graph


class AlgorithmWrapper(ABC):
    """
    Base class that every benchmarked cover algorithm must implement.

    Subclass this, set ``name``, and implement :meth:`solve`.

    Example
    -------
    >>> class AllVertices(AlgorithmWrapper):
    ...     name = "all_vertices"
    ...     def solve(self, graph, deadline):
    ...         return {"solution": {"vertices": graph.vertices()}, "metadata": {}}
    """

    name: str = "unnamed"

    @abstractmethod
    def solve(self, graph: Graph, deadline: Deadline) -> dict:
        """
        Compute a vertex cover of ``graph``.

        Parameters
        ----------
        graph : Graph
            The instance to cover.
        deadline : Deadline
            Budget already running for this call.

        Returns
        -------
        dict
            Must contain at least:

            - ``"solution"`` – ``{"vertices": [...]}``
            - ``"metadata"`` – optional extra info
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
