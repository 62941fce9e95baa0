"""Benchmarkable cover algorithms."""

from __future__ import annotations

from vcover.algorithms.base import AlgorithmWrapper
from vcover.algorithms.baselines import NetworkxApproxCover
from vcover.algorithms.heuristics import GreedyDegreeOnlyCover, HeuristicCover, MatchingOnlyCover
from vcover.config import SolverConfig

# Registry: name → class
ALGORITHM_REGISTRY: dict[str, type[AlgorithmWrapper]] = {
    "heuristic": HeuristicCover,
    "matching_only": MatchingOnlyCover,
    "greedy_only": GreedyDegreeOnlyCover,
    "networkx_approx": NetworkxApproxCover,
}


def get_algorithm(name: str, config: SolverConfig | None = None) -> AlgorithmWrapper:
    """Instantiate a registered algorithm by name."""
    if name not in ALGORITHM_REGISTRY:
        available = ", ".join(sorted(ALGORITHM_REGISTRY))
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")
    cls = ALGORITHM_REGISTRY[name]
    if cls is NetworkxApproxCover:
        return cls()
    return cls(config)


def list_algorithms() -> list[str]:
    """Return the names of all available algorithms."""
    return sorted(ALGORITHM_REGISTRY.keys())


__all__ = [
    "ALGORITHM_REGISTRY",
    "AlgorithmWrapper",
    "GreedyDegreeOnlyCover",
    "HeuristicCover",
    "MatchingOnlyCover",
    "NetworkxApproxCover",
    "get_algorithm",
    "list_algorithms",
]
