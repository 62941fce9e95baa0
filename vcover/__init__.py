"""Approximate minimum vertex cover under a wall-clock budget."""

from vcover.config import OutputConfig, SolverConfig
from vcover.core import Deadline, Graph, Solver, covers_all, minimize, solve_lines

__version__ = "0.1.0"

__all__ = [
    "Deadline",
    "Graph",
    "OutputConfig",
    "Solver",
    "SolverConfig",
    "covers_all",
    "minimize",
    "solve_lines",
]
