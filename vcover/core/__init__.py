"""Graph model and cover-construction pipeline."""

from vcover.core.deadline import Deadline
from vcover.core.graph import DEFAULT_MAX_VERTEX_ID, Graph, parse_edge_line
from vcover.core.greedy import greedy_degree_cover
from vcover.core.local_search import improve
from vcover.core.matching import matching_cover
from vcover.core.minimize import covers_all, minimize
from vcover.core.solver import Solver, solve_lines

__all__ = [
    "DEFAULT_MAX_VERTEX_ID",
    "Deadline",
    "Graph",
    "Solver",
    "covers_all",
    "greedy_degree_cover",
    "improve",
    "matching_cover",
    "minimize",
    "parse_edge_line",
    "solve_lines",
]
