"""
Program entry point.

Reads ``input.txt`` from the working directory, solves with the default
budget and writes ``output.txt``.  Takes no flags and always exits with
status 0: an unreadable input yields a result file with an empty cover.
"""

from __future__ import annotations

import logging

from vcover.config import OutputConfig, SolverConfig
from vcover.core.solver import Solver
from vcover.utils.edge_io import load_graph, write_result

logger = logging.getLogger(__name__)


def run(
    solver_config: SolverConfig | None = None,
    output_config: OutputConfig | None = None,
) -> list[int]:
    """Load, solve and write; return the cover that was written."""
    solver_config = solver_config or SolverConfig()
    output_config = output_config or OutputConfig()

    graph = load_graph(output_config.input_path, max_vertex_id=solver_config.max_vertex_id)
    cover: list[int] = []
    if graph is None:
        logger.warning("No graph available; writing an empty cover")
    else:
        # The budget starts after the input is loaded.
        cover = Solver(graph, solver_config).solve()

    try:
        write_result(output_config.output_path, cover, output_config)
    except OSError as exc:
        logger.error("Could not write %s: %s", output_config.output_path, exc)
    return cover


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s | %(message)s",
    )
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
