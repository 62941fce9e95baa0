"""
Reading edge-list files and writing result files.

Input is one ``<u>,<v>`` record per line with no header.  The result file
has an identity line followed by the cover in ascending order, both
terminated by the configured line terminator (CRLF by default).
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from vcover.config import OutputConfig
from vcover.core.graph import DEFAULT_MAX_VERTEX_ID, Graph

logger = logging.getLogger(__name__)


def read_edge_lines(path: str) -> Optional[list[str]]:
    """
    Return the lines of ``path``, or ``None`` if it cannot be opened.

    Undecodable bytes are ignored; the parser drops whatever lines they
    spoil.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            return f.read().splitlines()
    except OSError as exc:
        logger.warning("Could not read edge list %s: %s", path, exc)
        return None


def load_graph(path: str, max_vertex_id: int = DEFAULT_MAX_VERTEX_ID) -> Optional[Graph]:
    """Load a :class:`Graph` from an edge-list file; ``None`` if unreadable."""
    lines = read_edge_lines(path)
    if lines is None:
        return None
    return Graph.from_lines(lines, max_vertex_id=max_vertex_id)


def format_cover(cover: Iterable[int]) -> str:
    """Comma-separated ids in ascending order; empty string for no vertices."""
    return ",".join(str(v) for v in sorted(set(cover)))


def write_result(path: str, cover: Iterable[int], config: OutputConfig | None = None) -> None:
    """Write the identity line and the cover line to ``path``."""
    config = config or OutputConfig()
    term = config.line_terminator
    # newline="" keeps the terminator exactly as configured
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(config.identity + term)
        f.write(format_cover(cover) + term)
