"""
Utility to load benchmark instances from edge-list files.

Accepts a single file or a directory; every ``*.txt`` file in a directory
becomes one instance.  Instances carry their raw ``lines`` so the runner
applies the same parsing rules as the entry point.
"""

from __future__ import annotations

import os
from typing import Any

from vcover.utils.edge_io import read_edge_lines


def load_instances(path: str) -> list[dict[str, Any]]:
    """
    Load edge-list instances for benchmarking.

    Parameters
    ----------
    path : str
        An edge-list file, or a directory of ``*.txt`` edge-list files.

    Returns
    -------
    list[dict]
        Instance dicts with ``lines``, ``metadata`` and ``instance_name``.

    Raises
    ------
    FileNotFoundError
        If the path doesn't exist or a file in it cannot be read.
    ValueError
        If a directory holds no ``*.txt`` files.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Instance path not found: {path}")

    if os.path.isdir(path):
        files = sorted(
            os.path.join(path, name)
            for name in os.listdir(path)
            if name.endswith(".txt")
        )
        if not files:
            raise ValueError(f"No *.txt edge lists found in {path}")
    else:
        files = [path]

    instances = []
    for file_path in files:
        lines = read_edge_lines(file_path)
        if lines is None:
            raise FileNotFoundError(f"Could not read instance file: {file_path}")
        name = os.path.splitext(os.path.basename(file_path))[0]
        instances.append({
            "instance_name": name,
            "lines": lines,
            "metadata": {
                "generator": "custom",
                "params": {"path": file_path},
            },
        })
    return instances
