"""
Benchmark execution engine.

Generates instances, runs cover algorithms under the configured budget,
validates every cover, and produces a pandas DataFrame of results.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from typing import Any

try:
    from tqdm import tqdm
except ImportError:
    tqdm = None

import pandas as pd

from vcover.algorithms import AlgorithmWrapper, get_algorithm
from vcover.config import BenchmarkConfig, BenchmarkResult, RunStatus
from vcover.core.deadline import Deadline
from vcover.core.graph import Graph
from vcover.generators import get_generator
from vcover.validation import validate_cover

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helper that times a single run
# ---------------------------------------------------------------------------

def _run_one(algorithm: AlgorithmWrapper, graph: Graph, budget: float) -> dict:
    """Run a single (algorithm × instance) and return raw measurements."""
    tracemalloc.start()
    t0 = time.perf_counter()
    try:
        result = algorithm.solve(graph, Deadline(budget))
        wall_time = time.perf_counter() - t0
        _, peak_mem = tracemalloc.get_traced_memory()
        return {
            "solution": result,
            "wall_time": wall_time,
            "peak_memory_mb": peak_mem / (1024 * 1024),
            "status": RunStatus.SUCCESS,
            "error": "",
        }
    except Exception as exc:  # noqa: BLE001
        wall_time = time.perf_counter() - t0
        _, peak_mem = tracemalloc.get_traced_memory()
        logger.warning("Algorithm %s failed: %s", algorithm.name, exc)
        return {
            "solution": None,
            "wall_time": wall_time,
            "peak_memory_mb": peak_mem / (1024 * 1024),
            "status": RunStatus.ERROR,
            "error": str(exc),
        }
    finally:
        tracemalloc.stop()


class BenchmarkRunner:
    """
    Runs cover algorithms over generated and custom instances.

    Usage
    -----
    >>> runner = BenchmarkRunner(config)
    >>> df = runner.run()
    """

    def __init__(self, config: BenchmarkConfig) -> None:
        self.config = config
        self.algorithms: list[AlgorithmWrapper] = [
            get_algorithm(name, config.solver) for name in config.algorithms
        ]
        self._instances: list[dict] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_algorithm(self, algorithm: AlgorithmWrapper) -> None:
        """Add an :class:`AlgorithmWrapper` instance to the benchmark."""
        self.algorithms.append(algorithm)

    def generate_instances(self) -> list[dict]:
        """
        Build all instances according to the config.

        Returns a list of dicts, each augmented with an ``instance_name``
        key for later identification.
        """
        instances: list[dict] = []

        for gen_cfg in self.config.instance_config.generators:
            GenClass = get_generator(gen_cfg.type)
            gen = GenClass()
            for size in gen_cfg.sizes:
                for i in range(gen_cfg.count_per_size):
                    params = dict(gen_cfg.params)
                    if "seed" in params and params["seed"] is not None:
                        params["seed"] = params["seed"] + i
                    inst = gen.generate(size, **params)
                    inst["instance_name"] = f"{gen_cfg.type}_n{size}_{i}"
                    instances.append(inst)

        for idx, inst in enumerate(self.config.instance_config.custom_instances):
            if "instance_name" not in inst:
                inst["instance_name"] = f"custom_{idx}"
            instances.append(inst)

        self._instances = instances
        logger.info("Generated %d instances", len(instances))
        return instances

    def run(self, progress_fn=None) -> pd.DataFrame:
        """
        Execute the full benchmark and return a results DataFrame.

        Parameters
        ----------
        progress_fn : callable, optional
            Called as ``progress_fn(algorithm_name, completed, total)``
            after every run.
        """
        if not self.algorithms:
            raise RuntimeError("No algorithms registered. Call register_algorithm() first.")

        if not self._instances:
            self.generate_instances()

        solver_cfg = self.config.solver
        runs = self.config.execution_config.runs_per_config
        graphs = [
            Graph.from_lines(inst.get("lines", []), max_vertex_id=solver_cfg.max_vertex_id)
            for inst in self._instances
        ]

        records: list[BenchmarkResult] = []
        total = len(self.algorithms) * len(self._instances) * runs
        runs_per_algo = len(self._instances) * runs

        pbar = None
        if tqdm:
            pbar = tqdm(total=total, desc="Running Benchmark", unit="run")

        for algo in self.algorithms:
            algo_completed = 0
            for inst, graph in zip(self._instances, graphs):
                meta: dict[str, Any] = inst.get("metadata", {})
                for run_idx in range(runs):
                    raw = _run_one(algo, graph, solver_cfg.time_budget_seconds)

                    cover_size = None
                    feasible = False
                    minimal = False
                    if raw["status"] == RunStatus.SUCCESS and raw["solution"] is not None:
                        vertices = raw["solution"].get("solution", {}).get("vertices", [])
                        val = validate_cover(graph, vertices)
                        cover_size = val["cover_size"]
                        feasible = val["feasible"] and val["in_bounds"]
                        minimal = val["minimal"]
                    elif raw["status"] == RunStatus.SUCCESS:
                        raw["status"] = RunStatus.ERROR
                        raw["error"] = "Algorithm returned None"

                    records.append(BenchmarkResult(
                        algorithm_name=algo.name,
                        instance_name=inst.get("instance_name", "unknown"),
                        instance_generator=meta.get("generator", "custom"),
                        problem_size=meta.get("size") or graph.max_id,
                        edge_count=len(graph),
                        cover_size=cover_size,
                        wall_time_seconds=round(raw["wall_time"], 6),
                        peak_memory_mb=round(raw["peak_memory_mb"], 3),
                        status=raw["status"],
                        run_index=run_idx,
                        feasible=feasible,
                        minimal=minimal,
                        error_message=raw["error"],
                    ))

                    algo_completed += 1
                    if pbar:
                        pbar.update(1)
                    if progress_fn:
                        progress_fn(algo.name, algo_completed, runs_per_algo)

        if pbar:
            pbar.close()

        df = pd.DataFrame([r.model_dump(mode="json") for r in records])
        logger.info("Benchmark complete: %d results collected", len(df))
        return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean cover size, wall time and feasibility rate per algorithm and generator."""
    ok = df[df["status"] == RunStatus.SUCCESS.value]
    return (
        ok.groupby(["algorithm_name", "instance_generator"])
        .agg(
            mean_cover_size=("cover_size", "mean"),
            mean_wall_time=("wall_time_seconds", "mean"),
            feasible_rate=("feasible", "mean"),
            runs=("run_index", "count"),
        )
        .reset_index()
    )
