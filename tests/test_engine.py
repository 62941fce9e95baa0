"""Tests for the benchmark execution engine."""

import pandas as pd
import pytest

from vcover.algorithms.base import AlgorithmWrapper
from vcover.config import (
    BenchmarkConfig,
    ExecutionConfig,
    GeneratorConfig,
    InstanceConfig,
    SolverConfig,
)
from vcover.engine.runner import BenchmarkRunner, summarize


# ── Dummy algorithms ─────────────────────────────────────────────────

class AllVertices(AlgorithmWrapper):
    name = "all_vertices"

    def solve(self, graph, deadline):
        return {"solution": {"vertices": graph.vertices()}, "metadata": {}}


class FailingAlgorithm(AlgorithmWrapper):
    name = "fail_algo"

    def solve(self, graph, deadline):
        raise RuntimeError("intentional failure")


class NoneAlgorithm(AlgorithmWrapper):
    name = "none_algo"

    def solve(self, graph, deadline):
        return None


# ── Tests ────────────────────────────────────────────────────────────

class TestBenchmarkRunner:
    @pytest.fixture()
    def config(self):
        return BenchmarkConfig(
            solver=SolverConfig(time_budget_seconds=0.05),
            instance_config=InstanceConfig(
                generators=[
                    GeneratorConfig(type="erdos_renyi", sizes=[30], count_per_size=1, params={"p": 0.2, "seed": 1}),
                ]
            ),
            execution_config=ExecutionConfig(runs_per_config=2),
            algorithms=["heuristic"],
        )

    def test_run_produces_dataframe(self, config):
        df = BenchmarkRunner(config).run()
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2  # 1 algo × 1 instance × 2 runs

    def test_schema_columns(self, config):
        df = BenchmarkRunner(config).run()
        expected = {
            "algorithm_name", "instance_name", "instance_generator",
            "problem_size", "edge_count", "cover_size", "wall_time_seconds",
            "peak_memory_mb", "status", "run_index", "feasible", "minimal",
            "error_message",
        }
        assert expected.issubset(set(df.columns))

    def test_heuristic_rows_feasible_and_minimal(self, config):
        df = BenchmarkRunner(config).run()
        assert all(df["feasible"])
        assert all(df["minimal"])
        assert all(df["status"] == "success")

    def test_registered_algorithm(self, config):
        runner = BenchmarkRunner(config)
        runner.register_algorithm(AllVertices())
        df = runner.run()
        assert set(df["algorithm_name"]) == {"heuristic", "all_vertices"}
        rows = df[df["algorithm_name"] == "all_vertices"]
        assert all(rows["feasible"])

    def test_failing_algorithm(self, config):
        config.algorithms = []
        runner = BenchmarkRunner(config)
        runner.register_algorithm(FailingAlgorithm())
        df = runner.run()
        assert all(df["status"] == "error")
        assert all(df["error_message"].str.contains("intentional"))
        assert not any(df["feasible"])

    def test_none_result(self, config):
        config.algorithms = []
        runner = BenchmarkRunner(config)
        runner.register_algorithm(NoneAlgorithm())
        df = runner.run()
        assert all(df["error_message"] == "Algorithm returned None")

    def test_no_algorithms_raises(self, config):
        config.algorithms = []
        with pytest.raises(RuntimeError, match="No algorithms"):
            BenchmarkRunner(config).run()

    def test_generate_instances(self, config):
        instances = BenchmarkRunner(config).generate_instances()
        assert len(instances) == 1
        assert instances[0]["instance_name"] == "erdos_renyi_n30_0"
        assert instances[0]["lines"]

    def test_seed_varies_per_instance(self, config):
        config.instance_config.generators[0].count_per_size = 2
        a, b = BenchmarkRunner(config).generate_instances()
        assert a["lines"] != b["lines"]

    def test_custom_instances(self, config):
        config.instance_config.custom_instances = [{"lines": ["1,2", "2,3"], "metadata": {"generator": "custom"}}]
        runner = BenchmarkRunner(config)
        df = runner.run()
        custom = df[df["instance_name"] == "custom_0"]
        assert len(custom) == 2
        assert list(custom["cover_size"]) == [1, 1]
        assert list(custom["problem_size"]) == [3, 3]

    def test_progress_callback(self, config):
        calls = []
        BenchmarkRunner(config).run(progress_fn=lambda *a: calls.append(a))
        assert calls[-1] == ("heuristic", 2, 2)

    def test_summarize(self, config):
        summary = summarize(BenchmarkRunner(config).run())
        assert list(summary["algorithm_name"]) == ["heuristic"]
        assert summary["runs"].iloc[0] == 2
        assert summary["feasible_rate"].iloc[0] == 1.0
