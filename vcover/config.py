"""Pydantic models defining data contracts for vcover."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Heuristic(str, Enum):
    MATCHING = "matching"
    GREEDY_DEGREE = "greedy_degree"


class RunStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Solver configuration
# ---------------------------------------------------------------------------

class SolverConfig(BaseModel):
    """Time budget and vertex-id bound for a single solve."""
    model_config = ConfigDict(frozen=True)

    time_budget_seconds: float = Field(default=2.0, gt=0)
    max_vertex_id: int = Field(default=350, ge=1)
    construction_fraction: float = Field(
        default=0.6, gt=0, le=1,
        description="Share of the budget each constructive heuristic may use",
    )
    local_search_fraction: float = Field(
        default=0.95, gt=0, le=1,
        description="Share of the budget after which local search stops",
    )

    @model_validator(mode="after")
    def _check_fractions(self) -> "SolverConfig":
        if self.local_search_fraction < self.construction_fraction:
            raise ValueError(
                "local_search_fraction must not be smaller than construction_fraction"
            )
        return self


class OutputConfig(BaseModel):
    """Where the entry point reads edges from and how it writes the result."""
    identity: str = Field(default="vcover", description="Opaque first line of the result file")
    line_terminator: str = "\r\n"
    input_path: str = "input.txt"
    output_path: str = "output.txt"


class SolveReport(BaseModel):
    """Outcome of one orchestrated solve."""
    cover: list[int] = Field(default_factory=list)
    chosen_heuristic: Heuristic | None = None
    matching_size: int = 0
    greedy_size: int = 0
    final_size: int = 0
    elapsed_seconds: float = 0.0


# ---------------------------------------------------------------------------
# Benchmark configuration models
# ---------------------------------------------------------------------------

class GeneratorConfig(BaseModel):
    """Configuration for a single instance generator."""
    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., description="Generator type, e.g. 'erdos_renyi'")
    params: dict[str, Any] = Field(
        default_factory=dict,
        description="Extra generator params (e.g. {'p': 0.3})",
        validation_alias=AliasChoices("params", "parameters"),
    )
    sizes: list[int] = Field(..., description="Vertex counts to generate")
    count_per_size: int = Field(default=3, ge=1, description="Instances per size")


class InstanceConfig(BaseModel):
    """Specifies which instances to generate."""
    generators: list[GeneratorConfig] = Field(default_factory=list)
    custom_instances: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Pre-built instance dicts carrying raw edge 'lines'",
    )


class ExecutionConfig(BaseModel):
    """Repetition settings for benchmark runs."""
    runs_per_config: int = Field(default=3, ge=1)


class BenchmarkConfig(BaseModel):
    """Top-level configuration for a benchmark session."""
    solver: SolverConfig = Field(default_factory=SolverConfig)
    instance_config: InstanceConfig
    execution_config: ExecutionConfig = Field(default_factory=ExecutionConfig)
    algorithms: list[str] = Field(
        default_factory=lambda: ["heuristic", "networkx_approx"],
    )

    @model_validator(mode="after")
    def _check_sizes(self) -> "BenchmarkConfig":
        bound = self.solver.max_vertex_id
        for gen in self.instance_config.generators:
            too_big = [s for s in gen.sizes if s > bound or s < 1]
            if too_big:
                raise ValueError(
                    f"Generator '{gen.type}' sizes {too_big} fall outside [1, {bound}]"
                )
        return self


# ---------------------------------------------------------------------------
# Result record
# ---------------------------------------------------------------------------

class BenchmarkResult(BaseModel):
    """A single benchmark measurement (one algorithm × one instance × one run)."""
    algorithm_name: str
    instance_name: str
    instance_generator: str
    problem_size: int
    edge_count: int = 0
    cover_size: int | None = None
    wall_time_seconds: float = 0.0
    peak_memory_mb: float = 0.0
    status: RunStatus = RunStatus.SUCCESS
    run_index: int = 0
    feasible: bool = True
    minimal: bool = False
    error_message: str = ""
