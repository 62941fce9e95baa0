"""Tests for instance generators."""

import pytest

from vcover.core.graph import Graph
from vcover.generators import (
    GENERATOR_REGISTRY,
    BarabasiAlbertGenerator,
    ErdosRenyiGenerator,
    Grid2DGenerator,
    get_generator,
    list_generators,
)


# ── Helpers ──────────────────────────────────────────────────────────

def _assert_valid_instance(inst: dict, size: int):
    """Verify an instance parses cleanly into ids within ``1..size``."""
    assert "lines" in inst
    assert "metadata" in inst
    assert inst["metadata"]["size"] == size

    graph = Graph.from_lines(inst["lines"])
    assert len(graph) == len(inst["lines"])  # nothing malformed or duplicated
    for u, v in graph.edges:
        assert 1 <= u < v <= size


# ── Registry ─────────────────────────────────────────────────────────

def test_registry_lists_all():
    assert set(GENERATOR_REGISTRY) == {"erdos_renyi", "barabasi_albert", "grid_2d"}
    assert list_generators() == sorted(GENERATOR_REGISTRY)


def test_get_generator_unknown():
    with pytest.raises(ValueError, match="Unknown generator"):
        get_generator("nope")


# ── Erdős-Rényi ──────────────────────────────────────────────────────

class TestErdosRenyi:
    def test_basic(self):
        inst = ErdosRenyiGenerator().generate(50, p=0.3, seed=42)
        _assert_valid_instance(inst, 50)
        assert inst["metadata"]["generator"] == "erdos_renyi"
        assert inst["metadata"]["params"] == {"p": 0.3}

    def test_deterministic(self):
        gen = ErdosRenyiGenerator()
        assert gen.generate(40, p=0.3, seed=123) == gen.generate(40, p=0.3, seed=123)

    def test_full_bound(self):
        _assert_valid_instance(ErdosRenyiGenerator().generate(350, p=0.01, seed=1), 350)


# ── Barabási-Albert ──────────────────────────────────────────────────

class TestBarabasiAlbert:
    def test_basic(self):
        inst = BarabasiAlbertGenerator().generate(80, m=3, seed=42)
        _assert_valid_instance(inst, 80)
        assert inst["metadata"]["generator"] == "barabasi_albert"

    def test_small_graph(self):
        inst = BarabasiAlbertGenerator().generate(5, m=10, seed=42)  # m clamped to 4
        _assert_valid_instance(inst, 5)
        assert inst["metadata"]["params"]["m"] == 4


# ── Grid 2D ──────────────────────────────────────────────────────────

class TestGrid2D:
    def test_perfect_square(self):
        inst = Grid2DGenerator().generate(25)
        _assert_valid_instance(inst, 25)
        assert inst["metadata"]["params"] == {"rows": 5, "cols": 5}
        assert len(inst["lines"]) == 2 * 5 * 4

    def test_non_square(self):
        inst = Grid2DGenerator().generate(36)
        params = inst["metadata"]["params"]
        assert params["rows"] * params["cols"] == 36

    def test_prime_size_is_a_path(self):
        inst = Grid2DGenerator().generate(7)
        assert len(inst["lines"]) == 6
