"""Tests for cover validation."""

import pytest

from vcover.core.graph import Graph
from vcover.validation import (
    compute_objective,
    is_inclusion_minimal,
    uncovered_edges,
    validate_cover,
)


class TestValidateCover:
    def test_valid_cover(self, triangle):
        result = validate_cover(triangle, [1, 2])
        assert result["feasible"] is True
        assert result["cover_size"] == 2
        assert result["minimal"] is True
        assert result["in_bounds"] is True

    def test_invalid_cover(self, triangle):
        result = validate_cover(triangle, [1])
        assert result["feasible"] is False
        assert result["uncovered_edges"] == 1
        assert result["minimal"] is False

    def test_redundant_cover(self, triangle):
        result = validate_cover(triangle, [1, 2, 3])
        assert result["feasible"] is True
        assert result["minimal"] is False

    @pytest.mark.parametrize("cover", [[1, 2, 9], [1, 2, 400]])
    def test_out_of_bounds(self, triangle, cover):
        assert validate_cover(triangle, cover)["in_bounds"] is False

    def test_inactive_vertex_out_of_bounds(self):
        g = Graph.from_lines(["1,2", "5,5"])
        assert validate_cover(g, [1, 5])["in_bounds"] is False


def test_uncovered_edges(path5):
    assert uncovered_edges(path5, [2]) == [(3, 4), (4, 5)]


def test_inclusion_minimal(path5):
    assert is_inclusion_minimal(path5, [2, 4])
    assert not is_inclusion_minimal(path5, [2, 3, 4])


def test_objective():
    assert compute_objective([3, 1, 3]) == 2.0
