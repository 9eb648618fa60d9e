"""Tests for sample point generation."""

import pytest
from engines.sample_points import generate_sample_points


@pytest.mark.parametrize("m", range(1, 21))
def test_dense_for_small_budgets(m):
    assert generate_sample_points(m) == list(range(1, m + 1))


@pytest.mark.parametrize("m", [21, 22, 30, 64, 100, 255, 256, 512, 1000, 4096])
def test_sparse_points_properties(m):
    """Strictly increasing, within [1, m], ending exactly at m."""
    points = generate_sample_points(m)
    assert points[0] == 1
    assert points[-1] == m
    assert all(1 <= p <= m for p in points)
    assert all(a < b for a, b in zip(points, points[1:]))


def test_growth_rule_floors_step():
    """int(1 * 1.5) == 1, so the step never leaves 1 and every count is emitted."""
    assert generate_sample_points(64) == list(range(1, 65))
    assert generate_sample_points(21) == list(range(1, 22))


def test_large_budget_has_no_duplicates():
    points = generate_sample_points(1000)
    assert len(points) == len(set(points)) == 1000


@pytest.mark.parametrize("m", [0, -3])
def test_non_positive_budget_rejected(m):
    with pytest.raises(ValueError):
        generate_sample_points(m)
