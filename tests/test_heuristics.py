"""Tests for heuristic estimators."""

import math

import pytest

from gridsearch import (
    HEURISTICS,
    CoordinateSum,
    EuclideanDistance,
    Heuristic,
    ManhattanDistance,
    ZeroHeuristic,
    build_heuristic,
)


def test_manhattan_distance():
    heuristic = ManhattanDistance((2, 3))

    assert heuristic.estimate((0, 0)) == 5.0
    assert heuristic.estimate((2, 3)) == 0.0
    assert heuristic.estimate((4, 1)) == 4.0
    # __call__ delegates to estimate
    assert heuristic((5, 5)) == 5.0


def test_zero_heuristic_is_always_zero():
    heuristic = ZeroHeuristic((9, 9))

    assert heuristic.estimate((0, 0)) == 0.0
    assert heuristic.estimate((-4, 12)) == 0.0


def test_euclidean_distance():
    heuristic = EuclideanDistance((3, 4))

    assert heuristic.estimate((0, 0)) == 5.0
    assert math.isclose(heuristic.estimate((2, 3)), math.sqrt(2))


def test_coordinate_sum_reproduces_legacy_formula():
    # Legacy parity heuristic: x + goal_x + y + goal_y, not a distance.
    heuristic = CoordinateSum((2, 2))

    assert heuristic.estimate((0, 0)) == 4.0
    assert heuristic.estimate((2, 2)) == 8.0  # nonzero even at the goal
    assert heuristic.estimate((1, 3)) == 8.0


def test_coordinate_sum_clamps_negative_sums():
    heuristic = CoordinateSum((0, 0))

    assert heuristic.estimate((-3, -2)) == 0.0


def test_build_heuristic_by_name():
    for name, factory in HEURISTICS.items():
        heuristic = build_heuristic(name, (1, 2))
        assert isinstance(heuristic, factory)
        assert heuristic.goal == (1, 2)


def test_build_heuristic_unknown_name():
    with pytest.raises(ValueError, match="Unknown heuristic 'diagonal'"):
        build_heuristic("diagonal", (0, 0))


def test_heuristic_is_abstract():
    with pytest.raises(TypeError):
        Heuristic((0, 0))


def test_repr_names_goal():
    assert repr(ManhattanDistance((3, 1))) == "ManhattanDistance(goal=(3, 1))"
