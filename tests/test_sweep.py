"""Tests for the CTC range sweep driver."""

from __future__ import annotations

import math

import pytest

from ctcplan.core.sweep import ProjectionPoint, ctc_grid, resolve_increment, sweep_range


class TestCtcGrid:
    def test_even_steps(self) -> None:
        assert ctc_grid(1_000_000, 2_000_000, 500_000) == [1_000_000, 1_500_000, 2_000_000]

    def test_last_step_clamped_to_max(self) -> None:
        assert ctc_grid(1_000_000, 2_200_000, 500_000) == [
            1_000_000,
            1_500_000,
            2_000_000,
            2_200_000,
        ]

    def test_single_point(self) -> None:
        assert ctc_grid(1_000_000, 1_000_000, 500_000) == [1_000_000]

    def test_step_larger_than_range(self) -> None:
        assert ctc_grid(0, 100, 1_000) == [0, 100]

    def test_min_above_max_is_empty(self) -> None:
        assert ctc_grid(2_000_000, 1_000_000, 500_000) == []

    @pytest.mark.parametrize("step", [0, -500_000])
    def test_non_positive_step_is_empty(self, step: float) -> None:
        assert ctc_grid(1_000_000, 2_000_000, step) == []

    def test_negative_min_is_empty(self) -> None:
        assert ctc_grid(-1, 2_000_000, 500_000) == []

    @pytest.mark.parametrize(
        ("lo", "hi", "step"),
        [
            (0, 1_000_000, 300_000),
            (1_000_000, 3_000_000, 500_000),
            (250_000, 255_000, 1_000),
            (1_000_000, 1_000_001, 7),
        ],
    )
    def test_point_count_and_endpoints(self, lo: float, hi: float, step: float) -> None:
        points = ctc_grid(lo, hi, step)
        assert points[0] == lo
        assert points[-1] == hi
        assert len(points) == math.ceil((hi - lo) / step) + 1
        assert all(b > a for a, b in zip(points, points[1:]))


class TestSweepRange:
    def test_evaluates_each_point(self) -> None:
        seen: list[float] = []

        def evaluator(ctc: float) -> float:
            seen.append(ctc)
            return ctc / 2

        points = sweep_range(0, 1_000, 400, evaluator)
        assert seen == [0, 400, 800, 1_000]
        assert points == [
            ProjectionPoint(0, 0.0),
            ProjectionPoint(400, 200.0),
            ProjectionPoint(800, 400.0),
            ProjectionPoint(1_000, 500.0),
        ]

    def test_invalid_range_never_evaluates(self) -> None:
        def evaluator(ctc: float) -> float:
            raise AssertionError("should not be called")

        assert sweep_range(10, 5, 1, evaluator) == []
        assert sweep_range(5, 10, 0, evaluator) == []


class TestResolveIncrement:
    @pytest.mark.parametrize("increment", [None, 0, -1])
    def test_default(self, increment: float | None) -> None:
        assert resolve_increment(increment) == 500_000

    def test_explicit(self) -> None:
        assert resolve_increment(250_000) == 250_000
