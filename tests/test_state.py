"""Tests for the monthly simulation state."""

from __future__ import annotations

import pytest

from ctcplan.core.state import SimulationState


class TestSimulationState:
    def test_advance_without_growth(self) -> None:
        state = SimulationState(net_worth=1_000.0)
        previous = state.advance(0.0, 100.0, 400.0)
        assert previous == 1_000.0
        assert state.net_worth == 1_500.0
        assert state.months_elapsed == 1

    def test_growth_applies_before_contributions(self) -> None:
        state = SimulationState(net_worth=1_000.0)
        state.advance(0.01, 100.0, 0.0)
        assert state.net_worth == pytest.approx(1_110.0)

    def test_negative_rate_is_ignored(self) -> None:
        state = SimulationState(net_worth=1_000.0)
        state.advance(-0.5, 0.0, 0.0)
        assert state.net_worth == 1_000.0

    def test_negative_start_grows_more_negative(self) -> None:
        """Compounding a debt with no inflow never recovers."""
        state = SimulationState(net_worth=-1_000.0)
        previous = state.advance(0.01, 0.0, 0.0)
        assert state.net_worth < previous

    def test_months_accumulate(self) -> None:
        state = SimulationState(net_worth=0.0)
        for _ in range(12):
            state.advance(0.0, 0.0, 1.0)
        assert state.months_elapsed == 12
        assert state.net_worth == 12.0
