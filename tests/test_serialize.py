"""Tests for response payloads and policy serialization."""

from __future__ import annotations

import json

import pytest

from ctcplan.analytics.inverse import invert_take_home
from ctcplan.config.defaults import default_policy
from ctcplan.core.savings import compute_savings, savings_for_range
from ctcplan.core.sweep import ProjectionPoint
from ctcplan.core.target import TimeToTarget, time_to_target_for_range
from ctcplan.io.serialize import (
    ctc_estimate_payload,
    dump_json,
    dump_points_csv,
    dump_policy,
    load_policy,
    range_savings_payload,
    savings_payload,
    take_home_payload,
    time_to_target_payload,
)
from ctcplan.taxes.slabs import compute_take_home
from ctcplan.utils.exceptions import PolicyError


class TestPayloads:
    def test_take_home_keys(self) -> None:
        payload = take_home_payload(compute_take_home(1_000_000))
        assert set(payload) == {
            "yearlyTakeHome",
            "monthlyTakeHome",
            "yearlyTaxPayable",
            "monthlyTaxPayable",
        }
        assert payload["yearlyTakeHome"] == 1_000_000

    def test_savings_keys(self) -> None:
        payload = savings_payload(compute_savings(1_200_000, monthly_expense=40_000))
        assert set(payload) == {"yearlySavings", "monthlySavings", "yearlyTakeHome", "monthlyTakeHome"}
        assert payload["monthlySavings"] == pytest.approx(60_000.0)

    def test_range_savings(self) -> None:
        payload = range_savings_payload(savings_for_range(1_000_000, 2_000_000, 20_000))
        assert [r["annualCtc"] for r in payload["results"]] == [1_000_000, 1_500_000, 2_000_000]
        assert set(payload["results"][0]) == {"annualCtc", "monthlySavings"}

    def test_time_to_target_null_when_unreachable(self) -> None:
        points = time_to_target_for_range(
            600_000, 1_200_000, 60_000, 1_000_000, increment=600_000
        )
        payload = time_to_target_payload(points)
        assert payload["results"] == [
            {"annualCtc": 600_000, "timeToTargetMonths": None},
            {"annualCtc": 1_200_000, "timeToTargetMonths": 25},
        ]
        assert json.loads(dump_json(payload))["results"][0]["timeToTargetMonths"] is None

    def test_ctc_estimate(self) -> None:
        payload = ctc_estimate_payload(invert_take_home(1_850_000))
        assert payload["requiredAnnualCtc"] == pytest.approx(2_050_000, abs=2.0)
        assert payload["message"] is None


class TestCsv:
    def test_savings_csv(self) -> None:
        points = [ProjectionPoint(1_000_000.0, 63_333.333), ProjectionPoint(1_500_000.0, -5.0)]
        lines = dump_points_csv(points, "MonthlySavings").splitlines()
        assert lines[0] == "AnnualCtc,MonthlySavings"
        assert lines[1] == "1000000.00,63333.33"
        assert lines[2] == "1500000.00,-5.00"

    def test_time_to_target_csv(self) -> None:
        points = [
            ProjectionPoint(1_000_000.0, TimeToTarget.unreachable()),
            ProjectionPoint(1_500_000.0, TimeToTarget.reached(12)),
            ProjectionPoint(2_000_000.0, TimeToTarget.already_met()),
        ]
        lines = dump_points_csv(points, "TimeToTargetMonths").splitlines()
        assert lines[1:] == ["1000000.00,", "1500000.00,12", "2000000.00,0"]

    def test_empty(self) -> None:
        assert dump_points_csv([]) == ""


class TestPolicySerialization:
    def test_round_trip(self) -> None:
        policy = default_policy()
        assert load_policy(dump_policy(policy)) == policy

    def test_invalid_policy(self) -> None:
        with pytest.raises(PolicyError, match="invalid tax policy"):
            load_policy('{"brackets": [[0, 100, 0.1]]}')

    def test_malformed_json(self) -> None:
        with pytest.raises(PolicyError):
            load_policy("{not json")

    def test_not_a_mapping(self) -> None:
        with pytest.raises(PolicyError, match="expected a mapping"):
            load_policy("[1, 2, 3]")
