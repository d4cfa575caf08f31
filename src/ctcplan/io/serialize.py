"""Serialization of calculator results and tax policies."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from ctcplan.analytics.inverse import CtcEstimate
from ctcplan.config.defaults import policy_from_mapping
from ctcplan.config.schema import TaxPolicy
from ctcplan.core.savings import SavingsResult
from ctcplan.core.sweep import ProjectionPoint
from ctcplan.core.target import TimeToTarget
from ctcplan.taxes.slabs import TakeHomeResult
from ctcplan.utils.exceptions import PolicyError


def take_home_payload(result: TakeHomeResult) -> dict[str, float]:
    """Response body for a take-home calculation."""
    return {
        "yearlyTakeHome": result.yearly_take_home,
        "monthlyTakeHome": result.monthly_take_home,
        "yearlyTaxPayable": result.yearly_tax_payable,
        "monthlyTaxPayable": result.monthly_tax_payable,
    }


def savings_payload(result: SavingsResult) -> dict[str, float]:
    """Response body for a savings calculation."""
    return {
        "yearlySavings": result.yearly_savings,
        "monthlySavings": result.monthly_savings,
        "yearlyTakeHome": result.yearly_take_home,
        "monthlyTakeHome": result.monthly_take_home,
    }


def range_savings_payload(points: Sequence[ProjectionPoint[float]]) -> dict[str, Any]:
    """Response body for a savings range; one entry per CTC point."""
    return {
        "results": [
            {"annualCtc": p.annual_ctc, "monthlySavings": p.metric} for p in points
        ]
    }


def time_to_target_payload(points: Sequence[ProjectionPoint[TimeToTarget]]) -> dict[str, Any]:
    """Response body for a time-to-target range.

    Unreachable points carry ``timeToTargetMonths: null``.
    """
    return {
        "results": [
            {"annualCtc": p.annual_ctc, "timeToTargetMonths": p.metric.months}
            for p in points
        ]
    }


def ctc_estimate_payload(estimate: CtcEstimate) -> dict[str, Any]:
    """Response body for a required-CTC lookup."""
    return {
        "requiredAnnualCtc": estimate.required_annual_ctc,
        "message": estimate.message,
    }


def dump_json(payload: dict[str, Any]) -> str:
    """Serialize a response payload to a JSON string."""
    return json.dumps(payload, indent=2)


def dump_points_csv(
    points: Sequence[ProjectionPoint[Any]],
    metric_label: str = "Metric",
) -> str:
    """Export sweep points as CSV.

    Args:
        points: Points from a savings or time-to-target sweep.
        metric_label: Header for the metric column.

    Returns:
        CSV string with AnnualCtc and ``metric_label`` columns. Unreachable
        time-to-target points are written as an empty cell.
    """
    if not points:
        return ""

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["AnnualCtc", metric_label])
    for p in points:
        metric = p.metric
        if isinstance(metric, TimeToTarget):
            cell = "" if metric.months is None else str(metric.months)
        else:
            cell = f"{metric:.2f}"
        writer.writerow([f"{p.annual_ctc:.2f}", cell])
    return output.getvalue()


def dump_policy(policy: TaxPolicy) -> str:
    """Serialize a tax policy to a JSON string."""
    return json.dumps(policy.model_dump(), indent=2)


def load_policy(json_str: str) -> TaxPolicy:
    """Deserialize a tax policy from a JSON string.

    Raises:
        PolicyError: If the JSON does not describe a valid policy.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise PolicyError(f"<json>: {exc}") from exc
    return policy_from_mapping(data, source="<json>")
