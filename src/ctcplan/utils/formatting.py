"""Display formatting for rupee amounts and month counts."""

from __future__ import annotations

import math

from ctcplan.core.target import TargetStatus, TimeToTarget


def format_inr(value: float | None, decimals: int = 0) -> str:
    """Format an amount with Indian digit grouping (₹12,34,567).

    Args:
        value: Amount in rupees; None formats as zero.
        decimals: Number of decimal places.
    """
    if value is None:
        value = 0.0
    if math.isinf(value):
        return "₹∞" if value > 0 else "-₹∞"

    sign = "-" if value < 0 else ""
    whole, _, frac = f"{abs(value):.{decimals}f}".partition(".")
    if len(whole) > 3:
        head, tail = whole[:-3], whole[-3:]
        groups: list[str] = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        whole = ",".join(groups + [tail])
    text = f"{sign}₹{whole}"
    if frac:
        text += f".{frac}"
    return text


def format_months(result: TimeToTarget) -> str:
    """Human-readable time to target, e.g. ``"15 months (1y 3m)"``."""
    if result.status is TargetStatus.UNREACHABLE:
        return "Unreachable"
    if result.status is TargetStatus.ALREADY_MET:
        return "Already met"
    months = result.months or 0
    years, rem = divmod(months, 12)
    if years == 0:
        return f"{months} months"
    return f"{months} months ({years}y {rem}m)"
