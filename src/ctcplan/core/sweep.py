"""Range sweep driver: evaluate a metric at each CTC point in an interval."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ctcplan.config.defaults import DEFAULT_INCREMENT

logger = logging.getLogger(__name__)

M = TypeVar("M")


@dataclass(frozen=True)
class ProjectionPoint(Generic[M]):
    """One CTC point of a sweep and the metric evaluated there."""

    annual_ctc: float
    metric: M


def resolve_increment(increment: float | None) -> float:
    """Return ``increment``, or the default step when absent or non-positive."""
    if increment is None or increment <= 0:
        return DEFAULT_INCREMENT
    return increment


def ctc_grid(min_ctc: float, max_ctc: float, step: float) -> list[float]:
    """CTC points from ``min_ctc`` to ``max_ctc`` inclusive.

    Points advance by ``step``; the last step is clamped so that ``max_ctc``
    is always the final point. Returns an empty list when ``min_ctc < 0``,
    ``min_ctc > max_ctc`` or ``step <= 0``.
    """
    if min_ctc < 0 or min_ctc > max_ctc or not step > 0:
        logger.debug(
            "Empty sweep for range [%s, %s] with step %s", min_ctc, max_ctc, step
        )
        return []

    points: list[float] = []
    current = min_ctc
    while True:
        points.append(current)
        if current >= max_ctc:
            break
        next_ctc = current + step
        # Clamp overshoot, and a step below float resolution at this magnitude
        if next_ctc > max_ctc or next_ctc <= current:
            next_ctc = max_ctc
        current = next_ctc
    return points


def sweep_range(
    min_ctc: float,
    max_ctc: float,
    step: float,
    evaluator: Callable[[float], M],
) -> list[ProjectionPoint[M]]:
    """Evaluate ``evaluator`` at every point of ``ctc_grid(min_ctc, max_ctc, step)``.

    Args:
        min_ctc: First CTC point.
        max_ctc: Last CTC point, always evaluated.
        step: Distance between consecutive points. Callers resolve a missing
            step with ``resolve_increment`` first.
        evaluator: Maps an annual CTC to the metric recorded for it.

    Returns:
        Points in ascending CTC order; empty when the range is invalid.
    """
    return [
        ProjectionPoint(annual_ctc=ctc, metric=evaluator(ctc))
        for ctc in ctc_grid(min_ctc, max_ctc, step)
    ]
