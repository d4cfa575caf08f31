"""Required CTC for a desired take-home via bisection search."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ctcplan.taxes.base import TaxModel
from ctcplan.taxes.slabs import SlabTaxModel

logger = logging.getLogger(__name__)

# 10 crore
CTC_SEARCH_CEILING: float = 100_000_000.0
MAX_ITERATIONS: int = 100
TOLERANCE: float = 1.0

NO_EXACT_MATCH_MESSAGE = "Could not find an exact CTC match. This is the closest estimate."
NEGATIVE_TAKE_HOME_MESSAGE = "Desired take-home cannot be negative."


@dataclass(frozen=True)
class CtcEstimate:
    """Result of a required-CTC search."""

    required_annual_ctc: float
    desired_yearly_take_home: float
    achieved_take_home: float
    iterations: int
    converged: bool
    message: str | None = None


def invert_take_home(
    desired_yearly_take_home: float,
    tax_model: TaxModel | None = None,
    ctc_low: float = 0.0,
    ctc_high: float = CTC_SEARCH_CEILING,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> CtcEstimate:
    """Find the gross CTC whose yearly take-home matches the desired amount.

    Take-home is non-decreasing in CTC, so bisection on ``[ctc_low, ctc_high]``
    narrows toward the match. The search stops once the take-home at the
    midpoint is within ``tolerance``; otherwise the last midpoint is kept as
    the closest estimate.

    Args:
        desired_yearly_take_home: Net yearly pay to achieve.
        tax_model: Tax model; reference slab policy by default.
        ctc_low: Lower bound of the CTC search.
        ctc_high: Upper bound of the CTC search.
        tolerance: Convergence tolerance in currency units.
        max_iterations: Maximum bisection iterations.

    Returns:
        CtcEstimate with the estimate and a message when it is not within
        ten times ``tolerance`` of the desired take-home.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()

    if desired_yearly_take_home < 0:
        return CtcEstimate(
            required_annual_ctc=0.0,
            desired_yearly_take_home=desired_yearly_take_home,
            achieved_take_home=tax_model.compute_take_home(0.0).yearly_take_home,
            iterations=0,
            converged=False,
            message=NEGATIVE_TAKE_HOME_MESSAGE,
        )

    low = ctc_low
    high = ctc_high
    best_guess = low
    iterations = 0
    converged = False

    for _ in range(max_iterations):
        iterations += 1
        mid = low + (high - low) / 2.0
        best_guess = mid
        take_home = tax_model.compute_take_home(mid).yearly_take_home

        if abs(take_home - desired_yearly_take_home) <= tolerance:
            converged = True
            break

        if take_home < desired_yearly_take_home:
            low = mid
        else:
            high = mid

    achieved = tax_model.compute_take_home(best_guess).yearly_take_home
    message = None
    if abs(achieved - desired_yearly_take_home) > tolerance * 10:
        logger.warning(
            "No CTC within %.2f of take-home %.2f after %d iterations; closest %.2f",
            tolerance * 10,
            desired_yearly_take_home,
            iterations,
            best_guess,
        )
        message = NO_EXACT_MATCH_MESSAGE

    return CtcEstimate(
        required_annual_ctc=best_guess,
        desired_yearly_take_home=desired_yearly_take_home,
        achieved_take_home=achieved,
        iterations=iterations,
        converged=converged,
        message=message,
    )
