"""Months needed to reach a savings target, per CTC point.

Each CTC point is simulated month by month: optional monthly compounding
on the running net worth, plus a fixed SIP, plus what is left of the
monthly take-home after expenses. The outcome is one of three cases:
already met at month zero, met after ``n`` months, or unreachable.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from ctcplan.core.state import SimulationState
from ctcplan.core.sweep import ProjectionPoint, resolve_increment, sweep_range
from ctcplan.taxes.base import TaxModel
from ctcplan.taxes.slabs import SlabTaxModel

logger = logging.getLogger(__name__)

# 1000 years
MAX_SIMULATION_MONTHS: int = 12_000


class TargetStatus(str, Enum):
    ALREADY_MET = "already_met"
    MONTHS = "months"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class TimeToTarget:
    """Outcome of a time-to-target simulation.

    ``months`` is 0 for ``ALREADY_MET``, the whole number of months for
    ``MONTHS`` and None for ``UNREACHABLE``.
    """

    status: TargetStatus
    months: int | None = None

    @classmethod
    def already_met(cls) -> TimeToTarget:
        return cls(TargetStatus.ALREADY_MET, 0)

    @classmethod
    def reached(cls, months: int) -> TimeToTarget:
        return cls(TargetStatus.MONTHS, months)

    @classmethod
    def unreachable(cls) -> TimeToTarget:
        return cls(TargetStatus.UNREACHABLE, None)

    @property
    def is_reachable(self) -> bool:
        return self.status is not TargetStatus.UNREACHABLE

    def as_float(self) -> float:
        """Months as a number, ``math.inf`` when unreachable."""
        if self.months is None:
            return math.inf
        return float(self.months)


def simulate_time_to_target(
    annual_ctc: float,
    monthly_expense: float,
    target_amount: float,
    current_investments: float = 0.0,
    lumpsum_expenses: float = 0.0,
    monthly_sip_amount: float = 0.0,
    sip_cagr: float = 0.0,
    tax_model: TaxModel | None = None,
) -> TimeToTarget:
    """Simulate savings growth at one CTC until ``target_amount`` is reached.

    Args:
        annual_ctc: Gross annual CTC.
        monthly_expense: Recurring monthly spending.
        target_amount: Net worth to reach.
        current_investments: Starting invested capital.
        lumpsum_expenses: One-time outflow taken from the starting capital.
        monthly_sip_amount: Fixed monthly investment contribution.
        sip_cagr: Annual growth rate, applied monthly as ``sip_cagr / 12``.
        tax_model: Tax model for take-home; reference slab policy by default.

    Returns:
        TimeToTarget with the number of whole months, or unreachable.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()

    monthly_take_home = tax_model.compute_take_home(annual_ctc).monthly_take_home
    monthly_net_savings = monthly_take_home - monthly_expense

    if monthly_expense + monthly_sip_amount > monthly_take_home:
        logger.debug("CTC %s: expenses and SIP exceed take-home", annual_ctc)
        return TimeToTarget.unreachable()

    state = SimulationState(net_worth=current_investments - lumpsum_expenses)
    if state.net_worth >= target_amount:
        return TimeToTarget.already_met()

    if monthly_net_savings + monthly_sip_amount <= 0 and sip_cagr <= 0:
        logger.debug("CTC %s: no inflow and no growth", annual_ctc)
        return TimeToTarget.unreachable()

    monthly_rate = sip_cagr / 12.0
    while state.months_elapsed < MAX_SIMULATION_MONTHS:
        previous = state.advance(monthly_rate, monthly_sip_amount, monthly_net_savings)
        if state.net_worth >= target_amount:
            return TimeToTarget.reached(state.months_elapsed)
        if state.net_worth <= previous:
            logger.debug(
                "CTC %s: net worth stagnated at %.2f after %d months",
                annual_ctc,
                state.net_worth,
                state.months_elapsed,
            )
            return TimeToTarget.unreachable()

    logger.debug("CTC %s: target not reached within %d months", annual_ctc, MAX_SIMULATION_MONTHS)
    return TimeToTarget.unreachable()


def time_to_target_for_range(
    min_ctc: float,
    max_ctc: float,
    monthly_expense: float,
    target_amount: float,
    increment: float | None = None,
    current_investments: float = 0.0,
    lumpsum_expenses: float = 0.0,
    monthly_sip_amount: float = 0.0,
    sip_cagr: float = 0.0,
    tax_model: TaxModel | None = None,
) -> list[ProjectionPoint[TimeToTarget]]:
    """Time to target at each CTC point of a range.

    Returns an empty list for an invalid range, a negative expense or a
    non-positive target.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()
    if monthly_expense < 0 or target_amount <= 0:
        return []

    def months_to_target(ctc: float) -> TimeToTarget:
        return simulate_time_to_target(
            ctc,
            monthly_expense,
            target_amount,
            current_investments=current_investments,
            lumpsum_expenses=lumpsum_expenses,
            monthly_sip_amount=monthly_sip_amount,
            sip_cagr=sip_cagr,
            tax_model=tax_model,
        )

    return sweep_range(min_ctc, max_ctc, resolve_increment(increment), months_to_target)
