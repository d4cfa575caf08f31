"""Savings for a single CTC and across a CTC range."""

from __future__ import annotations

from dataclasses import dataclass

from ctcplan.core.sweep import ProjectionPoint, resolve_increment, sweep_range
from ctcplan.taxes.base import TaxModel
from ctcplan.taxes.slabs import SlabTaxModel


@dataclass(frozen=True)
class SavingsResult:
    """Take-home and what remains of it after expenses."""

    yearly_savings: float
    monthly_savings: float
    yearly_take_home: float
    monthly_take_home: float


def compute_savings(
    annual_ctc: float,
    annual_expenses: float | None = None,
    monthly_expense: float | None = None,
    tax_model: TaxModel | None = None,
) -> SavingsResult:
    """Savings for one CTC.

    ``annual_expenses`` takes precedence; otherwise ``monthly_expense`` is
    annualized. With neither, expenses are zero.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()

    if annual_expenses is not None:
        expenses = annual_expenses
    elif monthly_expense is not None:
        expenses = monthly_expense * 12.0
    else:
        expenses = 0.0

    take_home = tax_model.compute_take_home(annual_ctc)
    yearly_savings = take_home.yearly_take_home - expenses
    return SavingsResult(
        yearly_savings=yearly_savings,
        monthly_savings=yearly_savings / 12.0,
        yearly_take_home=take_home.yearly_take_home,
        monthly_take_home=take_home.monthly_take_home,
    )


def savings_for_range(
    min_ctc: float,
    max_ctc: float,
    monthly_expense: float,
    increment: float | None = None,
    tax_model: TaxModel | None = None,
) -> list[ProjectionPoint[float]]:
    """Monthly savings at each CTC point of a range.

    Returns an empty list for an invalid range or a negative expense.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()
    if monthly_expense < 0:
        return []

    def monthly_savings(ctc: float) -> float:
        return tax_model.compute_take_home(ctc).monthly_take_home - monthly_expense

    return sweep_range(min_ctc, max_ctc, resolve_increment(increment), monthly_savings)
