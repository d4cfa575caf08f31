"""Progressive slab income tax with a conditional rebate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from ctcplan.config.defaults import default_policy
from ctcplan.config.schema import TaxPolicy


@dataclass(frozen=True)
class TakeHomeResult:
    """Tax and net pay for one gross CTC."""

    yearly_tax_payable: float
    monthly_tax_payable: float
    yearly_take_home: float
    monthly_take_home: float


class SlabTaxModel:
    """Slab-table income tax with a standard deduction and rebate.

    Each slab taxes only the slice of income that falls within its bounds.
    When taxable income is positive and at or below the rebate threshold,
    the computed tax is reduced by up to ``rebate_limit``. There is no
    marginal relief just above the threshold, so tax jumps there.
    """

    def __init__(self, policy: TaxPolicy | None = None) -> None:
        self._policy = policy if policy is not None else default_policy()

    @property
    def policy(self) -> TaxPolicy:
        return self._policy

    def _apply_brackets(self, taxable_income: float) -> float:
        """Compute slab tax before any rebate."""
        if taxable_income <= 0:
            return 0.0
        tax = 0.0
        for bracket in self._policy.brackets:
            if taxable_income <= bracket.lower_bound:
                break
            upper = math.inf if bracket.upper_bound is None else bracket.upper_bound
            tax += (min(taxable_income, upper) - bracket.lower_bound) * bracket.rate
        return tax

    def _apply_brackets_vectorized(
        self,
        taxable_income: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Vectorized slab computation across an array of incomes."""
        tax: NDArray[np.floating[Any]] = np.zeros_like(taxable_income, dtype=float)
        for bracket in self._policy.brackets:
            upper = np.inf if bracket.upper_bound is None else bracket.upper_bound
            in_bracket = np.minimum(taxable_income, upper) - bracket.lower_bound
            tax += np.maximum(in_bracket, 0.0) * bracket.rate
        return tax

    def compute_tax(self, taxable_income: float) -> float:
        """Compute tax on taxable income, rebate included.

        Negative income is treated as no income.
        """
        tax = self._apply_brackets(taxable_income)
        threshold = self._policy.rebate_taxable_income_threshold
        if 0 < taxable_income <= threshold:
            rebate = min(tax, self._policy.rebate_limit)
            tax = max(0.0, tax - rebate)
        return tax

    def compute_tax_vectorized(
        self,
        taxable_income: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Vectorized compute_tax.

        Args:
            taxable_income: Array of taxable incomes.

        Returns:
            Array of tax payable, same shape as the input.
        """
        taxable_income = np.asarray(taxable_income, dtype=float)
        tax = self._apply_brackets_vectorized(taxable_income)
        threshold = self._policy.rebate_taxable_income_threshold
        eligible = (taxable_income > 0) & (taxable_income <= threshold)
        rebated = np.maximum(tax - np.minimum(tax, self._policy.rebate_limit), 0.0)
        result: NDArray[np.floating[Any]] = np.where(eligible, rebated, tax)
        return result

    def compute_take_home(self, gross_ctc: float) -> TakeHomeResult:
        """Net pay after standard deduction and slab tax."""
        taxable = max(0.0, gross_ctc - self._policy.standard_deduction)
        annual_tax = self.compute_tax(taxable)
        yearly_take_home = gross_ctc - annual_tax
        return TakeHomeResult(
            yearly_tax_payable=annual_tax,
            monthly_tax_payable=annual_tax / 12.0,
            yearly_take_home=yearly_take_home,
            monthly_take_home=yearly_take_home / 12.0,
        )

    def take_home_vectorized(
        self,
        gross_ctc: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Yearly take-home across an array of gross CTCs."""
        gross_ctc = np.asarray(gross_ctc, dtype=float)
        taxable = np.maximum(gross_ctc - self._policy.standard_deduction, 0.0)
        result: NDArray[np.floating[Any]] = gross_ctc - self.compute_tax_vectorized(taxable)
        return result

    def marginal_rate(self, taxable_income: float) -> float:
        """Return the slab rate in force at given taxable income (rebate ignored)."""
        brackets = self._policy.brackets
        for bracket in brackets[:-1]:
            if taxable_income <= bracket.upper_bound:  # type: ignore[operator]
                return bracket.rate
        return brackets[-1].rate


def compute_tax(taxable_income: float, policy: TaxPolicy | None = None) -> float:
    """Tax on taxable income under ``policy`` (reference policy by default)."""
    return SlabTaxModel(policy).compute_tax(taxable_income)


def compute_take_home(gross_ctc: float, policy: TaxPolicy | None = None) -> TakeHomeResult:
    """Take-home for a gross CTC under ``policy`` (reference policy by default)."""
    return SlabTaxModel(policy).compute_take_home(gross_ctc)
