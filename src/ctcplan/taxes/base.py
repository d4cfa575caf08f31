"""Base protocol for tax models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ctcplan.taxes.slabs import TakeHomeResult


class TaxModel(Protocol):
    """Protocol for tax computation."""

    def compute_tax(self, taxable_income: float) -> float:
        """Compute tax on income already reduced by the standard deduction."""
        ...

    def compute_tax_vectorized(
        self,
        taxable_income: NDArray[np.floating[Any]],
    ) -> NDArray[np.floating[Any]]:
        """Vectorized tax across an array of taxable incomes."""
        ...

    def compute_take_home(self, gross_ctc: float) -> TakeHomeResult:
        """Net pay for a gross annual CTC.

        Args:
            gross_ctc: Gross annual cost to company.

        Returns:
            Yearly and monthly tax and take-home figures.
        """
        ...

    def marginal_rate(self, taxable_income: float) -> float:
        """Marginal slab rate at given taxable income."""
        ...
