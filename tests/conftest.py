"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ctcplan.config.defaults import default_policy
from ctcplan.config.schema import TaxPolicy
from ctcplan.taxes.slabs import SlabTaxModel


@pytest.fixture
def policy() -> TaxPolicy:
    """Reference slab policy."""
    return default_policy()


@pytest.fixture
def tax_model(policy: TaxPolicy) -> SlabTaxModel:
    return SlabTaxModel(policy)


@pytest.fixture
def no_rebate_model(policy: TaxPolicy) -> SlabTaxModel:
    """Reference slabs with the rebate switched off."""
    return SlabTaxModel(policy.model_copy(update={"rebate_limit": 0.0}))


@pytest.fixture
def small_policy() -> TaxPolicy:
    """Two-slab policy where tax at the threshold exceeds the rebate limit."""
    return TaxPolicy(
        brackets=[[0, 100_000, 0.0], [100_000, None, 0.10]],
        standard_deduction=0,
        rebate_limit=5_000,
        rebate_taxable_income_threshold=200_000,
    )
