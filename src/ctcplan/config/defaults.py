"""Default configuration values for ctcplan."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ctcplan.config.schema import (
    CtcInversionRequest,
    RangeSavingsRequest,
    SavingsRequest,
    TakeHomeRequest,
    TaxPolicy,
    TimeToTargetRequest,
)
from ctcplan.io.yaml_loader import load_package_yaml, load_yaml
from ctcplan.utils.exceptions import PolicyError

logger = logging.getLogger(__name__)

# Step between CTC points when a range request omits one (5 lakh)
DEFAULT_INCREMENT: float = 500_000.0

# 1 lakh = 100,000 rupees
LAKH: float = 100_000.0

REFERENCE_POLICY_PATH = "taxes/tables/slab_policy.yaml"


def policy_from_mapping(data: Any, source: str = "<mapping>") -> TaxPolicy:
    """Validate a parsed policy document into a TaxPolicy.

    Raises:
        PolicyError: If the document is not a mapping or fails validation.
    """
    if not isinstance(data, dict):
        raise PolicyError(f"{source}: expected a mapping, got {type(data).__name__}")
    try:
        return TaxPolicy.model_validate(data)
    except ValidationError as exc:
        raise PolicyError(f"{source}: invalid tax policy\n{exc}") from exc


@lru_cache(maxsize=1)
def default_policy() -> TaxPolicy:
    """Reference slab policy, loaded once per process."""
    policy = policy_from_mapping(
        load_package_yaml(REFERENCE_POLICY_PATH), source=REFERENCE_POLICY_PATH
    )
    logger.debug("Loaded reference policy with %d brackets", len(policy.brackets))
    return policy


def load_policy_file(path: Path) -> TaxPolicy:
    """Load a custom slab policy from a YAML or JSON file."""
    try:
        data = load_yaml(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise PolicyError(f"{path}: {exc}") from exc
    logger.debug("Loading policy from %s", path)
    return policy_from_mapping(data, source=str(path))


def lakhs_to_rupees(value: float | None) -> float | None:
    """Convert an amount in lakhs to rupees, passing None through."""
    if value is None:
        return None
    return value * LAKH


def default_take_home_request() -> TakeHomeRequest:
    """12 lakh CTC."""
    return TakeHomeRequest(annual_ctc=1_200_000)


def default_savings_request() -> SavingsRequest:
    """12 lakh CTC with 40k monthly expenses."""
    return SavingsRequest(annual_ctc=1_200_000, monthly_expense=40_000)


def default_range_request() -> RangeSavingsRequest:
    """10 to 30 lakh in 5 lakh steps with 40k monthly expenses."""
    return RangeSavingsRequest(
        min_ctc=1_000_000,
        max_ctc=3_000_000,
        monthly_expense=40_000,
        increment=DEFAULT_INCREMENT,
    )


def default_time_to_target_request() -> TimeToTargetRequest:
    """Reach 50 lakh from 10-30 lakh CTC with a 10k SIP at 12%."""
    return TimeToTargetRequest(
        min_ctc=1_000_000,
        max_ctc=3_000_000,
        monthly_expense=40_000,
        target_amount=5_000_000,
        increment=DEFAULT_INCREMENT,
        current_investments=200_000,
        monthly_sip_amount=10_000,
        sip_cagr=0.12,
    )


def default_inversion_request() -> CtcInversionRequest:
    """12 lakh yearly take-home."""
    return CtcInversionRequest(desired_yearly_take_home=1_200_000)
