"""Pydantic v2 models for the slab policy and calculator requests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class TaxBracket(BaseModel):
    """A contiguous slice of taxable income taxed at one marginal rate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    lower_bound: float = Field(ge=0, description="Slab start (exclusive)")
    upper_bound: float | None = Field(
        default=None, description="Slab end (inclusive); None means unbounded"
    )
    rate: float = Field(ge=0, le=1, description="Marginal rate (e.g. 0.05 for 5%)")

    @model_validator(mode="after")
    def _validate_bounds(self) -> TaxBracket:
        if self.upper_bound is not None and self.upper_bound <= self.lower_bound:
            raise ValueError(
                f"upper_bound ({self.upper_bound}) must exceed lower_bound ({self.lower_bound})"
            )
        return self


class TaxPolicy(BaseModel):
    """Slab table plus standard deduction and rebate parameters.

    The rebate threshold is assumed to be consistent with the slab table it
    was derived from; that relationship is not checked.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: tuple[TaxBracket, ...] = Field(min_length=1)
    standard_deduction: float = Field(default=0.0, ge=0)
    rebate_limit: float = Field(default=0.0, ge=0)
    rebate_taxable_income_threshold: float = Field(
        default=0.0,
        ge=0,
        description="Rebate applies when 0 < taxable income <= this amount",
    )

    @field_validator("brackets", mode="before")
    @classmethod
    def _coerce_rows(cls, value: Any) -> Any:
        # Policy files write brackets as [lower, upper, rate] rows
        if isinstance(value, (list, tuple)):
            for row in value:
                if isinstance(row, (list, tuple)) and len(row) != 3:
                    raise ValueError("bracket rows must be [lower, upper, rate]")
            return [
                {"lower_bound": row[0], "upper_bound": row[1], "rate": row[2]}
                if isinstance(row, (list, tuple))
                else row
                for row in value
            ]
        return value

    @model_validator(mode="after")
    def _validate_brackets(self) -> TaxPolicy:
        first = self.brackets[0]
        if first.lower_bound != 0:
            raise ValueError(f"first bracket must start at 0, got {first.lower_bound}")
        for prev, nxt in zip(self.brackets, self.brackets[1:]):
            if prev.upper_bound is None:
                raise ValueError("only the last bracket may be unbounded")
            if nxt.lower_bound != prev.upper_bound:
                raise ValueError(
                    f"gap or overlap between brackets at {prev.upper_bound} / {nxt.lower_bound}"
                )
            if nxt.rate <= prev.rate:
                raise ValueError("bracket rates must be strictly increasing")
        if self.brackets[-1].upper_bound is not None:
            raise ValueError("last bracket must be unbounded (upper_bound: null)")
        return self


class _Request(BaseModel):
    """Base for calculator requests; accepts snake_case or camelCase keys."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class TakeHomeRequest(_Request):
    """Gross CTC for a take-home calculation."""

    annual_ctc: float = Field(ge=0)


class SavingsRequest(_Request):
    """CTC with at most one of annual or monthly expenses."""

    annual_ctc: float = Field(ge=0)
    annual_expenses: float | None = Field(default=None, ge=0)
    monthly_expense: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _validate_expenses(self) -> SavingsRequest:
        if self.annual_expenses is not None and self.monthly_expense is not None:
            raise ValueError("provide annual_expenses or monthly_expense, not both")
        return self


class RangeSavingsRequest(_Request):
    """CTC range with a fixed monthly expense."""

    min_ctc: float = Field(ge=0)
    max_ctc: float = Field(ge=0)
    monthly_expense: float = Field(ge=0)
    increment: float | None = Field(
        default=None,
        description="Step between CTC points; absent or non-positive uses the default",
    )

    @model_validator(mode="after")
    def _validate_range(self) -> RangeSavingsRequest:
        if self.min_ctc > self.max_ctc:
            raise ValueError("min_ctc must not exceed max_ctc")
        return self


class TimeToTargetRequest(RangeSavingsRequest):
    """CTC range plus savings target and investment assumptions."""

    target_amount: float = Field(gt=0)
    current_investments: float = Field(default=0.0, ge=0)
    lumpsum_expenses: float = Field(
        default=0.0, ge=0, description="One-time outflow deducted before the first month"
    )
    monthly_sip_amount: float = Field(default=0.0, ge=0)
    sip_cagr: float = Field(
        default=0.0, description="Annual growth rate, compounded monthly as sip_cagr / 12"
    )


class CtcInversionRequest(_Request):
    """Desired yearly take-home for the required-CTC lookup."""

    desired_yearly_take_home: float = Field(gt=0)
