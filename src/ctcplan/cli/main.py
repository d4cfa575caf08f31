"""CLI entry point for ctcplan."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

import click
from pydantic import BaseModel, ValidationError

from ctcplan.analytics.inverse import invert_take_home
from ctcplan.config.defaults import default_policy, lakhs_to_rupees, load_policy_file
from ctcplan.config.schema import (
    CtcInversionRequest,
    RangeSavingsRequest,
    SavingsRequest,
    TakeHomeRequest,
    TimeToTargetRequest,
)
from ctcplan.core.savings import compute_savings, savings_for_range
from ctcplan.core.target import time_to_target_for_range
from ctcplan.io.serialize import (
    ctc_estimate_payload,
    dump_json,
    dump_points_csv,
    range_savings_payload,
    savings_payload,
    take_home_payload,
    time_to_target_payload,
)
from ctcplan.taxes.slabs import SlabTaxModel
from ctcplan.utils.exceptions import PolicyError
from ctcplan.utils.formatting import format_inr, format_months

_R = TypeVar("_R", bound=BaseModel)

# Rates, not amounts
_UNSCALED = frozenset({"sip_cagr"})

_output_option = click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write results JSON.",
)
_lakhs_option = click.option(
    "--lakhs",
    is_flag=True,
    default=False,
    help="Interpret monetary amounts in lakhs (1 lakh = 100,000).",
)


def _build_request(model: type[_R], lakhs: bool, **values: Any) -> _R:
    """Validate CLI values through a request model.

    Monetary values are scaled by one lakh when ``lakhs`` is set; keys in
    ``_UNSCALED`` are left alone.
    """
    if lakhs:
        values = {
            k: v if k in _UNSCALED else lakhs_to_rupees(v)
            for k, v in values.items()
        }
    try:
        return model.model_validate(values)
    except ValidationError as exc:
        raise click.UsageError(str(exc)) from exc


def _write_output(output_path: Path | None, text: str) -> None:
    if output_path is not None:
        output_path.write_text(text)
        click.echo(f"\nResults written to {output_path}")


@click.group()
@click.version_option(package_name="ctcplan")
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML or JSON slab policy. Uses the reference policy if not provided.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, policy_path: Path | None, verbose: bool) -> None:
    """ctcplan — take-home, savings and time-to-target calculator."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    try:
        policy = load_policy_file(policy_path) if policy_path is not None else default_policy()
    except PolicyError as exc:
        raise click.BadParameter(str(exc), param_hint="--policy") from exc
    ctx.obj = SlabTaxModel(policy)


@cli.command("take-home")
@click.argument("annual_ctc", type=float)
@_lakhs_option
@_output_option
@click.pass_obj
def take_home(
    tax_model: SlabTaxModel,
    annual_ctc: float,
    lakhs: bool,
    output_path: Path | None,
) -> None:
    """Tax and take-home pay for ANNUAL_CTC."""
    request = _build_request(TakeHomeRequest, lakhs, annual_ctc=annual_ctc)
    result = tax_model.compute_take_home(request.annual_ctc)

    click.echo(f"Annual CTC:         {format_inr(request.annual_ctc)}")
    click.echo(f"Yearly tax:         {format_inr(result.yearly_tax_payable)}")
    click.echo(f"Monthly tax:        {format_inr(result.monthly_tax_payable)}")
    click.echo(f"Yearly take-home:   {format_inr(result.yearly_take_home)}")
    click.echo(f"Monthly take-home:  {format_inr(result.monthly_take_home)}")

    _write_output(output_path, dump_json(take_home_payload(result)))


@cli.command()
@click.argument("annual_ctc", type=float)
@click.option("--annual-expenses", type=float, default=None, help="Yearly expenses.")
@click.option("--monthly-expense", type=float, default=None, help="Monthly expenses.")
@_lakhs_option
@_output_option
@click.pass_obj
def savings(
    tax_model: SlabTaxModel,
    annual_ctc: float,
    annual_expenses: float | None,
    monthly_expense: float | None,
    lakhs: bool,
    output_path: Path | None,
) -> None:
    """Savings left from ANNUAL_CTC after expenses."""
    request = _build_request(
        SavingsRequest,
        lakhs,
        annual_ctc=annual_ctc,
        annual_expenses=annual_expenses,
        monthly_expense=monthly_expense,
    )
    result = compute_savings(
        request.annual_ctc,
        annual_expenses=request.annual_expenses,
        monthly_expense=request.monthly_expense,
        tax_model=tax_model,
    )

    click.echo(f"Yearly take-home:   {format_inr(result.yearly_take_home)}")
    click.echo(f"Monthly take-home:  {format_inr(result.monthly_take_home)}")
    click.echo(f"Yearly savings:     {format_inr(result.yearly_savings)}")
    click.echo(f"Monthly savings:    {format_inr(result.monthly_savings)}")

    _write_output(output_path, dump_json(savings_payload(result)))


@cli.command("savings-range")
@click.option("--min-ctc", type=float, required=True, help="First CTC in the range.")
@click.option("--max-ctc", type=float, required=True, help="Last CTC in the range.")
@click.option("--monthly-expense", type=float, required=True, help="Monthly expenses.")
@click.option("--increment", type=float, default=None, help="Step between CTC points.")
@click.option("--csv", "as_csv", is_flag=True, default=False, help="Write CSV instead of JSON.")
@_lakhs_option
@_output_option
@click.pass_obj
def savings_range(
    tax_model: SlabTaxModel,
    min_ctc: float,
    max_ctc: float,
    monthly_expense: float,
    increment: float | None,
    as_csv: bool,
    lakhs: bool,
    output_path: Path | None,
) -> None:
    """Monthly savings at each CTC from --min-ctc to --max-ctc."""
    request = _build_request(
        RangeSavingsRequest,
        lakhs,
        min_ctc=min_ctc,
        max_ctc=max_ctc,
        monthly_expense=monthly_expense,
        increment=increment,
    )
    points = savings_for_range(**request.model_dump(), tax_model=tax_model)

    click.echo(f"{'Annual CTC':>16}  {'Monthly savings':>16}")
    for p in points:
        click.echo(f"{format_inr(p.annual_ctc):>16}  {format_inr(p.metric):>16}")

    if as_csv:
        _write_output(output_path, dump_points_csv(points, "MonthlySavings"))
    else:
        _write_output(output_path, dump_json(range_savings_payload(points)))


@cli.command("time-to-target")
@click.option("--min-ctc", type=float, required=True, help="First CTC in the range.")
@click.option("--max-ctc", type=float, required=True, help="Last CTC in the range.")
@click.option("--monthly-expense", type=float, required=True, help="Monthly expenses.")
@click.option("--target", "target_amount", type=float, required=True, help="Savings target.")
@click.option("--increment", type=float, default=None, help="Step between CTC points.")
@click.option("--current-investments", type=float, default=0.0, help="Starting investments.")
@click.option("--lumpsum-expenses", type=float, default=0.0, help="One-time expense up front.")
@click.option("--sip", "monthly_sip_amount", type=float, default=0.0, help="Monthly SIP amount.")
@click.option("--sip-cagr", type=float, default=0.0, help="Annual SIP growth, e.g. 0.12.")
@click.option("--csv", "as_csv", is_flag=True, default=False, help="Write CSV instead of JSON.")
@_lakhs_option
@_output_option
@click.pass_obj
def time_to_target(
    tax_model: SlabTaxModel,
    min_ctc: float,
    max_ctc: float,
    monthly_expense: float,
    target_amount: float,
    increment: float | None,
    current_investments: float,
    lumpsum_expenses: float,
    monthly_sip_amount: float,
    sip_cagr: float,
    as_csv: bool,
    lakhs: bool,
    output_path: Path | None,
) -> None:
    """Months to reach --target at each CTC from --min-ctc to --max-ctc."""
    request = _build_request(
        TimeToTargetRequest,
        lakhs,
        min_ctc=min_ctc,
        max_ctc=max_ctc,
        monthly_expense=monthly_expense,
        target_amount=target_amount,
        increment=increment,
        current_investments=current_investments,
        lumpsum_expenses=lumpsum_expenses,
        monthly_sip_amount=monthly_sip_amount,
        sip_cagr=sip_cagr,
    )
    points = time_to_target_for_range(**request.model_dump(), tax_model=tax_model)

    click.echo(f"Target: {format_inr(request.target_amount)}")
    click.echo(f"{'Annual CTC':>16}  Time to target")
    for p in points:
        click.echo(f"{format_inr(p.annual_ctc):>16}  {format_months(p.metric)}")

    if as_csv:
        _write_output(output_path, dump_points_csv(points, "TimeToTargetMonths"))
    else:
        _write_output(output_path, dump_json(time_to_target_payload(points)))


@cli.command("required-ctc")
@click.argument("desired_yearly_take_home", type=float)
@_lakhs_option
@_output_option
@click.pass_obj
def required_ctc(
    tax_model: SlabTaxModel,
    desired_yearly_take_home: float,
    lakhs: bool,
    output_path: Path | None,
) -> None:
    """Gross CTC needed for DESIRED_YEARLY_TAKE_HOME."""
    request = _build_request(
        CtcInversionRequest,
        lakhs,
        desired_yearly_take_home=desired_yearly_take_home,
    )
    estimate = invert_take_home(request.desired_yearly_take_home, tax_model=tax_model)

    click.echo(f"Required annual CTC: {format_inr(estimate.required_annual_ctc)}")
    click.echo(f"Resulting take-home: {format_inr(estimate.achieved_take_home)}")
    if estimate.message:
        click.echo(estimate.message)

    _write_output(output_path, dump_json(ctc_estimate_payload(estimate)))


if __name__ == "__main__":
    cli()
