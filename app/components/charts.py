"""Chart components for the Streamlit app."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
import plotly.graph_objects as go
from numpy.typing import NDArray

from app.components.theme import (
    DEFICIT_COLOR,
    SAVINGS_COLOR,
    TAKE_HOME_COLOR,
    TAX_COLOR,
    add_zero_line,
    mark_rebate_cliff,
    rebate_cliff_ctc,
    rgba,
)
from ctcplan.core.sweep import ProjectionPoint
from ctcplan.core.target import TimeToTarget
from ctcplan.taxes.slabs import SlabTaxModel


def take_home_curve(
    ctc_values: NDArray[np.floating[Any]],
    tax_model: SlabTaxModel | None = None,
) -> go.Figure:
    """Yearly take-home and tax across a grid of gross CTCs.

    The rebate cliff is marked when it falls inside the grid.
    """
    if tax_model is None:
        tax_model = SlabTaxModel()
    ctc_values = np.asarray(ctc_values, dtype=float)
    take_home = tax_model.take_home_vectorized(ctc_values)
    tax = ctc_values - take_home

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=ctc_values,
            y=take_home,
            mode="lines",
            line=dict(color=TAKE_HOME_COLOR, width=2),
            fill="tozeroy",
            fillcolor=rgba(TAKE_HOME_COLOR, 0.08),
            name="Yearly Take-Home",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=ctc_values,
            y=tax,
            mode="lines",
            line=dict(color=TAX_COLOR, width=2),
            name="Yearly Tax",
        )
    )

    cliff = rebate_cliff_ctc(tax_model.policy)
    if len(ctc_values) and ctc_values.min() <= cliff <= ctc_values.max():
        mark_rebate_cliff(fig, tax_model.policy)

    fig.update_layout(
        title="Take-Home and Tax vs Annual CTC",
        xaxis_title="Annual CTC",
        yaxis_title="Amount (₹)",
        yaxis_tickprefix="₹",
        yaxis_tickformat=",.0f",
        height=450,
    )
    return fig


def savings_range_chart(points: Sequence[ProjectionPoint[float]]) -> go.Figure:
    """Bar chart of monthly savings per CTC; deficits in a contrasting color."""
    ctcs = [p.annual_ctc for p in points]
    savings = [p.metric for p in points]
    colors = [SAVINGS_COLOR if s >= 0 else DEFICIT_COLOR for s in savings]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=ctcs,
            y=savings,
            marker_color=colors,
            name="Monthly Savings",
        )
    )
    add_zero_line(fig)

    fig.update_layout(
        title="Monthly Savings vs Annual CTC",
        xaxis_title="Annual CTC",
        yaxis_title="Monthly Savings (₹)",
        yaxis_tickprefix="₹",
        yaxis_tickformat=",.0f",
        height=450,
    )
    return fig


def time_to_target_chart(points: Sequence[ProjectionPoint[TimeToTarget]]) -> go.Figure:
    """Months to reach the target per CTC.

    Unreachable points are left out of the line.
    """
    reachable = [p for p in points if p.metric.is_reachable]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[p.annual_ctc for p in reachable],
            y=[p.metric.months for p in reachable],
            mode="lines+markers",
            line=dict(color=TAKE_HOME_COLOR, width=2),
            name="Months to Target",
        )
    )

    fig.update_layout(
        title="Time to Reach Savings Target vs Annual CTC",
        xaxis_title="Annual CTC",
        yaxis_title="Months to Reach Target",
        yaxis_rangemode="tozero",
        height=450,
    )
    return fig
