"""Plotly template and shared chart decorations for ctcplan."""

from __future__ import annotations

import plotly.graph_objects as go
import plotly.io as pio

from ctcplan.config.schema import TaxPolicy

TEMPLATE_NAME = "ctcplan"

TAKE_HOME_COLOR = "#1F77B4"
SAVINGS_COLOR = "#2CA02C"
TAX_COLOR = "#D62728"
DEFICIT_COLOR = "#FF7F0E"
MUTED_COLOR = "#9E9E9E"

_GRID = dict(gridcolor="#ECECEC", zerolinecolor="#C8C8C8", zerolinewidth=1)


def rgba(hex_color: str, alpha: float) -> str:
    """``"#RRGGBB"`` to an ``rgba()`` string."""
    r, g, b = (int(hex_color[i : i + 2], 16) for i in (1, 3, 5))
    return f"rgba({r}, {g}, {b}, {alpha})"


def rebate_cliff_ctc(policy: TaxPolicy) -> float:
    """Gross CTC at which taxable income sits exactly on the rebate threshold."""
    return policy.rebate_taxable_income_threshold + policy.standard_deduction


def mark_rebate_cliff(fig: go.Figure, policy: TaxPolicy) -> None:
    """Dashed vertical line at the last gross CTC that still gets the rebate."""
    fig.add_vline(
        x=rebate_cliff_ctc(policy),
        line_dash="dash",
        line_color=MUTED_COLOR,
        line_width=1.5,
        annotation_text="Rebate cliff",
        annotation_position="top left",
        annotation_font_color=MUTED_COLOR,
    )


def add_zero_line(fig: go.Figure) -> None:
    fig.add_hline(y=0, line_dash="dot", line_color=MUTED_COLOR, line_width=1)


def register_theme() -> None:
    """Register the ctcplan template and make it the default."""
    layout = go.Layout(
        font=dict(family="Source Sans Pro, Segoe UI, sans-serif", size=13),
        colorway=[TAKE_HOME_COLOR, TAX_COLOR, SAVINGS_COLOR, DEFICIT_COLOR],
        plot_bgcolor="white",
        paper_bgcolor="white",
        # Every chart plots annual CTC on x
        xaxis=dict(tickprefix="₹", tickformat=",.0f", **_GRID),
        yaxis=dict(**_GRID),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, x=0),
        margin=dict(l=60, r=20, t=60, b=40),
    )
    pio.templates[TEMPLATE_NAME] = go.layout.Template(layout=layout)
    pio.templates.default = TEMPLATE_NAME
