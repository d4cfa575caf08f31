"""Reusable form components for the Streamlit app."""

from __future__ import annotations

import streamlit as st

from ctcplan.config.defaults import LAKH


def lakhs_toggle(key: str) -> bool:
    """Render the 'Input in Lakhs?' checkbox."""
    return st.checkbox("Input in Lakhs?", value=False, key=key)


def amount_input(
    label: str,
    value: float,
    key: str,
    lakhs: bool,
    min_value: float = 0.0,
    help: str | None = None,
) -> float:
    """Render a rupee amount input and return the value in rupees.

    With ``lakhs`` set, the field shows and accepts lakhs.
    """
    scale = LAKH if lakhs else 1.0
    shown = st.number_input(
        f"{label} ({'Lakhs' if lakhs else '₹'})",
        min_value=min_value,
        value=value / scale,
        step=1.0 if lakhs else 10_000.0,
        key=f"{key}_{'lakhs' if lakhs else 'inr'}",
        help=help,
    )
    return float(shown) * scale
