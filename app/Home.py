"""ctcplan — Take-home, savings and time-to-target calculators."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `from app.components...` imports work
# when running `streamlit run app/Home.py`.
_root = str(Path(__file__).resolve().parent.parent)
if _root not in sys.path:
    sys.path.insert(0, _root)

import streamlit as st

st.set_page_config(
    page_title="ctcplan",
    page_icon="₹",
    layout="wide",
    initial_sidebar_state="expanded",
)

from app.components.theme import register_theme
from ctcplan.config.defaults import default_policy
from ctcplan.utils.formatting import format_inr

register_theme()

st.title("ctcplan")
st.subheader("Salary, Tax and Savings Planner")

st.markdown(
    """
    Work out what a CTC offer means in take-home pay and savings, how long it
    takes to reach a savings goal, and what CTC you need for a given take-home.

    ---

    ### Calculators

    1. **Take-Home** — Yearly and monthly tax and net pay for a CTC
    2. **Savings** — What remains after annual or monthly expenses
    3. **Savings Range** — Monthly savings across a range of CTCs
    4. **Time to Target** — Months to reach a savings target across a CTC range,
       with starting investments, a one-time expense and a growing SIP
    5. **Required CTC** — The CTC needed for a desired yearly take-home

    ---

    ### Important Disclaimer

    This is an **educational tool**. It models a single slab table with a
    standard deduction and a rebate; it has no marginal relief near the
    rebate threshold, surcharges or cess. It is **not tax advice**.

    ---
    """
)

policy = default_policy()

st.subheader("Slab Table")
st.table(
    [
        {
            "From": format_inr(b.lower_bound),
            "To": "and above" if b.upper_bound is None else format_inr(b.upper_bound),
            "Rate": f"{b.rate:.0%}",
        }
        for b in policy.brackets
    ]
)
st.caption(
    f"Standard deduction {format_inr(policy.standard_deduction)}. "
    f"Rebate up to {format_inr(policy.rebate_limit)} when taxable income is at most "
    f"{format_inr(policy.rebate_taxable_income_threshold)}."
)
