"""Savings page — what remains of take-home after expenses."""

from __future__ import annotations

import streamlit as st

from ctcplan.config.defaults import default_savings_request
from ctcplan.config.schema import SavingsRequest
from ctcplan.core.savings import compute_savings
from ctcplan.utils.formatting import format_inr

st.set_page_config(page_title="Savings — ctcplan", layout="wide")

from app.components.forms import amount_input, lakhs_toggle

st.title("Savings Calculator")

defaults = default_savings_request()
lakhs = lakhs_toggle("savings_lakhs")
annual_ctc = amount_input("Annual CTC", defaults.annual_ctc, "savings_ctc", lakhs)

expense_mode = st.radio("Expenses entered as", ["Monthly", "Annual"], horizontal=True)
if expense_mode == "Monthly":
    expense = amount_input(
        "Monthly Expense", defaults.monthly_expense or 0.0, "savings_monthly", lakhs
    )
    request = SavingsRequest(annual_ctc=annual_ctc, monthly_expense=expense)
else:
    expense = amount_input(
        "Annual Expenses", (defaults.monthly_expense or 0.0) * 12, "savings_annual", lakhs
    )
    request = SavingsRequest(annual_ctc=annual_ctc, annual_expenses=expense)

result = compute_savings(
    request.annual_ctc,
    annual_expenses=request.annual_expenses,
    monthly_expense=request.monthly_expense,
)

col1, col2 = st.columns(2)
with col1:
    st.metric("Yearly Take-Home", format_inr(result.yearly_take_home))
    st.metric("Yearly Savings", format_inr(result.yearly_savings))
with col2:
    st.metric("Monthly Take-Home", format_inr(result.monthly_take_home))
    st.metric("Monthly Savings", format_inr(result.monthly_savings))

if result.yearly_savings < 0:
    st.warning("Expenses exceed take-home pay.")
