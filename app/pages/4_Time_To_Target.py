"""Time to Target page — months to reach a savings goal across a CTC range."""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from ctcplan.config.defaults import default_time_to_target_request
from ctcplan.config.schema import TimeToTargetRequest
from ctcplan.core.target import time_to_target_for_range
from ctcplan.io.serialize import dump_points_csv
from ctcplan.utils.formatting import format_inr, format_months

st.set_page_config(page_title="Time to Target — ctcplan", layout="wide")

from app.components.charts import time_to_target_chart
from app.components.forms import amount_input, lakhs_toggle
from app.components.theme import register_theme

register_theme()

st.title("Time to Reach Savings Target")

defaults = default_time_to_target_request()
lakhs = lakhs_toggle("target_lakhs")

st.subheader("CTC Range")
col1, col2, col3 = st.columns(3)
with col1:
    min_ctc = amount_input("Min CTC", defaults.min_ctc, "target_min", lakhs)
with col2:
    max_ctc = amount_input("Max CTC", defaults.max_ctc, "target_max", lakhs)
with col3:
    increment = amount_input(
        "Increment",
        defaults.increment or 0.0,
        "target_increment",
        lakhs,
        help="Step between CTC points; 0 uses the default of 5 lakh",
    )

st.subheader("Goal & Spending")
col1, col2, col3 = st.columns(3)
with col1:
    target_amount = amount_input("Target Amount", defaults.target_amount, "target_amount", lakhs)
with col2:
    monthly_expense = amount_input(
        "Monthly Expense", defaults.monthly_expense, "target_expense", lakhs
    )
with col3:
    lumpsum_expenses = amount_input(
        "Lumpsum Expenses",
        defaults.lumpsum_expenses,
        "target_lumpsum",
        lakhs,
        help="One-time expense taken from current investments before the first month",
    )

st.subheader("Investments")
col1, col2, col3 = st.columns(3)
with col1:
    current_investments = amount_input(
        "Current Investments", defaults.current_investments, "target_invest", lakhs
    )
with col2:
    monthly_sip_amount = amount_input(
        "Monthly SIP", defaults.monthly_sip_amount, "target_sip", lakhs
    )
with col3:
    sip_cagr_pct = st.number_input(
        "SIP CAGR (%)",
        min_value=0.0,
        max_value=50.0,
        value=defaults.sip_cagr * 100,
        step=0.5,
        help="Annual growth, compounded monthly on the whole invested amount",
    )

if st.button("Generate Chart", type="primary"):
    try:
        request = TimeToTargetRequest(
            min_ctc=min_ctc,
            max_ctc=max_ctc,
            monthly_expense=monthly_expense,
            target_amount=target_amount,
            increment=increment,
            current_investments=current_investments,
            lumpsum_expenses=lumpsum_expenses,
            monthly_sip_amount=monthly_sip_amount,
            sip_cagr=sip_cagr_pct / 100.0,
        )
    except ValidationError as exc:
        st.error(str(exc))
    else:
        st.session_state["target_points"] = time_to_target_for_range(**request.model_dump())

if "target_points" in st.session_state:
    points = st.session_state["target_points"]
    unreachable = [p for p in points if not p.metric.is_reachable]

    if len(unreachable) == len(points):
        st.warning("The target is unreachable at every CTC in this range.")
    else:
        st.plotly_chart(time_to_target_chart(points), use_container_width=True)
    if unreachable and len(unreachable) < len(points):
        st.info(
            "Unreachable at: " + ", ".join(format_inr(p.annual_ctc) for p in unreachable)
        )

    with st.expander("Detail Table"):
        st.table(
            [
                {"Annual CTC": format_inr(p.annual_ctc), "Time to Target": format_months(p.metric)}
                for p in points
            ]
        )
    st.download_button(
        "Download CSV",
        dump_points_csv(points, "TimeToTargetMonths"),
        file_name="time_to_target.csv",
        mime="text/csv",
    )
