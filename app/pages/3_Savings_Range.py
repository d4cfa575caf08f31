"""Savings Range page — monthly savings across a CTC range."""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from ctcplan.config.defaults import default_range_request
from ctcplan.config.schema import RangeSavingsRequest
from ctcplan.core.savings import savings_for_range
from ctcplan.io.serialize import dump_points_csv
from ctcplan.utils.formatting import format_inr

st.set_page_config(page_title="Savings Range — ctcplan", layout="wide")

from app.components.charts import savings_range_chart
from app.components.forms import amount_input, lakhs_toggle
from app.components.theme import register_theme

register_theme()

st.title("Savings Across a CTC Range")

defaults = default_range_request()
lakhs = lakhs_toggle("range_lakhs")

col1, col2 = st.columns(2)
with col1:
    min_ctc = amount_input("Min CTC", defaults.min_ctc, "range_min", lakhs)
    monthly_expense = amount_input(
        "Monthly Expense", defaults.monthly_expense, "range_expense", lakhs
    )
with col2:
    max_ctc = amount_input("Max CTC", defaults.max_ctc, "range_max", lakhs)
    increment = amount_input(
        "Increment",
        defaults.increment or 0.0,
        "range_increment",
        lakhs,
        help="Step between CTC points; 0 uses the default of 5 lakh",
    )

if st.button("Calculate", type="primary"):
    try:
        request = RangeSavingsRequest(
            min_ctc=min_ctc,
            max_ctc=max_ctc,
            monthly_expense=monthly_expense,
            increment=increment,
        )
    except ValidationError as exc:
        st.error(str(exc))
    else:
        st.session_state["range_points"] = savings_for_range(**request.model_dump())

if "range_points" in st.session_state:
    points = st.session_state["range_points"]
    st.plotly_chart(savings_range_chart(points), use_container_width=True)

    st.table(
        [
            {"Annual CTC": format_inr(p.annual_ctc), "Monthly Savings": format_inr(p.metric)}
            for p in points
        ]
    )
    st.download_button(
        "Download CSV",
        dump_points_csv(points, "MonthlySavings"),
        file_name="savings_range.csv",
        mime="text/csv",
    )
