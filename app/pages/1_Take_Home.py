"""Take-Home page — tax and net pay for one CTC."""

from __future__ import annotations

import numpy as np
import streamlit as st

from ctcplan.config.defaults import default_take_home_request
from ctcplan.config.schema import TakeHomeRequest
from ctcplan.taxes.slabs import SlabTaxModel
from ctcplan.utils.formatting import format_inr

st.set_page_config(page_title="Take-Home — ctcplan", layout="wide")

from app.components.charts import take_home_curve
from app.components.forms import amount_input, lakhs_toggle
from app.components.theme import register_theme

register_theme()

st.title("Take-Home Calculator")

defaults = default_take_home_request()
lakhs = lakhs_toggle("take_home_lakhs")
annual_ctc = amount_input("Annual CTC", defaults.annual_ctc, "take_home_ctc", lakhs)

request = TakeHomeRequest(annual_ctc=annual_ctc)
tax_model = SlabTaxModel()
result = tax_model.compute_take_home(request.annual_ctc)

col1, col2 = st.columns(2)
with col1:
    st.metric("Yearly Take-Home", format_inr(result.yearly_take_home))
    st.metric("Yearly Tax", format_inr(result.yearly_tax_payable))
with col2:
    st.metric("Monthly Take-Home", format_inr(result.monthly_take_home))
    st.metric("Monthly Tax", format_inr(result.monthly_tax_payable))

upper = max(2.0 * request.annual_ctc, 3_000_000.0)
fig = take_home_curve(np.linspace(0.0, upper, 601), tax_model)
fig.add_vline(x=request.annual_ctc, line_dash="dot", line_color="#911EB4")
st.plotly_chart(fig, use_container_width=True)
