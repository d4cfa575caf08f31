"""Required CTC page — gross CTC for a desired take-home."""

from __future__ import annotations

import streamlit as st
from pydantic import ValidationError

from ctcplan.analytics.inverse import invert_take_home
from ctcplan.config.defaults import default_inversion_request
from ctcplan.config.schema import CtcInversionRequest
from ctcplan.utils.formatting import format_inr

st.set_page_config(page_title="Required CTC — ctcplan", layout="wide")

from app.components.forms import amount_input, lakhs_toggle

st.title("Required CTC for a Desired Take-Home")

defaults = default_inversion_request()
lakhs = lakhs_toggle("inverse_lakhs")
desired = amount_input(
    "Desired Yearly Take-Home", defaults.desired_yearly_take_home, "inverse_desired", lakhs
)

if st.button("Calculate Required CTC", type="primary"):
    try:
        request = CtcInversionRequest(desired_yearly_take_home=desired)
    except ValidationError:
        st.error("Desired yearly take-home must be positive.")
    else:
        estimate = invert_take_home(request.desired_yearly_take_home)
        st.metric("Required Annual CTC", format_inr(estimate.required_annual_ctc))
        st.caption(f"Resulting yearly take-home: {format_inr(estimate.achieved_take_home)}")
        if estimate.message:
            st.warning(estimate.message)
