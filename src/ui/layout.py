# src/ui/layout.py
from __future__ import annotations

import streamlit as st

from src.config import settings
from src.core.calculation_engine import CalculationRequest
from src.core.formatting import success_message
from src.core.investment_metrics import supported_years
from src.core.returns_table import build_returns_table
from src.ui.results import render_result, render_returns_chart
from src.ui.style import EMPTY_STATE_TEXT, PAGE_CAPTION, PAGE_TITLE

RESULT_STATE_KEY = "calculation_result"


def _render_inputs():
    """Investment form; returns (submitted, amount_text, currency, year)."""
    st.subheader("Investment details")
    st.caption("Enter your investment amount and year to see potential returns")

    years = supported_years()
    with st.form("investment_form"):
        col_ccy, col_amount = st.columns([1, 3])
        with col_ccy:
            currency = st.selectbox(
                "Currency",
                settings.SUPPORTED_CURRENCIES,
                index=settings.SUPPORTED_CURRENCIES.index(settings.DEFAULT_CURRENCY),
            )
        with col_amount:
            amount_text = st.text_input(
                "Investment amount",
                placeholder=f"{settings.DEFAULT_INVESTMENT_AMOUNT:.0f}",
            )
        year = st.selectbox("Investment year", years, index=None, placeholder="Select year")
        submitted = st.form_submit_button("Calculate investment", width="stretch")
    return submitted, amount_text, currency, year


def render_calculator() -> None:
    st.title(PAGE_TITLE)
    st.caption(PAGE_CAPTION)

    left, right = st.columns(2)
    with left:
        submitted, amount_text, currency, year = _render_inputs()

    if submitted:
        # A new request always replaces the previous result
        st.session_state.pop(RESULT_STATE_KEY, None)
        with st.spinner("Calculating..."):
            outcome = CalculationRequest(amount_text, currency, year).run()
        if outcome.ok:
            st.session_state[RESULT_STATE_KEY] = outcome.result
            st.toast(success_message(outcome.result))
        elif outcome.error_kind == "invalid_input":
            st.error(f"Missing or invalid information: {outcome.error}")
        else:
            st.error("Failed to fetch Bitcoin prices. Please try again.")

    result = st.session_state.get(RESULT_STATE_KEY)
    with right:
        if result is None:
            st.info(EMPTY_STATE_TEXT)
        else:
            render_result(result)

    if result is not None:
        with st.expander("Compare all purchase years", expanded=False):
            df = build_returns_table(result)
            st.caption(
                "Your own year uses the price from the result above. Rows marked "
                "Approximate use the fallback price table."
            )
            render_returns_chart(df, result.currency)
            st.dataframe(df, hide_index=True, width="stretch")

    st.markdown("---")
    st.caption(settings.DISCLAIMER_TEXT)
