# src/ui/results.py
from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from src.core.formatting import format_btc, format_currency, format_percentage
from src.core.investment_models import CalculationResult
from src.ui.style import COLOR_BTC, COLOR_NEUTRAL, SOURCE_LABELS, profit_color


def render_result(result: CalculationResult) -> None:
    """Metrics grid for one CalculationResult."""
    ccy = result.currency
    st.subheader("Investment results")
    st.caption(f"Your Bitcoin investment performance from {result.year}")

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Initial investment", format_currency(result.initial_investment, ccy))
        st.metric(
            f"BTC price ({result.year})",
            format_currency(result.btc_price_at_time, ccy),
            help=(
                "Price of one bitcoin on 1 January. Source: "
                f"{SOURCE_LABELS.get(result.historical_price_source, 'unknown')}."
            ),
        )
    with col2:
        st.metric("BTC purchased", format_btc(result.btc_bought))
        st.metric("BTC price (today)", format_currency(result.current_btc_price, ccy))

    st.divider()
    st.metric("Current value", format_currency(result.current_value, ccy))

    label = "Profit" if result.is_profit else "Loss"
    color = profit_color(result.is_profit)
    st.markdown(
        f"{label}: <span style='color:{color};font-weight:700'>"
        f"{format_currency(abs(result.profit_loss), ccy)} "
        f"({format_percentage(result.profit_loss_percentage)})</span>",
        unsafe_allow_html=True,
    )

    if result.historical_price_source != "live":
        st.info(
            "Live historical data was unavailable for this year, so an "
            "approximate price was used."
        )
    if result.as_of_utc is not None:
        st.caption(f"Current price as of {result.as_of_utc:%Y-%m-%d %H:%M} UTC")


def render_returns_chart(df: pd.DataFrame, currency: str) -> None:
    """Bar chart of current value by purchase year (log scale)."""
    if df.empty:
        st.info("No comparison data available.")
        return

    chart = (
        alt.Chart(df)
        .mark_bar()
        .encode(
            x=alt.X("Year:O", title="Purchase year"),
            y=alt.Y(
                "Current value:Q",
                title=f"Current value ({currency})",
                scale=alt.Scale(type="log"),
            ),
            color=alt.Color(
                "Price source:N",
                scale=alt.Scale(
                    domain=["Live", "Approximate", "Approximate (default)"],
                    range=[COLOR_BTC, COLOR_NEUTRAL, COLOR_NEUTRAL],
                ),
                legend=alt.Legend(title="Price source"),
            ),
            tooltip=[
                alt.Tooltip("Year:O"),
                alt.Tooltip("BTC price (then):Q", format=",.2f"),
                alt.Tooltip("Price source:N"),
                alt.Tooltip("Current value:Q", format=",.2f"),
                alt.Tooltip("Profit / loss (%):Q", format=",.2f"),
            ],
        )
        .properties(title="Today's value by purchase year")
    )
    st.altair_chart(chart, width="stretch")
