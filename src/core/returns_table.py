# src/core/returns_table.py
from __future__ import annotations

from typing import List

import pandas as pd

from src.core.investment_metrics import compute_investment_return
from src.core.investment_models import (
    SOURCE_FALLBACK_DEFAULT,
    SOURCE_FALLBACK_TABLE,
    SOURCE_LIVE,
    CalculationInput,
    CalculationResult,
)
from src.data import fallback_prices

RETURNS_TABLE_COLUMNS = [
    "Year",
    "BTC price (then)",
    "Price source",
    "BTC bought",
    "Current value",
    "Profit / loss",
    "Profit / loss (%)",
]

PRICE_SOURCE_LABELS = {
    SOURCE_LIVE: "Live",
    SOURCE_FALLBACK_TABLE: "Approximate",
    SOURCE_FALLBACK_DEFAULT: "Approximate (default)",
}


def build_fallback_returns(
    amount: float,
    currency: str,
    current_price: float,
) -> List[CalculationResult]:
    """
    Apply the return calculation to every year in the fallback table.

    Offline: uses table prices only, against a single current price.
    """
    ccy = currency.upper()
    results: List[CalculationResult] = []
    for year in fallback_prices.table_years(ccy):
        inp = CalculationInput(amount=float(amount), currency=ccy, year=year)
        results.append(
            compute_investment_return(
                inp,
                historical_price=fallback_prices.lookup(ccy, year),
                current_price=current_price,
                historical_price_source=SOURCE_FALLBACK_TABLE,
            )
        )
    return results


def build_comparison_returns(result: CalculationResult) -> List[CalculationResult]:
    """
    Other purchase years alongside `result`, valued at the same current price.

    The row for `result.year` is `result` itself, so it always agrees with
    the headline figures; every other row uses the approximate table price.
    """
    rows = {
        r.year: r
        for r in build_fallback_returns(
            result.initial_investment, result.currency, result.current_btc_price
        )
    }
    rows[result.year] = result
    return [rows[year] for year in sorted(rows)]


def build_returns_table(result: CalculationResult) -> pd.DataFrame:
    results = build_comparison_returns(result)

    return pd.DataFrame(
        {
            "Year": [r.year for r in results],
            "BTC price (then)": [r.btc_price_at_time for r in results],
            "Price source": [
                PRICE_SOURCE_LABELS.get(r.historical_price_source, "Approximate")
                for r in results
            ],
            "BTC bought": [r.btc_bought for r in results],
            "Current value": [r.current_value for r in results],
            "Profit / loss": [r.profit_loss for r in results],
            "Profit / loss (%)": [r.profit_loss_percentage for r in results],
        },
        columns=RETURNS_TABLE_COLUMNS,
    )
