from datetime import date

import pytest

from src.core.calculation_engine import calculate
from src.core.returns_table import (
    RETURNS_TABLE_COLUMNS,
    build_fallback_returns,
    build_returns_table,
)

TODAY = date(2026, 5, 1)


def _row(df, year):
    return df[df["Year"] == year].iloc[0]


def test_own_year_row_matches_live_result(fake_api):
    fake_api["current"] = dict(payload={"bitcoin": {"usd": 60000}})
    fake_api["history"] = dict(
        payload={"market_data": {"current_price": {"usd": 998.33}}}
    )
    result = calculate(10000, "USD", 2017, today=TODAY)

    df = build_returns_table(result)

    assert list(df.columns) == RETURNS_TABLE_COLUMNS
    own = _row(df, 2017)
    assert own["BTC price (then)"] == 998.33
    assert own["Price source"] == "Live"
    assert own["Current value"] == pytest.approx(result.current_value)
    assert own["Profit / loss (%)"] == pytest.approx(result.profit_loss_percentage)

    others = df[df["Year"] != 2017]
    assert (others["Price source"] == "Approximate").all()
    assert _row(df, 2018)["BTC price (then)"] == 3693


def test_own_year_after_table_coverage_is_included(fake_api):
    fake_api["current"] = dict(payload={"bitcoin": {"eur": 50000}})
    fake_api["history"] = dict(payload={}, status_code=401)
    result = calculate(1000, "EUR", 2026, today=TODAY)

    df = build_returns_table(result)

    assert df["Year"].tolist() == list(range(2010, 2025)) + [2026]
    own = _row(df, 2026)
    assert own["BTC price (then)"] == 100
    assert own["Price source"] == "Approximate (default)"


def test_fallback_returns_use_table_prices():
    results = build_fallback_returns(500, "eur", current_price=40000.0)

    assert [r.year for r in results] == list(range(2010, 2025))
    for r in results:
        assert r.currency == "EUR"
        assert r.historical_price_source == "fallback_table"
        assert r.current_value == pytest.approx(500 * 40000.0 / r.btc_price_at_time)
