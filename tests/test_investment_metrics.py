from datetime import date

import pytest

from src.core.errors import InvalidInput, UpstreamUnavailable
from src.core.investment_metrics import (
    compute_investment_return,
    supported_years,
    validate_input,
)
from src.core.investment_models import CalculationInput

TODAY = date(2026, 5, 1)


def _inp(amount=10000.0, currency="USD", year=2017) -> CalculationInput:
    return CalculationInput(amount=amount, currency=currency, year=year)


@pytest.mark.parametrize(
    "amount, historical, current",
    [
        (10000.0, 13880.0, 60000.0),
        (250.0, 46498.0, 42000.0),
        (1.0, 0.003, 95000.0),
        (5_000_000.0, 2146000.0, 2146000.0),
    ],
)
def test_current_value_matches_price_ratio(amount, historical, current):
    result = compute_investment_return(_inp(amount=amount), historical, current)

    assert result.current_value == pytest.approx(amount * current / historical)
    assert result.profit_loss == pytest.approx(result.current_value - amount)
    assert result.profit_loss_percentage == pytest.approx(
        result.profit_loss / amount * 100
    )
    assert (result.profit_loss_percentage > 0) == (result.profit_loss > 0)


def test_loss_is_negative():
    result = compute_investment_return(_inp(year=2022), 47686.0, 16625.0)
    assert result.profit_loss < 0
    assert result.profit_loss_percentage < 0
    assert not result.is_profit


def test_documented_scenario_2017_usd():
    result = compute_investment_return(_inp(), 13880.0, 60000.0)

    assert result.btc_bought == pytest.approx(10000 / 13880, rel=1e-6)
    assert result.current_value == pytest.approx(43227.6657, rel=1e-6)
    assert result.profit_loss == pytest.approx(33227.6657, rel=1e-6)
    assert result.profit_loss_percentage == pytest.approx(332.2767, rel=1e-6)


def test_result_is_deterministic():
    first = compute_investment_return(_inp(), 13880.0, 60000.0)
    second = compute_investment_return(_inp(), 13880.0, 60000.0)
    assert first == second


@pytest.mark.parametrize("bad_price", [0, -1.0, None, float("nan"), "abc"])
def test_unusable_price_is_a_fetch_failure(bad_price):
    with pytest.raises(UpstreamUnavailable):
        compute_investment_return(_inp(), bad_price, 60000.0)
    with pytest.raises(UpstreamUnavailable):
        compute_investment_return(_inp(), 13880.0, bad_price)


def test_validate_input_normalises_form_values():
    inp = validate_input(" 10,000 ", "usd", "2017", today=TODAY)
    assert inp == CalculationInput(amount=10000.0, currency="USD", year=2017)


@pytest.mark.parametrize("year", [2010, 2026])
def test_year_bounds_are_inclusive(year):
    assert validate_input(100, "EUR", year, today=TODAY).year == year


@pytest.mark.parametrize("year", [2009, 2027, 2017.5, "twenty", None, True])
def test_invalid_year_rejected(year):
    with pytest.raises(InvalidInput):
        validate_input(100, "USD", year, today=TODAY)


@pytest.mark.parametrize(
    "amount", [0, -5, float("inf"), float("nan"), "", "abc", None, True]
)
def test_invalid_amount_rejected(amount):
    with pytest.raises(InvalidInput):
        validate_input(amount, "USD", 2017, today=TODAY)


@pytest.mark.parametrize("currency", ["GBP", "", None, "XYZ"])
def test_invalid_currency_rejected(currency):
    with pytest.raises(InvalidInput):
        validate_input(100, currency, 2017, today=TODAY)


def test_supported_years_runs_to_current_year():
    years = supported_years(TODAY)
    assert years[0] == 2010
    assert years[-1] == 2026
    assert len(years) == 17
