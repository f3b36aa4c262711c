import pytest

from src.core.formatting import (
    format_btc,
    format_currency,
    format_percentage,
    success_message,
)
from src.core.investment_metrics import compute_investment_return
from src.core.investment_models import CalculationInput


@pytest.mark.parametrize(
    "amount, currency, expected",
    [
        (43227.6657, "USD", "$43,227.67"),
        (0.5, "EUR", "€0.50"),
        (3500000, "INR", "₹3,500,000.00"),
        (-1234.5, "USD", "-$1,234.50"),
    ],
)
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_btc_uses_eight_decimals():
    assert format_btc(10000 / 13880) == "0.72046110 BTC"


@pytest.mark.parametrize(
    "pct, expected", [(332.2767, "+332.28%"), (-65.1, "-65.10%"), (0.0, "0.00%")]
)
def test_format_percentage(pct, expected):
    assert format_percentage(pct) == expected


def test_success_message():
    inp = CalculationInput(amount=10000.0, currency="USD", year=2017)
    result = compute_investment_return(inp, 13880.0, 60000.0)
    assert success_message(result) == (
        "Your $10,000.00 investment would be worth $43,227.67 today!"
    )
