# src/core/investment_metrics.py
from __future__ import annotations

import math
from datetime import date, datetime
from numbers import Integral, Real
from typing import List, Optional

from src.config import settings
from src.core.errors import InvalidInput, UpstreamUnavailable
from src.core.investment_models import (
    SOURCE_LIVE,
    CalculationInput,
    CalculationResult,
    PriceSource,
)


def supported_years(today: Optional[date] = None) -> List[int]:
    """Years a user can pick: FIRST_SUPPORTED_YEAR through the current year."""
    current_year = (today or date.today()).year
    return list(range(settings.FIRST_SUPPORTED_YEAR, current_year + 1))


def _parse_amount(amount) -> float:
    if isinstance(amount, bool):
        raise InvalidInput("Investment amount must be a number.")
    if isinstance(amount, str):
        text = amount.strip().replace(",", "")
        if not text:
            raise InvalidInput("Please enter an investment amount.")
        try:
            amount = float(text)
        except ValueError as exc:
            raise InvalidInput(f"Investment amount is not a number: {text!r}") from exc
    if amount is None or not isinstance(amount, Real):
        raise InvalidInput("Please enter an investment amount.")

    value = float(amount)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput("Investment amount must be a positive number.")
    return value


def _parse_currency(currency) -> str:
    if not isinstance(currency, str) or not currency.strip():
        raise InvalidInput("Please select a currency.")
    code = currency.strip().upper()
    if code not in settings.SUPPORTED_CURRENCIES:
        supported = ", ".join(settings.SUPPORTED_CURRENCIES)
        raise InvalidInput(f"Unsupported currency {currency!r} (use one of {supported}).")
    return code


def _parse_year(year, today: Optional[date]) -> int:
    if isinstance(year, bool) or year is None:
        raise InvalidInput("Please select an investment year.")
    if isinstance(year, str):
        try:
            year = int(year.strip())
        except ValueError as exc:
            raise InvalidInput(f"Investment year is not a whole number: {year!r}") from exc
    elif isinstance(year, float):
        if not year.is_integer():
            raise InvalidInput(f"Investment year is not a whole number: {year!r}")
        year = int(year)
    elif isinstance(year, Integral):
        year = int(year)
    else:
        raise InvalidInput(f"Investment year is not a whole number: {year!r}")

    years = supported_years(today)
    if year < years[0] or year > years[-1]:
        raise InvalidInput(
            f"Investment year must be between {years[0]} and {years[-1]}."
        )
    return year


def validate_input(
    amount,
    currency,
    year,
    today: Optional[date] = None,
) -> CalculationInput:
    """
    Normalise raw form values into a CalculationInput.

    Accepts numbers or the text a form submits. Raises InvalidInput with a
    user-facing message on the first problem found.
    """
    return CalculationInput(
        amount=_parse_amount(amount),
        currency=_parse_currency(currency),
        year=_parse_year(year, today),
    )


def _require_price(price, label: str) -> float:
    try:
        value = float(price)
    except (TypeError, ValueError) as exc:
        raise UpstreamUnavailable(f"{label} is not a number: {price!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise UpstreamUnavailable(f"{label} must be positive, got {price!r}")
    return value


def compute_investment_return(
    inp: CalculationInput,
    historical_price: float,
    current_price: float,
    historical_price_source: PriceSource = SOURCE_LIVE,
    as_of_utc: Optional[datetime] = None,
) -> CalculationResult:
    """
    Value `inp.amount` invested at `historical_price` at today's `current_price`.

    Pure: no I/O and no dependency on process state. A missing or
    non-positive price is a fetch failure and raises UpstreamUnavailable.
    """
    btc_price_at_time = _require_price(historical_price, "Historical BTC price")
    current_btc_price = _require_price(current_price, "Current BTC price")

    btc_bought = inp.amount / btc_price_at_time
    current_value = btc_bought * current_btc_price
    profit_loss = current_value - inp.amount
    profit_loss_percentage = profit_loss / inp.amount * 100

    return CalculationResult(
        initial_investment=inp.amount,
        currency=inp.currency,
        year=inp.year,
        btc_price_at_time=btc_price_at_time,
        btc_bought=btc_bought,
        current_btc_price=current_btc_price,
        current_value=current_value,
        profit_loss=profit_loss,
        profit_loss_percentage=profit_loss_percentage,
        historical_price_source=historical_price_source,
        as_of_utc=as_of_utc,
    )
