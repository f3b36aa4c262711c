# src/core/investment_models.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

Currency = Literal["USD", "EUR", "INR"]

# Where btc_price_at_time came from
PriceSource = Literal["live", "fallback_table", "fallback_default"]
SOURCE_LIVE: PriceSource = "live"
SOURCE_FALLBACK_TABLE: PriceSource = "fallback_table"
SOURCE_FALLBACK_DEFAULT: PriceSource = "fallback_default"


@dataclass(frozen=True, slots=True)
class CalculationInput:
    amount: float
    currency: Currency
    year: int


@dataclass(frozen=True, slots=True)
class HistoricalPrice:
    price: float
    source: PriceSource = SOURCE_LIVE


@dataclass(frozen=True, slots=True)
class PriceQuote:
    """Both prices needed for one calculation, fetched together."""

    current_price: float
    historical: HistoricalPrice
    as_of_utc: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True, slots=True)
class CalculationResult:
    """
    Outcome of one calculation.

    btc_bought, current_value and the profit fields are derived from the
    two prices and the amount; the source / timestamp fields are metadata
    and do not enter the arithmetic.
    """

    initial_investment: float
    currency: Currency
    year: int

    btc_price_at_time: float
    btc_bought: float
    current_btc_price: float
    current_value: float

    profit_loss: float  # negative on a loss
    profit_loss_percentage: float  # 332.28 = +332.28%

    historical_price_source: PriceSource = SOURCE_LIVE
    as_of_utc: datetime | None = field(default=None, compare=False)

    @property
    def is_profit(self) -> bool:
        return self.profit_loss >= 0
