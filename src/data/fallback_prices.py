# src/data/fallback_prices.py
from __future__ import annotations

"""
Approximate BTC price on 1 January of each year, per supported currency.

Only used when the live historical lookup has no usable figure. Values are
rough best-effort approximations, not authoritative pricing.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from src.config import settings

_APPROXIMATE_PRICES: Mapping[str, Mapping[int, float]] = {
    "USD": {
        2010: 0.003,
        2011: 0.30,
        2012: 5.27,
        2013: 13.28,
        2014: 320.19,
        2015: 314.93,
        2016: 998.33,
        2017: 13880,
        2018: 3693,
        2019: 7179,
        2020: 28949,
        2021: 46498,
        2022: 47686,
        2023: 16625,
        2024: 42280,
    },
    "EUR": {
        2010: 0.002,
        2011: 0.22,
        2012: 4.01,
        2013: 9.98,
        2014: 260.15,
        2015: 287.50,
        2016: 948.75,
        2017: 11662,
        2018: 3244,
        2019: 6441,
        2020: 23918,
        2021: 38173,
        2022: 43918,
        2023: 15281,
        2024: 38956,
    },
    "INR": {
        2010: 0.14,
        2011: 13.5,
        2012: 293,
        2013: 830,
        2014: 19700,
        2015: 20645,
        2016: 67840,
        2017: 897000,
        2018: 264000,
        2019: 508000,
        2020: 2146000,
        2021: 3457000,
        2022: 3935000,
        2023: 1375000,
        2024: 3500000,
    },
}

# Flattened, read-only (currency, year) -> price table
FALLBACK_PRICES: Mapping[Tuple[str, int], float] = MappingProxyType(
    {
        (currency, year): float(price)
        for currency, by_year in _APPROXIMATE_PRICES.items()
        for year, price in by_year.items()
    }
)


def lookup(currency: str, year: int) -> Optional[float]:
    """Return the table price for (currency, year), or None if absent."""
    key = (str(currency).upper(), year)
    return FALLBACK_PRICES.get(key)


def lookup_or_default(currency: str, year: int) -> float:
    price = lookup(currency, year)
    return price if price is not None else float(settings.DEFAULT_FALLBACK_PRICE)


def table_years(currency: str) -> list[int]:
    """Years covered by the table for a currency, ascending."""
    ccy = str(currency).upper()
    return sorted(year for (c, year) in FALLBACK_PRICES if c == ccy)
