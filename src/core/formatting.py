# src/core/formatting.py
from __future__ import annotations

from src.config import settings
from src.core.investment_models import CalculationResult


def currency_symbol(currency: str) -> str:
    return settings.CURRENCY_SYMBOLS.get(str(currency).upper(), "")


def format_currency(amount: float, currency: str) -> str:
    """Symbol, thousands separators and two decimals, e.g. '$43,227.67'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency_symbol(currency)}{abs(amount):,.2f}"


def format_btc(amount: float) -> str:
    return f"{amount:.{settings.BTC_DISPLAY_DECIMALS}f} BTC"


def format_percentage(pct: float) -> str:
    """Two decimals with an explicit '+' on gains, e.g. '+332.28%'."""
    prefix = "+" if pct > 0 else ""
    return f"{prefix}{pct:.2f}%"


def success_message(result: CalculationResult) -> str:
    return (
        f"Your {format_currency(result.initial_investment, result.currency)} "
        f"investment would be worth "
        f"{format_currency(result.current_value, result.currency)} today!"
    )
