# src/ui/style.py

from __future__ import annotations

"""
UI / visual style constants for the calculator page.

Keep anything purely presentational in here (colours, labels), and keep
domain constants in src/config/settings.py.
"""

from src.config import settings

COLOR_BTC = settings.BITCOIN_ORANGE_HEX
COLOR_PROFIT = settings.PROFIT_GREEN_HEX
COLOR_LOSS = settings.LOSS_RED_HEX
COLOR_NEUTRAL = settings.FIAT_NEUTRAL_BLUE_HEX

PAGE_TITLE = "Bitcoin Investment Calculator"
PAGE_CAPTION = (
    "Discover what your Bitcoin investment would be worth today. "
    "Calculate potential returns from any year since "
    f"{settings.FIRST_SUPPORTED_YEAR}."
)
EMPTY_STATE_TEXT = "Enter your investment details to see the magic happen!"

SOURCE_LABELS = {
    "live": "CoinGecko (live)",
    "fallback_table": "Approximate fallback table",
    "fallback_default": "Default fallback price",
}


def profit_color(is_profit: bool) -> str:
    return COLOR_PROFIT if is_profit else COLOR_LOSS
