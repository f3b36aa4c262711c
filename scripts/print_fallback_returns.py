# scripts/print_fallback_returns.py
"""Print the approximate return of an investment for every year in the fallback price table."""

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.config import settings  # noqa: E402
from src.core.errors import UpstreamUnavailable  # noqa: E402
from src.core.formatting import (  # noqa: E402
    format_btc,
    format_currency,
    format_percentage,
)
from src.core.live_data import fetch_current_price  # noqa: E402
from src.core.returns_table import build_fallback_returns  # noqa: E402


def print_returns(amount: float, currency: str, current_price: float) -> None:
    """
    Print the return of `amount` invested on 1 January of every year in the
    fallback table, valued at `current_price`. Intended for a quick sanity
    check of the table against external calculators.
    """
    print(f"\n=== {format_currency(amount, currency)} invested (approximate prices), BTC today "
          f"{format_currency(current_price, currency)} ===")
    print("-" * 90)
    print(f"{'Year':>4}  {'Price then':>16}  {'BTC bought':>22}  "
          f"{'Value today':>20}  {'P/L':>14}")
    print("-" * 90)

    for r in build_fallback_returns(amount, currency, current_price):
        print(
            f"{r.year:>4}  {format_currency(r.btc_price_at_time, currency):>16}  "
            f"{format_btc(r.btc_bought):>22}  "
            f"{format_currency(r.current_value, currency):>20}  "
            f"{format_percentage(r.profit_loss_percentage):>14}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--amount", type=float, default=settings.DEFAULT_INVESTMENT_AMOUNT)
    parser.add_argument(
        "--currency",
        default=settings.DEFAULT_CURRENCY,
        choices=settings.SUPPORTED_CURRENCIES,
    )
    parser.add_argument(
        "--current-price",
        type=float,
        default=None,
        help="Skip the live lookup and value holdings at this price.",
    )
    return parser


if __name__ == "__main__":
    args = build_parser().parse_args()

    price = args.current_price
    if price is None:
        try:
            price = fetch_current_price(args.currency)
        except UpstreamUnavailable as exc:
            sys.exit(f"Could not fetch current BTC price: {exc}")

    print_returns(args.amount, args.currency, price)
