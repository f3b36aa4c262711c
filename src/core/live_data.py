# src/core/live_data.py
from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Any, Optional

import requests

from src.config import settings
from src.core.errors import HistoricalPriceMissing, UpstreamUnavailable
from src.core.investment_models import (
    SOURCE_FALLBACK_DEFAULT,
    SOURCE_FALLBACK_TABLE,
    SOURCE_LIVE,
    HistoricalPrice,
    PriceQuote,
)
from src.data import fallback_prices

logger = logging.getLogger(__name__)

# ---------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------


def _request_headers() -> dict[str, str]:
    headers = {"User-Agent": settings.LIVE_DATA_USER_AGENT}
    if settings.COINGECKO_API_KEY:
        headers[settings.COINGECKO_API_KEY_HEADER] = settings.COINGECKO_API_KEY
    return headers


def _get(url: str, params: dict[str, str]) -> requests.Response:
    """GET with the shared headers/timeout; transport failures -> UpstreamUnavailable."""
    try:
        return requests.get(
            url,
            params=params,
            headers=_request_headers(),
            timeout=settings.LIVE_DATA_REQUEST_TIMEOUT_S,
        )
    except requests.RequestException as exc:
        raise UpstreamUnavailable(f"Price API request failed: {exc}") from exc


def _json_body(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError as exc:
        raise UpstreamUnavailable(
            f"Price API returned a non-JSON body (HTTP {resp.status_code})"
        ) from exc


def _positive_price(value: Any) -> Optional[float]:
    """Return value as a positive finite float, or None if it isn't one."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    price = float(value)
    if not math.isfinite(price) or price <= 0:
        return None
    return price


# ---------------------------------------------------------
# Current (spot) price
# ---------------------------------------------------------


def fetch_current_price(currency: str) -> float:
    """
    Live BTC spot price in `currency` from CoinGecko /simple/price.

    Expected payload: {"bitcoin": {"<ccy>": <price>}}. There is no fallback
    here: any failure or schema mismatch raises UpstreamUnavailable.
    """
    key = currency.lower()
    logger.debug("Fetching current BTC price in %s", key)
    resp = _get(
        settings.COINGECKO_SIMPLE_PRICE_URL,
        params={"ids": settings.COINGECKO_COIN_ID, "vs_currencies": key},
    )
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise UpstreamUnavailable(f"Current price lookup failed: {exc}") from exc

    data = _json_body(resp)
    try:
        raw = data[settings.COINGECKO_COIN_ID][key]
    except (KeyError, TypeError) as exc:
        raise UpstreamUnavailable(
            f"Unexpected current price payload from CoinGecko: {data}"
        ) from exc

    price = _positive_price(raw)
    if price is None:
        raise UpstreamUnavailable(f"Current BTC price in {key} is not usable: {raw!r}")
    return price


# ---------------------------------------------------------
# Historical (1 January) price
# ---------------------------------------------------------


def fetch_live_historical_price(year: int, currency: str) -> float:
    """
    BTC price on 1 January of `year` from CoinGecko /coins/bitcoin/history.

    Expected payload: {"market_data": {"current_price": {"<ccy>": <price>}}}.

    Raises HistoricalPriceMissing when the API answers without a usable
    price (missing fields, dates before its coverage, "no data" statuses),
    and UpstreamUnavailable for transport-level failures.
    """
    key = currency.lower()
    date_str = settings.HISTORY_DATE_FMT.format(year=year)
    logger.debug("Fetching historical BTC price in %s for %s", key, date_str)
    resp = _get(
        settings.COINGECKO_HISTORY_URL,
        params={"date": date_str, "localization": "false"},
    )

    if resp.status_code in settings.HISTORICAL_NO_DATA_STATUS_CODES:
        raise HistoricalPriceMissing(
            f"No historical data for {date_str} (HTTP {resp.status_code})"
        )
    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        raise UpstreamUnavailable(f"Historical price lookup failed: {exc}") from exc

    data = _json_body(resp)
    try:
        raw = data["market_data"]["current_price"][key]
    except (KeyError, TypeError) as exc:
        raise HistoricalPriceMissing(
            f"No {key} price in history payload for {date_str}"
        ) from exc

    price = _positive_price(raw)
    if price is None:
        raise HistoricalPriceMissing(
            f"Unusable {key} price in history payload for {date_str}: {raw!r}"
        )
    return price


def resolve_historical_price(year: int, currency: str) -> HistoricalPrice:
    """
    Live lookup -> fallback table -> fixed default.

    Only "data absent" falls through; UpstreamUnavailable propagates.
    """
    try:
        return HistoricalPrice(
            price=fetch_live_historical_price(year, currency), source=SOURCE_LIVE
        )
    except HistoricalPriceMissing as exc:
        logger.warning("Using fallback price table for %s %s: %s", currency, year, exc)

    price = fallback_prices.lookup(currency, year)
    if price is not None:
        return HistoricalPrice(price=price, source=SOURCE_FALLBACK_TABLE)

    logger.warning(
        "No fallback table entry for %s %s, using default %s",
        currency,
        year,
        settings.DEFAULT_FALLBACK_PRICE,
    )
    return HistoricalPrice(
        price=float(settings.DEFAULT_FALLBACK_PRICE), source=SOURCE_FALLBACK_DEFAULT
    )


def fetch_historical_price(year: int, currency: str) -> float:
    return resolve_historical_price(year, currency).price


# ---------------------------------------------------------
# Public API
# ---------------------------------------------------------


def fetch_prices(year: int, currency: str) -> PriceQuote:
    """
    Fetch current and historical prices concurrently and wait for both.

    If either lookup fails the error propagates; callers never get a
    partial quote.
    """
    with ThreadPoolExecutor(
        max_workers=settings.PRICE_FETCH_WORKERS,
        thread_name_prefix="price-fetch",
    ) as pool:
        current_future = pool.submit(fetch_current_price, currency)
        historical_future = pool.submit(resolve_historical_price, year, currency)
        try:
            current_price = current_future.result()
            historical = historical_future.result()
        except UpstreamUnavailable:
            raise
        except Exception as exc:
            raise UpstreamUnavailable(f"Failed to fetch BTC prices: {exc}") from exc

    return PriceQuote(
        current_price=current_price,
        historical=historical,
        as_of_utc=datetime.now(timezone.utc),
    )
