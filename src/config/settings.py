# src/config/settings.py

import os

from src.config.env import APP_ENV, ENV_DEV

# --- Price API (CoinGecko public API, no key required) ---
COINGECKO_BASE_URL = os.getenv(
    "COINGECKO_BASE_URL", "https://api.coingecko.com/api/v3"
).rstrip("/")
COINGECKO_SIMPLE_PRICE_URL = f"{COINGECKO_BASE_URL}/simple/price"
COINGECKO_HISTORY_URL = f"{COINGECKO_BASE_URL}/coins/bitcoin/history"
# Optional demo key, sent as a header when present
COINGECKO_API_KEY = os.getenv("COINGECKO_API_KEY", "")
COINGECKO_API_KEY_HEADER = "x-cg-demo-api-key"
COINGECKO_COIN_ID = "bitcoin"
# CoinGecko expects dd-mm-yyyy for /coins/{id}/history
HISTORY_DATE_FMT = "01-01-{year}"

# Statuses CoinGecko uses for "no data for that date" on the public tier
# (history outside the free coverage window). Treated as data absent.
HISTORICAL_NO_DATA_STATUS_CODES = (401, 404, 422)

# Requests config
LIVE_DATA_REQUEST_TIMEOUT_S = 10
LIVE_DATA_USER_AGENT = "BtcWhatIfCalculator/0.1 (contact: you@example.com)"
PRICE_FETCH_WORKERS = 2

# --- Calculator inputs ---
SUPPORTED_CURRENCIES = ("USD", "EUR", "INR")
DEFAULT_CURRENCY = "USD"
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "INR": "₹",
}
FIRST_SUPPORTED_YEAR = 2010
DEFAULT_INVESTMENT_AMOUNT = 10000.0

# --- Fallback static assumptions (used when historical data is missing) ---
DEFAULT_FALLBACK_PRICE = 100.0

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == ENV_DEV else "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# --- Display ---
BTC_DISPLAY_DECIMALS = 8
BITCOIN_ORANGE_HEX = "#F7931A"
PROFIT_GREEN_HEX = "#2ca02c"
LOSS_RED_HEX = "#d62728"
FIAT_NEUTRAL_BLUE_HEX = "#1f77b4"

DISCLAIMER_TEXT = (
    "**Disclaimer:** This calculator uses historical data and current prices "
    "for educational purposes. Past performance does not guarantee future "
    "results. Always do your own research before investing."
)
