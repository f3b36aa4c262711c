# src/core/calculation_engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Callable, List, Optional

from src.core.errors import CalculatorError, InvalidInput, UpstreamUnavailable
from src.core.investment_metrics import compute_investment_return, validate_input
from src.core.investment_models import CalculationResult, PriceQuote
from src.core.live_data import fetch_prices as fetch_live_prices

logger = logging.getLogger(__name__)

PriceFetcher = Callable[[int, str], PriceQuote]


class RequestState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    COMPUTING = "computing"
    DONE = "done"
    FAILED = "failed"


TERMINAL_STATES = (RequestState.DONE, RequestState.FAILED)


def calculate(
    amount,
    currency,
    year,
    *,
    fetch_prices: PriceFetcher = fetch_live_prices,
    today: Optional[date] = None,
) -> CalculationResult:
    """
    Validate inputs, fetch both prices, and compute the return.

    Raises InvalidInput before any network call when inputs are bad, and
    UpstreamUnavailable when a price cannot be obtained.
    """
    inp = validate_input(amount, currency, year, today=today)
    quote = fetch_prices(inp.year, inp.currency)
    return compute_investment_return(
        inp,
        historical_price=quote.historical.price,
        current_price=quote.current_price,
        historical_price_source=quote.historical.source,
        as_of_utc=quote.as_of_utc,
    )


@dataclass(frozen=True)
class CalculationOutcome:
    """Tagged success/failure handed to the presentation layer."""

    result: Optional[CalculationResult] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None  # "invalid_input" | "upstream_unavailable"

    @property
    def ok(self) -> bool:
        return self.result is not None


@dataclass
class CalculationRequest:
    """
    One run of the request lifecycle:

    IDLE -> VALIDATING -> FETCHING -> COMPUTING -> DONE
    VALIDATING / FETCHING -> FAILED

    Instances are single-use; a new user action builds a new request.
    """

    amount: object
    currency: object
    year: object
    fetch_prices: PriceFetcher = fetch_live_prices
    today: Optional[date] = None

    state: RequestState = field(default=RequestState.IDLE, init=False)
    history: List[RequestState] = field(default_factory=list, init=False)
    result: Optional[CalculationResult] = field(default=None, init=False)
    error: Optional[CalculatorError] = field(default=None, init=False)

    def _enter(self, state: RequestState) -> None:
        self.state = state
        self.history.append(state)

    def run(self) -> CalculationOutcome:
        if self.state is not RequestState.IDLE:
            raise RuntimeError(f"Request already run (state={self.state.value})")

        self._enter(RequestState.VALIDATING)
        try:
            inp = validate_input(self.amount, self.currency, self.year, today=self.today)
        except InvalidInput as exc:
            return self._fail(exc, "invalid_input")

        self._enter(RequestState.FETCHING)
        try:
            quote = self.fetch_prices(inp.year, inp.currency)
        except UpstreamUnavailable as exc:
            return self._fail(exc, "upstream_unavailable")

        self._enter(RequestState.COMPUTING)
        try:
            self.result = compute_investment_return(
                inp,
                historical_price=quote.historical.price,
                current_price=quote.current_price,
                historical_price_source=quote.historical.source,
                as_of_utc=quote.as_of_utc,
            )
        except UpstreamUnavailable as exc:
            # a quote with an unusable price is still a fetch failure
            return self._fail(exc, "upstream_unavailable")

        self._enter(RequestState.DONE)
        logger.info(
            "Calculated %s %s from %s: current value %.2f",
            self.result.currency,
            self.result.initial_investment,
            self.result.year,
            self.result.current_value,
        )
        return CalculationOutcome(result=self.result)

    def _fail(self, exc: CalculatorError, kind: str) -> CalculationOutcome:
        self.error = exc
        self._enter(RequestState.FAILED)
        if kind == "upstream_unavailable":
            logger.warning("Calculation failed, price API unavailable: %s", exc)
        else:
            logger.info("Calculation rejected: %s", exc)
        return CalculationOutcome(error=str(exc), error_kind=kind)
