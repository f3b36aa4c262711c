# src/core/errors.py


class CalculatorError(Exception):
    """Base class for failures scoped to a single calculation request."""


class InvalidInput(CalculatorError, ValueError):
    """Raised when amount, currency or year fail validation."""


class UpstreamUnavailable(CalculatorError, RuntimeError):
    """Raised when a price cannot be obtained from the price API."""


class HistoricalPriceMissing(LookupError):
    """
    The price API answered, but had no usable Jan 1 price.

    Only this outcome triggers the fallback table; transport failures raise
    UpstreamUnavailable instead.
    """
