"""Exceptions raised by the conversion engine and its rate loaders."""

from __future__ import annotations


class FXError(RuntimeError):
    """Base class for fxmoney errors."""


class RateLookupError(FXError, LookupError):
    """Raised when a currency code has no usable rate in the current table."""

    def __init__(self, currency: str, base: str = "") -> None:
        self.currency = currency
        self.base = base
        super().__init__(f"No exchange rate for {currency!r} (base={base!r})")


class RateFileError(FXError):
    """Raised when a rates payload cannot be read."""


__all__ = ["FXError", "RateFileError", "RateLookupError"]
