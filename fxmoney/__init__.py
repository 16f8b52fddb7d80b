"""Currency conversion against a rate table relative to one base currency."""

from .config import FXConfig, FXSettings, get_default_config, get_settings
from .errors import FXError, RateFileError, RateLookupError
from .fx import CurrencyConverter, convert, convert_many, resolve_cross_rate
from .money import Money

__all__ = [
    "CurrencyConverter",
    "FXConfig",
    "FXError",
    "FXSettings",
    "Money",
    "RateFileError",
    "RateLookupError",
    "convert",
    "convert_many",
    "get_default_config",
    "get_settings",
    "resolve_cross_rate",
]
