"""FX conversion helpers."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Sequence

from .config import FXConfig, get_default_config
from .errors import RateLookupError

logger = logging.getLogger(__name__)


@dataclass
class CurrencyConverter:
    """Convert values through a rate table held by an ``FXConfig``.

    The converter keeps a reference to the config, never a copy, so updates
    made by whoever loads rates are visible on the next call.
    """

    config: FXConfig = field(default_factory=get_default_config)

    def _lookup(self, currency: str) -> float:
        # The base always resolves to 1 without writing it into the shared table
        if currency == self.config.base:
            return 1.0
        rate = self.config.rates.get(currency)
        if not rate or math.isnan(rate):
            logger.warning("Missing FX rate for %s (base=%s)", currency, self.config.base)
            raise RateLookupError(currency, self.config.base)
        return rate

    def rate(self, to: str, from_: str) -> float:
        """Return the factor converting one unit of ``from_`` into ``to``."""

        base = self.config.base
        to_rate = self._lookup(to)
        from_rate = self._lookup(from_)
        if from_ == base:
            cross = to_rate
        elif to == base:
            cross = 1 / from_rate
        else:
            cross = to_rate * (1 / from_rate)
        logger.debug("Resolved FX rate %s->%s = %s (base=%s)", from_, to, cross, base)
        return cross

    def _resolve(self, from_: str | None, to: str | None) -> float:
        return self.rate(to or self.config.settings_to, from_ or self.config.settings_from)

    def convert(self, value: float, from_: str | None = None, to: str | None = None) -> float:
        """Convert a single value; omitted codes fall back to the configured defaults."""

        return value * self._resolve(from_, to)

    def convert_many(
        self,
        values: Sequence[float],
        from_: str | None = None,
        to: str | None = None,
    ) -> List[float]:
        """Convert every element with the same options and return a new list."""

        cross = self._resolve(from_, to)
        return [value * cross for value in values]


def resolve_cross_rate(to: str, from_: str, *, config: FXConfig | None = None) -> float:
    """Return the cross rate ``from_`` -> ``to`` using ``config`` or the process default."""

    return CurrencyConverter(config or get_default_config()).rate(to, from_)


def convert(
    value: float,
    from_: str | None = None,
    to: str | None = None,
    *,
    config: FXConfig | None = None,
) -> float:
    return CurrencyConverter(config or get_default_config()).convert(value, from_, to)


def convert_many(
    values: Sequence[float],
    from_: str | None = None,
    to: str | None = None,
    *,
    config: FXConfig | None = None,
) -> List[float]:
    return CurrencyConverter(config or get_default_config()).convert_many(values, from_, to)


__all__ = [
    "CurrencyConverter",
    "RateLookupError",
    "convert",
    "convert_many",
    "resolve_cross_rate",
]
