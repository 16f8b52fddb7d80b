"""Chainable wrapper over the conversion engine.

``Money(10, "GBP").to("EUR")`` reads the same as
``convert(10, from_="GBP", to="EUR")``. A list of values can be wrapped too,
``Money([10, 20], "GBP").to("EUR")``, and every element is converted with the
same codes. String parsing in ``Money.parse`` is a best-effort convenience and
not a contract.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .config import FXConfig, get_default_config
from .fx import CurrencyConverter

Amount = Union[float, Sequence[float]]

_NUMBER_CHARS = re.compile(r"[^0-9.\-]")
_CODE_CHARS = re.compile(r"[^A-Za-z]")
_LEADING_FLOAT = re.compile(r"[-]?(?:\d+\.?\d*|\.\d+)")


def _parse_number(text: str) -> float:
    match = _LEADING_FLOAT.match(_NUMBER_CHARS.sub("", text))
    return float(match.group(0)) if match else math.nan


@dataclass(frozen=True)
class Money:
    """A value (or list of values) with an optional currency code, bound to a rate config."""

    value: Amount
    currency: str | None = None
    config: FXConfig = field(default_factory=get_default_config, repr=False, compare=False)

    @classmethod
    def parse(cls, text: str, config: FXConfig | None = None) -> "Money":
        """Pull a number and a currency code out of text such as ``"GBP 12.50"``."""

        code = _CODE_CHARS.sub("", text) or None
        return cls(_parse_number(text), code, config or get_default_config())

    def _convert(self, from_: str | None, to: str | None) -> Union[float, List[float]]:
        converter = CurrencyConverter(self.config)
        if isinstance(self.value, Sequence):
            return converter.convert_many(self.value, from_, to)
        return converter.convert(self.value, from_, to)

    def convert(self, from_: str | None = None, to: str | None = None) -> Union[float, List[float]]:
        return self._convert(from_, to)

    def from_(self, currency: str) -> "Money":
        """Return this value converted from ``currency`` into the base currency."""

        base = self.config.base
        return Money(self._convert(currency, base), base, self.config)

    def to(self, currency: str) -> Union[float, List[float]]:
        """Convert into ``currency`` from the embedded code or the default source."""

        return self._convert(self.currency or self.config.settings_from, currency)


__all__ = ["Money"]
