"""Configuration for currency conversion.

Two layers live here. ``FXSettings`` reads the environment (``FX_*`` variables
or a ``.env`` file) the same way the rest of the stack does. ``FXConfig`` is
the live, mutable holder the conversion engine reads on every call: the rate
table, the base currency and the default from/to codes. Nothing is validated
when the holder is written; a bad state only surfaces when a conversion runs.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, MutableMapping

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import RateFileError

logger = logging.getLogger(__name__)

DEFAULT_BASE_CURRENCY = "USD"


class FXSettings(BaseSettings):
    """Environment options for the conversion engine."""

    base: str = Field(default=DEFAULT_BASE_CURRENCY, description="Currency all rates are relative to")
    default_from: str | None = Field(default=None, description="Default source currency")
    default_to: str | None = Field(default=None, description="Default target currency")
    rates: dict[str, float] = Field(default_factory=dict, description="Rate table as a JSON object")
    rates_path: Path | None = Field(default=None, description="JSON file holding {base, rates}")
    log_level: str = Field(default="INFO")

    telemetry_enabled: bool = Field(default=False)
    telemetry_service_name: str = Field(default="fxmoney")
    telemetry_otlp_endpoint: str | None = Field(default=None)
    telemetry_otlp_insecure: bool = Field(default=True)
    telemetry_sample_ratio: float = Field(default=1.0, ge=0.0, le=1.0)

    model_config = SettingsConfigDict(env_prefix="FX_", env_file=".env", env_file_encoding="utf-8")

    def dict_for_logging(self) -> dict[str, Any]:
        """Return a compact dict for logging purposes."""

        data = self.model_dump()
        data["rates"] = f"{len(self.rates)} rates"
        return data


@lru_cache(maxsize=1)
def get_settings(**overrides: Any) -> FXSettings:
    """Return cached settings with optional overrides."""

    if overrides:
        return FXSettings(**overrides)
    return FXSettings()


@dataclass
class FXConfig:
    """Mutable holder for the rate table, base currency and default codes."""

    rates: MutableMapping[str, float] = field(default_factory=dict)
    base: str = ""
    default_from: str | None = None
    default_to: str | None = None

    @property
    def settings_from(self) -> str:
        """Source currency used when a call does not name one."""

        return self.default_from or self.base

    @property
    def settings_to(self) -> str:
        """Target currency used when a call does not name one."""

        return self.default_to or self.base

    def set_defaults(self, from_: str | None = None, to: str | None = None) -> None:
        if from_ is not None:
            self.default_from = from_
        if to is not None:
            self.default_to = to

    def update_rates(self, rates: Mapping[str, Any], base: str | None = None) -> None:
        """Replace the table contents in place so existing references see the update."""

        self.rates.clear()
        self.rates.update(_coerce_rates(rates))
        if base is not None:
            self.base = base

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FXConfig":
        """Build a holder from a ``{"base": ..., "rates": {...}}`` mapping."""

        return cls(
            rates=_coerce_rates(payload.get("rates") or {}),
            base=payload.get("base") or "",
            default_from=payload.get("from") or None,
            default_to=payload.get("to") or None,
        )

    @classmethod
    def from_settings(cls, settings: FXSettings) -> "FXConfig":
        if settings.rates_path is not None:
            config = cls.from_payload(load_payload(settings.rates_path))
        else:
            config = cls(base=settings.base)
        # Explicit environment values win over the file
        if settings.rates:
            config.rates.update(_coerce_rates(settings.rates))
        if "base" in settings.model_fields_set or not config.base:
            config.base = settings.base
        config.set_defaults(settings.default_from, settings.default_to)
        return config


def _coerce_rates(rates: Mapping[str, Any]) -> dict[str, float]:
    if not isinstance(rates, Mapping):
        raise RateFileError(f"Rate table must be a JSON object, got {type(rates).__name__}")
    # Published tables sometimes carry rates as strings, e.g. {"GBP": "0.64"}
    try:
        return {str(code): float(value) for code, value in rates.items()}
    except (TypeError, ValueError) as exc:
        raise RateFileError(f"Rate table holds a non-numeric rate: {exc}") from exc


def load_payload(path: str | Path) -> dict[str, Any]:
    """Read a rates JSON file such as an Open Exchange Rates ``latest.json``."""

    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RateFileError(f"Cannot read rates from {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise RateFileError(f"Rates file {path} must contain a JSON object")
    logger.info("Loaded %d rates from %s (base=%s)", len(payload.get("rates") or {}), path, payload.get("base"))
    return payload


@lru_cache(maxsize=1)
def get_default_config() -> FXConfig:
    """Return the process-wide holder used when no config is passed explicitly."""

    return FXConfig.from_settings(get_settings())


def reset_default_config() -> None:
    get_default_config.cache_clear()


__all__ = [
    "DEFAULT_BASE_CURRENCY",
    "FXConfig",
    "FXSettings",
    "get_default_config",
    "get_settings",
    "load_payload",
    "reset_default_config",
]
