"""CLI wrapper for converting values with a rates file."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from opentelemetry import trace

from fxmoney.config import FXConfig, get_settings
from fxmoney.core import setup_logging, setup_telemetry
from fxmoney.errors import FXError
from fxmoney.fx import CurrencyConverter

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


def _build_config(args: argparse.Namespace) -> FXConfig:
    settings = get_settings()
    if args.rates is not None:
        settings = settings.model_copy(update={"rates_path": args.rates})
    config = FXConfig.from_settings(settings)
    if args.base:
        config.base = args.base
    return config


def _run(args: argparse.Namespace) -> list[float]:
    with tracer.start_as_current_span("fxmoney.convert") as span:
        config = _build_config(args)
        converter = CurrencyConverter(config)
        span.set_attribute("fx.base", config.base)
        span.set_attribute("fx.from", args.from_ or config.settings_from)
        span.set_attribute("fx.to", args.to or config.settings_to)
        return converter.convert_many(args.values, from_=args.from_, to=args.to)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Convert values between currencies using a rate table")
    parser.add_argument("values", nargs="+", type=float)
    parser.add_argument("--from", dest="from_", default=None, help="Source currency code")
    parser.add_argument("--to", default=None, help="Target currency code")
    parser.add_argument("--rates", default=None, help="JSON file with {base, rates}")
    parser.add_argument("--base", default=None, help="Override the base currency")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)
    setup_telemetry(settings)
    logger.debug("Settings: %s", settings.dict_for_logging())

    try:
        results = _run(args)
    except FXError as exc:
        logger.error("Conversion failed: %s", exc)
        return 1

    for value in results:
        print(value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
