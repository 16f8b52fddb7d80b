"""Logging and telemetry setup for fxmoney entry points."""

from .logging import setup_logging
from .telemetry import setup_telemetry

__all__ = ["setup_logging", "setup_telemetry"]
