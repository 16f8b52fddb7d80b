"""Telemetry setup tests."""

from __future__ import annotations

from fxmoney.config import FXSettings
from fxmoney.core import telemetry


def test_disabled_telemetry_is_noop(monkeypatch):
    monkeypatch.setattr(telemetry, "_TELEMETRY_INITIALISED", False)
    assert telemetry.setup_telemetry(FXSettings(telemetry_enabled=False)) is None
    assert telemetry._TELEMETRY_INITIALISED is False


def test_exporter_options_follow_settings():
    settings = FXSettings(telemetry_otlp_endpoint="http://collector:4317", telemetry_otlp_insecure=False)
    assert telemetry._build_exporter_options(settings) == {
        "endpoint": "http://collector:4317",
        "insecure": False,
    }
