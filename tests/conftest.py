import os
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fxmoney.config import FXConfig, get_settings, reset_default_config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path):
    """Keep FX_* variables and any local .env file out of the tests."""

    for key in list(os.environ):
        if key.startswith("FX_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    reset_default_config()
    yield
    get_settings.cache_clear()
    reset_default_config()


@pytest.fixture
def usd_config() -> FXConfig:
    return FXConfig(rates={"USD": 1.0, "GBP": 0.64, "EUR": 0.85}, base="USD")
