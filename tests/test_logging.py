"""Logging setup tests."""

from __future__ import annotations

import logging

from fxmoney.core import setup_logging


def test_setup_logging_adds_stdout_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    setup_logging("debug")

    assert len(root.handlers) == before + 1
    assert root.level == logging.DEBUG
    assert logging.getLogger("opentelemetry").level == logging.WARNING


def test_setup_logging_twice_keeps_one_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", list(root.handlers))
    monkeypatch.setattr(root, "level", root.level)
    before = len(root.handlers)

    setup_logging("info")
    setup_logging("warning")

    assert len(root.handlers) == before + 1
    assert root.level == logging.WARNING
