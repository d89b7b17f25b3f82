"""Tests for environment-driven settings and logging setup."""

from __future__ import annotations

import logging

import pytest

from radixcodec.config import DEFAULT_ALPHABET, Settings, load_settings
from radixcodec.utils import configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RADIXCODEC_ALPHABET", raising=False)
    monkeypatch.delenv("RADIXCODEC_LOG_LEVEL", raising=False)

    settings = load_settings()
    assert settings.alphabet == DEFAULT_ALPHABET == "bitcoin"
    assert settings.log_level == "WARNING"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RADIXCODEC_ALPHABET", "ripple")
    monkeypatch.setenv("RADIXCODEC_LOG_LEVEL", "debug")

    settings = load_settings()
    assert settings == Settings(alphabet="ripple", log_level="DEBUG")


def test_configure_logging_resolution_order(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    monkeypatch.setenv("RADIXCODEC_LOG_LEVEL", "info")
    configure_logging()
    configure_logging("debug")
    monkeypatch.delenv("RADIXCODEC_LOG_LEVEL")
    configure_logging()
    configure_logging("nonsense")

    assert [call["level"] for call in calls] == [
        logging.INFO,
        logging.DEBUG,
        logging.WARNING,
        logging.WARNING,
    ]
