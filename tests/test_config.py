"""
Unit tests for environment-driven settings.
"""

import logging

import pytest

from scout.config import configure_logging, get_log_level, get_model


def test_model_defaults_and_override(monkeypatch):
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    assert get_model() == "gpt-4o-mini"

    monkeypatch.setenv("OPENAI_MODEL", "gpt-4.1")
    assert get_model() == "gpt-4.1"


@pytest.mark.parametrize("raw,expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    (" error ", logging.ERROR),
])
def test_known_log_levels(monkeypatch, raw, expected):
    monkeypatch.setenv("SCOUT_LOG_LEVEL", raw)

    assert get_log_level() == expected


@pytest.mark.parametrize("raw", ["VERBOSE", "BASIC_FORMAT", "getLogger", ""])
def test_unknown_log_level_falls_back_to_info(monkeypatch, raw):
    monkeypatch.setenv("SCOUT_LOG_LEVEL", raw)

    assert get_log_level() == logging.INFO


def test_configure_logging_survives_bad_level(monkeypatch):
    monkeypatch.setenv("SCOUT_LOG_LEVEL", "VERBOSE")

    configure_logging()

    assert logging.getLogger("scout").level == logging.INFO
