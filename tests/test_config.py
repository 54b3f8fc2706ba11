"""Tests for environment configuration and logging setup."""

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from euler_digits import ConfigurationError
from euler_digits.config import (
    DEFAULT_LINE_WIDTH,
    DEFAULT_REFERENCE_PATH,
    LINE_WIDTH_ENV,
    LOG_LEVEL_ENV,
    REFERENCE_ENV,
    env_int,
    env_str,
    load_settings,
)
from euler_digits.logging_config import setup_logging


def test_defaults():
    settings = load_settings()

    assert settings.reference_path == Path(DEFAULT_REFERENCE_PATH)
    assert settings.log_level == "INFO"
    assert settings.line_width == DEFAULT_LINE_WIDTH


def test_environment_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv(REFERENCE_ENV, f"  {tmp_path / 'e.txt'}  ")
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    monkeypatch.setenv(LINE_WIDTH_ENV, "64")

    settings = load_settings()

    assert settings.reference_path == tmp_path / "e.txt"
    assert settings.log_level == "DEBUG"
    assert settings.line_width == 64


def test_blank_value_falls_back(monkeypatch):
    monkeypatch.setenv(REFERENCE_ENV, "   ")

    assert env_str(REFERENCE_ENV, "fallback") == "fallback"


@pytest.mark.parametrize("raw", ["wide", "1.5"])
def test_non_integer_line_width(monkeypatch, raw):
    monkeypatch.setenv(LINE_WIDTH_ENV, raw)

    with pytest.raises(ConfigurationError, match=LINE_WIDTH_ENV):
        env_int(LINE_WIDTH_ENV, 80)


def test_non_positive_line_width(monkeypatch):
    monkeypatch.setenv(LINE_WIDTH_ENV, "0")

    with pytest.raises(ConfigurationError):
        load_settings()


def test_unknown_log_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

    with pytest.raises(ConfigurationError, match=LOG_LEVEL_ENV):
        load_settings()


def test_setup_logging_does_not_stack_handlers():
    package_logger = logging.getLogger("euler_digits")
    before = len(package_logger.handlers)

    setup_logging("INFO", stream=io.StringIO())
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)

    assert len(package_logger.handlers) <= before + 1
    assert package_logger.level == logging.DEBUG

    logging.getLogger("euler_digits.engine").debug("computed")
    assert "DEBUG euler_digits.engine: computed" in stream.getvalue()
