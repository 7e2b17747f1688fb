"""Observability module tests."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_rules.observability import get_logger, setup_logging

CONFIGS_DIR = Path(__file__).resolve().parents[2] / "configs"


def test_setup_logging_default_no_error() -> None:
    setup_logging()


def test_setup_logging_with_config_path() -> None:
    setup_logging(config_path=CONFIGS_DIR / "logging" / "default.yaml")


def test_setup_logging_missing_config_falls_back() -> None:
    setup_logging(config_path=Path("/nonexistent/logging.yaml"))


def test_get_logger_returns_logger_instance() -> None:
    result = get_logger("test.module")
    assert isinstance(result, logging.Logger)
    assert result.name == "test.module"
