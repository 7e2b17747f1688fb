"""Logging setup."""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(config_path: Path | None = None, level: int | str = logging.INFO) -> None:
    """Initializes logging; falls back to basicConfig when the YAML config cannot be applied."""
    if config_path is not None:
        try:
            with open(config_path, encoding="utf-8") as f:
                config: dict[str, Any] = yaml.safe_load(f)
            logging.config.dictConfig(config)
            return
        except (OSError, yaml.YAMLError, ValueError, TypeError) as exc:
            logging.basicConfig(level=level, format=DEFAULT_FORMAT)
            logging.getLogger(__name__).warning(
                "logging config not applied, using defaults: %s (%s)", config_path, exc
            )
            return

    logging.basicConfig(level=level, format=DEFAULT_FORMAT)


def get_logger(name: str) -> logging.Logger:
    """Returns a standard module logger."""
    return logging.getLogger(name)
