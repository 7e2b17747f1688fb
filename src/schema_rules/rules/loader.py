"""YAML-based generator configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import DEFAULT_IMAGE_COLUMN_NAMES, DEFAULT_MIMES, FileRuleConfig, GeneratorConfig

logger = logging.getLogger(__name__)

_DEFAULT_GENERATOR_CONFIG = GeneratorConfig()


def load_generator_config(config_path: Path) -> GeneratorConfig:
    """Loads generator.yaml; returns the defaults on any failure."""
    data = _safe_load_yaml(config_path)
    if data is None:
        return _DEFAULT_GENERATOR_CONFIG

    try:
        generator: dict[str, Any] = data.get("generator") or {}
        file_raw: dict[str, Any] = generator.get("file_rules") or {}

        file_rules = FileRuleConfig(
            image_column_names=tuple(
                name.lower()
                for name in _string_list(
                    file_raw, "image_column_names", DEFAULT_IMAGE_COLUMN_NAMES
                )
            ),
        )
        file_rules = file_rules.set_max_size_kb(int(file_raw.get("max_size_kb", 0)))
        file_rules = file_rules.set_allowed_mime_types(
            _string_list(file_raw, "mimes", DEFAULT_MIMES),
            mode=str(file_raw.get("mimes_mode", "replace")),  # type: ignore[arg-type]
        )

        custom_raw: dict[str, Any] = generator.get("custom_rules") or {}
        custom_rules = {
            str(table): dict(columns)
            for table, columns in custom_raw.items()
            if isinstance(columns, dict)
        }

        return GeneratorConfig(
            file_rules=file_rules,
            ignore_columns=_string_list(generator, "ignore_columns", ()),
            custom_rules=custom_rules,
        )
    except (AttributeError, TypeError, ValueError):
        logger.warning("generator config parsing failed, using defaults: %s", config_path)
        return _DEFAULT_GENERATOR_CONFIG


def _safe_load_yaml(path: Path) -> dict[str, Any] | None:
    """Loads a YAML mapping; returns None when the file is missing or malformed."""
    try:
        with open(path, encoding="utf-8") as f:
            result = yaml.safe_load(f)
        if isinstance(result, dict):
            return result
        return None
    except (OSError, yaml.YAMLError):
        logger.warning("YAML loading failed: %s", path)
        return None


def _string_list(section: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Reads a YAML list of names; a bare scalar is a shape error."""
    value = section.get(key)
    if value is None:
        return default
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    return tuple(str(item) for item in value)
