"""Schema snapshot read/write utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from schema_rules.common import UserInputError

SchemaSnapshot = dict[str, dict[str, list[dict[str, Any]]]]


def load_schema_snapshot(path: Path) -> SchemaSnapshot:
    """Reads a ``tables: {name: {columns: [...], indexes: [...]}}`` document (YAML or JSON)."""
    if not path.exists():
        raise UserInputError(f"Schema snapshot not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            payload = json.loads(text)
        else:
            payload = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise UserInputError(f"Schema snapshot is not valid: {path} ({exc})") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("tables"), dict):
        raise UserInputError(f"Schema snapshot must define a 'tables' mapping: {path}")

    tables: SchemaSnapshot = {}
    for table_name, table_raw in payload["tables"].items():
        table_raw = table_raw or {}
        tables[str(table_name)] = {
            "columns": [dict(item) for item in table_raw.get("columns", [])],
            "indexes": [dict(item) for item in table_raw.get("indexes", [])],
        }
    return tables

