"""CLI command modules."""

from __future__ import annotations

from types import ModuleType

from schema_rules.cli.commands import generate, inspect

COMMAND_MODULES: list[ModuleType] = [generate, inspect]

__all__ = ["COMMAND_MODULES"]
