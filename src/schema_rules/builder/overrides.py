"""User-declared rule overrides."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
import logging

from schema_rules.common import OverrideFormatError, Rule

logger = logging.getLogger(__name__)

OVERRIDE_SEPARATOR = "|"


def parse_override(value: object) -> list[Rule]:
    """Parses ``"required|string|max:50"`` or ``["required", "string"]`` into rules."""
    if isinstance(value, str):
        items: Iterable[object] = value.split(OVERRIDE_SEPARATOR)
    elif isinstance(value, (list, tuple)):
        items = value
    else:
        raise OverrideFormatError(
            f"custom rule must be a string or a list, got {type(value).__name__}"
        )

    rules: list[Rule] = []
    for item in items:
        if isinstance(item, Rule):
            rules.append(item)
            continue
        text = str(item).strip()
        if text:
            rules.append(Rule.parse(text))
    return rules


@dataclass(frozen=True)
class ResolvedOverrides:
    rules: dict[str, list[Rule]] = field(default_factory=dict)
    warnings: tuple[str, ...] = ()

    def __contains__(self, column: object) -> bool:
        return column in self.rules

    def rules_for(self, column: str) -> list[Rule]:
        return list(self.rules[column])


class OverrideResolver:
    """Selects the custom rules that replace strategy output for a table's columns.

    Entries for ignored columns or columns missing from the schema are dropped.
    A malformed entry is reported and skipped, leaving the column to the
    strategies.
    """

    def __init__(self, custom_rules: Mapping[str, Mapping[str, object]] | None = None) -> None:
        self._custom_rules = custom_rules or {}

    def resolve(
        self,
        table: str,
        columns: Collection[str],
        ignore_columns: Collection[str] = (),
    ) -> ResolvedOverrides:
        declared = self._custom_rules.get(table) or {}
        resolved: dict[str, list[Rule]] = {}
        warnings: list[str] = []

        for column_name, value in declared.items():
            if column_name in ignore_columns:
                logger.debug("override for ignored column dropped: %s.%s", table, column_name)
                continue
            if column_name not in columns:
                message = f"override for unknown column dropped: {table}.{column_name}"
                logger.warning("%s", message)
                warnings.append(message)
                continue
            try:
                resolved[column_name] = parse_override(value)
            except OverrideFormatError as exc:
                message = f"override skipped: {table}.{column_name} ({exc})"
                logger.warning("%s", message)
                warnings.append(message)

        return ResolvedOverrides(rules=resolved, warnings=tuple(warnings))
