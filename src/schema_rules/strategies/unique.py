"""Catch-all strategy: unique index detection and required/nullable."""

from __future__ import annotations

from collections.abc import Callable

from schema_rules.common import ColumnDescriptor, IndexInfo, Rule

from .base import RuleStrategy, nullability

# Literal exclusion token of the update-context unique rule; consumers
# substitute the id of the record being updated.
UPDATE_EXCLUSION_TOKEN = "id"

IndexLookup = Callable[[str], list[IndexInfo]]


class UniqueRuleStrategy(RuleStrategy):
    name = "unique"

    def __init__(self, index_lookup: IndexLookup) -> None:
        self._index_lookup = index_lookup

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return True

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        indexes = self._index_lookup(table)
        if is_primary_key(indexes, column.name):
            return []

        rules: list[Rule] = []
        if is_unique(indexes, column.name):
            if is_update:
                rules.append(Rule.of("unique", table, column.name, UPDATE_EXCLUSION_TOKEN))
            else:
                rules.append(Rule.of("unique", table, column.name))
        rules.append(nullability(column))
        return rules


def is_primary_key(indexes: list[IndexInfo], column_name: str) -> bool:
    return any(index.primary and column_name in index.columns for index in indexes)


def is_unique(indexes: list[IndexInfo], column_name: str) -> bool:
    return any(index.unique and column_name in index.columns for index in indexes)
