"""Enum and JSON strategies."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule

from .base import RuleStrategy, nullability


class EnumRuleStrategy(RuleStrategy):
    name = "enum"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name == "enum"

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        rules: list[Rule] = []
        members = column.enum_values
        if members is not None:
            rules.append(Rule.of("in", *members))
        rules.append(nullability(column))
        return rules


class JsonRuleStrategy(RuleStrategy):
    name = "json"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name == "json"

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        return [Rule("json"), nullability(column)]
