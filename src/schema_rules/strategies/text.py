"""String column strategy."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.rules import FileRuleConfig

from .base import RuleStrategy, nullability

STRING_TYPES = frozenset({"varchar", "char", "tinytext", "text", "mediumtext", "longtext"})


class StringRuleStrategy(RuleStrategy):
    name = "string"

    def __init__(self, file_rules: FileRuleConfig | None = None) -> None:
        self._file_rules = file_rules or FileRuleConfig()

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in STRING_TYPES

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        # Image-named columns are left to the file strategy.
        if self._file_rules.matches_image_name(column.name):
            return []

        rules = [Rule("string"), nullability(column)]
        length = column.length
        if length:
            rules.append(Rule.of("max", length))
        return rules
