"""Date, datetime and timestamp strategies."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule

from .base import RuleStrategy, nullability

DATE_FORMAT = "Y-m-d"
DATETIME_FORMAT = "Y-m-d H:i:s"
TIME_FORMAT = "H:i:s"

# MySQL YEAR range.
YEAR_MIN = 1901
YEAR_MAX = 2155


class DateRuleStrategy(RuleStrategy):
    name = "date"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name == "date"

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        return [Rule("date_format", DATE_FORMAT), nullability(column)]


class DateTimeRuleStrategy(RuleStrategy):
    name = "datetime"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in {"datetime", "time", "year"}

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        rules: list[Rule] = []
        if column.type_name == "datetime":
            rules.append(Rule("date_format", DATETIME_FORMAT))
        elif column.type_name == "time":
            rules.append(Rule("date_format", TIME_FORMAT))
        elif column.type_name == "year":
            rules.extend(
                [Rule.of("digits", 4), Rule("numeric"), Rule.of("between", YEAR_MIN, YEAR_MAX)]
            )
        rules.append(nullability(column))
        return rules


class TimestampRuleStrategy(RuleStrategy):
    name = "timestamp"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name == "timestamp"

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        return [Rule("date_format", DATETIME_FORMAT), nullability(column)]
