"""Integer, float and boolean strategies."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.parser import integer_range, is_tinyint_boolean

from .base import RuleStrategy, nullability

INTEGER_TYPES = frozenset({"int", "integer", "tinyint", "smallint", "mediumint", "bigint", "serial"})
FLOAT_TYPES = frozenset({"decimal", "float", "double", "real"})
BOOLEAN_TYPES = frozenset({"boolean", "bit"})

_MONEY_KEYWORDS = ("price", "amount", "total", "cost", "salary", "discount", "rate")


class BooleanRuleStrategy(RuleStrategy):
    name = "boolean"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in BOOLEAN_TYPES or is_tinyint_boolean(
            column.type_name, column.raw_type
        )

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        return [Rule("boolean"), nullability(column)]


class IntegerRuleStrategy(RuleStrategy):
    """Emits ``integer`` plus a value range inferred from name or storage width."""

    name = "integer"

    column_rules: dict[str, tuple[Rule, ...]] = {
        "age": (Rule.of("min", 0), Rule.of("max", 120)),
        "quantity": (Rule.of("min", 0),),
        "count": (Rule.of("min", 0),),
        "stock": (Rule.of("min", 0),),
    }

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in INTEGER_TYPES

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        if is_tinyint_boolean(column.type_name, column.raw_type):
            return [Rule("boolean"), nullability(column)]

        rules = [Rule("integer"), nullability(column)]

        named = self.column_rules.get(column.name)
        if named is not None:
            rules.extend(named)
            return rules

        bounds = integer_range(column.type_name, column.raw_type)
        if column.unsigned:
            rules.append(Rule.of("min", 0))
            if bounds is not None:
                rules.append(Rule.of("max", bounds[1]))
        elif bounds is not None:
            rules.append(Rule.of("min", bounds[0]))
            rules.append(Rule.of("max", bounds[1]))
        return rules


class FloatRuleStrategy(RuleStrategy):
    name = "float"

    column_rules: dict[str, tuple[Rule, ...]] = {
        "age": (Rule.of("min", 0), Rule.of("max", 120)),
        "percent": (Rule.of("min", 0), Rule.of("max", 100)),
    }

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in FLOAT_TYPES

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        rules = [Rule("numeric"), nullability(column)]

        named = self.column_rules.get(column.name)
        if named is not None:
            rules.extend(named)
        else:
            rules.extend(inferred_numeric_rules(column.name))
        return rules


def inferred_numeric_rules(column_name: str) -> list[Rule]:
    """Keyword inference over the column name; every matching keyword group contributes."""
    lowered = column_name.lower()
    rules: list[Rule] = []

    if any(keyword in lowered for keyword in _MONEY_KEYWORDS):
        rules.append(Rule.of("min", 0))

    if "percent" in lowered:
        rules.extend([Rule.of("min", 0), Rule.of("max", 100)])

    if "age" in lowered:
        rules.extend([Rule.of("min", 0), Rule.of("max", 120)])

    return rules
