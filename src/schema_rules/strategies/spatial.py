"""Geometry strategy."""

from __future__ import annotations

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.parser import GEOMETRY_PATTERNS, geometry_pattern

from .base import RuleStrategy, nullability

GEOMETRY_TYPES = frozenset({"geometry"}) | frozenset(GEOMETRY_PATTERNS)


class GeometryRuleStrategy(RuleStrategy):
    """Validates the WKT text of spatial columns, e.g. ``POINT(1 2)``."""

    name = "geometry"

    def can_apply(self, column: ColumnDescriptor) -> bool:
        return column.type_name in GEOMETRY_TYPES

    def generate(self, table: str, column: ColumnDescriptor, is_update: bool = False) -> list[Rule]:
        return [nullability(column), Rule("regex", geometry_pattern(column.raw_type))]
