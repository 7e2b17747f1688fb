"""Rule set building."""

from .dispatcher import StrategyDispatcher
from .foreign_keys import ForeignKeyAnnotator, pluralize, referenced_table
from .overrides import OverrideResolver, ResolvedOverrides, parse_override
from .service import (
    ALWAYS_EXCLUDED_COLUMNS,
    RuleSetBuilder,
    build_rule_sets,
    dedupe_rules,
    resolve_update_conflicts,
)

__all__ = [
    "ALWAYS_EXCLUDED_COLUMNS",
    "ForeignKeyAnnotator",
    "OverrideResolver",
    "ResolvedOverrides",
    "RuleSetBuilder",
    "StrategyDispatcher",
    "build_rule_sets",
    "dedupe_rules",
    "parse_override",
    "pluralize",
    "referenced_table",
    "resolve_update_conflicts",
]
