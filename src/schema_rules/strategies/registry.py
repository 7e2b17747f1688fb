"""Strategy registration order."""

from __future__ import annotations

from schema_rules.rules import FileRuleConfig

from .base import FileSizeState, RuleStrategy
from .choice import EnumRuleStrategy, JsonRuleStrategy
from .file import BlobRuleStrategy
from .numeric import BooleanRuleStrategy, FloatRuleStrategy, IntegerRuleStrategy
from .spatial import GeometryRuleStrategy
from .temporal import DateRuleStrategy, DateTimeRuleStrategy, TimestampRuleStrategy
from .text import StringRuleStrategy
from .unique import IndexLookup, UniqueRuleStrategy


def default_strategies(
    file_rules: FileRuleConfig,
    index_lookup: IndexLookup,
    size_state: FileSizeState | None = None,
) -> tuple[RuleStrategy, ...]:
    """Returns the strategies in dispatch order; outputs are concatenated in this order."""
    if size_state is None:
        size_state = FileSizeState(max_size_kb=file_rules.max_size_kb)

    return (
        UniqueRuleStrategy(index_lookup),
        BooleanRuleStrategy(),
        EnumRuleStrategy(),
        JsonRuleStrategy(),
        StringRuleStrategy(file_rules),
        IntegerRuleStrategy(),
        FloatRuleStrategy(),
        TimestampRuleStrategy(),
        DateRuleStrategy(),
        DateTimeRuleStrategy(),
        BlobRuleStrategy(file_rules, size_state),
        GeometryRuleStrategy(),
    )
