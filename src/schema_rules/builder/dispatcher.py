"""Strategy dispatch."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from schema_rules.common import ColumnDescriptor, Rule
from schema_rules.strategies import RuleStrategy

logger = logging.getLogger(__name__)


class StrategyDispatcher:
    """Runs every applicable strategy in registration order and concatenates the output."""

    def __init__(self, strategies: Sequence[RuleStrategy]) -> None:
        self._strategies = tuple(strategies)

    @property
    def strategies(self) -> tuple[RuleStrategy, ...]:
        return self._strategies

    def applicable(self, column: ColumnDescriptor) -> list[RuleStrategy]:
        return [strategy for strategy in self._strategies if strategy.can_apply(column)]

    def dispatch(self, table: str, column: ColumnDescriptor, is_update: bool) -> list[Rule]:
        rules: list[Rule] = []
        for strategy in self.applicable(column):
            generated = strategy.generate(table, column, is_update)
            logger.debug(
                "%s.%s: %s -> %s", table, column.name, strategy.name, [str(rule) for rule in generated]
            )
            rules.extend(generated)
        return rules
