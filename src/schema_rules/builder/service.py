"""Rule set builder: per-column orchestration for the store and update contexts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from schema_rules.common import ColumnDescriptor, Rule, RuleSet, RuleSetPair
from schema_rules.common.models import NULLABLE, REQUIRED, Context
from schema_rules.observability import get_logger
from schema_rules.rules import GeneratorConfig
from schema_rules.schema import CachedSchemaIntrospector, SchemaIntrospector
from schema_rules.strategies import FileSizeState, default_strategies

from .dispatcher import StrategyDispatcher
from .foreign_keys import ForeignKeyAnnotator
from .overrides import OverrideResolver, ResolvedOverrides

logger = get_logger(__name__)

ALWAYS_EXCLUDED_COLUMNS = frozenset({"id", "created_at", "updated_at"})


def dedupe_rules(rules: Iterable[Rule]) -> list[Rule]:
    """Removes repeated rules keeping the first occurrence in place."""
    seen: set[Rule] = set()
    unique_rules: list[Rule] = []
    for rule in rules:
        if rule in seen:
            continue
        seen.add(rule)
        unique_rules.append(rule)
    return unique_rules


def resolve_update_conflicts(rules: list[Rule]) -> list[Rule]:
    """Drops ``required`` from a list that also carries ``nullable``."""
    if REQUIRED in rules and NULLABLE in rules:
        return [rule for rule in rules if rule != REQUIRED]
    return rules


class RuleSetBuilder:
    """Builds the store and update rule sets of one table."""

    def __init__(self, introspector: SchemaIntrospector, config: GeneratorConfig | None = None) -> None:
        self._introspector = introspector
        self._config = config or GeneratorConfig()

    def build_rule_sets(self, table: str, ignore_columns: Sequence[str] = ()) -> RuleSetPair:
        introspector = CachedSchemaIntrospector(self._introspector)
        columns = self._ordered_columns(introspector, table)
        ignored = set(self._config.ignore_columns) | set(ignore_columns)

        overrides = OverrideResolver(self._config.custom_rules).resolve(
            table, [column.name for column in columns], ignored
        )

        file_rules = self._config.file_rules
        dispatcher = StrategyDispatcher(
            default_strategies(
                file_rules,
                introspector.get_indexes,
                FileSizeState(max_size_kb=file_rules.max_size_kb),
            )
        )
        annotator = ForeignKeyAnnotator(introspector.table_exists)

        logger.info("building rule sets: table=%s, columns=%d", table, len(columns))
        store = self._build_context(
            table, columns, ignored, overrides, dispatcher, annotator, context="store"
        )
        update = self._build_context(
            table, columns, ignored, overrides, dispatcher, annotator, context="update"
        )
        return RuleSetPair(table=table, store=store, update=update, warnings=overrides.warnings)

    def _build_context(
        self,
        table: str,
        columns: Sequence[ColumnDescriptor],
        ignored: set[str],
        overrides: ResolvedOverrides,
        dispatcher: StrategyDispatcher,
        annotator: ForeignKeyAnnotator,
        *,
        context: Context,
    ) -> RuleSet:
        is_update = context == "update"
        rules: dict[str, tuple[Rule, ...]] = {}

        for column in columns:
            if column.name in ignored or column.name in ALWAYS_EXCLUDED_COLUMNS:
                continue

            if column.name in overrides:
                column_rules = overrides.rules_for(column.name)
            else:
                column_rules = dispatcher.dispatch(table, column, is_update)

            column_rules = dedupe_rules(annotator.annotate(column.name, column_rules))
            if is_update:
                column_rules = resolve_update_conflicts(column_rules)

            if column_rules:
                rules[column.name] = tuple(column_rules)

        return RuleSet(context, rules)

    @staticmethod
    def _ordered_columns(
        introspector: SchemaIntrospector, table: str
    ) -> list[ColumnDescriptor]:
        details = {column.name: column for column in introspector.get_column_details(table)}
        ordered: list[ColumnDescriptor] = []
        for name in introspector.list_columns(table):
            column = details.get(name)
            if column is None:
                logger.debug("column without details skipped: %s.%s", table, name)
                continue
            ordered.append(column)
        return ordered


def build_rule_sets(
    introspector: SchemaIntrospector,
    table: str,
    ignore_columns: Sequence[str] = (),
    config: GeneratorConfig | None = None,
) -> RuleSetPair:
    return RuleSetBuilder(introspector, config).build_rule_sets(table, ignore_columns)
