"""Pipeline orchestration service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from schema_rules.builder import RuleSetBuilder, StrategyDispatcher
from schema_rules.common import ColumnDescriptor, GenerateOutcome, UserInputError
from schema_rules.observability import get_logger
from schema_rules.reporter import REPORT_FORMATS, write_rule_sets
from schema_rules.rules import GeneratorConfig, load_generator_config
from schema_rules.schema import CachedSchemaIntrospector, get_schema_introspector
from schema_rules.strategies import default_strategies

logger = get_logger(__name__)


@dataclass(frozen=True)
class ColumnInspection:
    column: ColumnDescriptor
    strategies: tuple[str, ...]


def load_config(config_path: Path | None) -> GeneratorConfig:
    if config_path is None:
        return GeneratorConfig()
    if not config_path.exists():
        raise UserInputError(f"Config file not found: {config_path}")
    return load_generator_config(config_path)


def run_generate(
    schema_path: Path,
    table: str,
    output_path: Path | None = None,
    report_format: str = "json",
    ignore_columns: Sequence[str] = (),
    config_path: Path | None = None,
    name: str | None = None,
) -> GenerateOutcome:
    """Runs introspect -> build -> write for one table."""

    if report_format.lower() not in REPORT_FORMATS:
        raise UserInputError(f"Unsupported output format: {report_format}")

    logger.info("generate started: schema=%s, table=%s", schema_path, table)
    config = load_config(config_path)
    introspector = get_schema_introspector(schema_path)

    rule_sets = RuleSetBuilder(introspector, config).build_rule_sets(table, ignore_columns)

    output_files: tuple[Path, ...] = ()
    if output_path is not None:
        written = write_rule_sets(rule_sets, output_path, report_format, name=name)
        output_files = (written,)

    outcome = GenerateOutcome(
        table=table,
        rule_sets=rule_sets,
        output_files=output_files,
        warnings=rule_sets.warnings,
    )
    logger.info(
        "generate completed: table=%s, columns=%d, files=%d",
        table,
        outcome.column_count,
        len(output_files),
    )
    return outcome


def run_inspect(
    schema_path: Path,
    table: str,
    config_path: Path | None = None,
) -> tuple[ColumnInspection, ...]:
    """Lists the table's columns with the strategies that would fire for each."""

    config = load_config(config_path)
    introspector = CachedSchemaIntrospector(get_schema_introspector(schema_path))
    dispatcher = StrategyDispatcher(
        default_strategies(config.file_rules, introspector.get_indexes)
    )

    return tuple(
        ColumnInspection(
            column=column,
            strategies=tuple(strategy.name for strategy in dispatcher.applicable(column)),
        )
        for column in introspector.get_column_details(table)
    )
