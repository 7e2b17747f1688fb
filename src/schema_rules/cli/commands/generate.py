"""generate command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from schema_rules.pipeline import run_generate
from schema_rules.reporter import REPORT_FORMATS, render_rule_sets


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("generate", help="Generate store/update rules for a table")
    parser.add_argument("--schema", required=True, help="SQLite DB or YAML/JSON schema snapshot")
    parser.add_argument("--table", required=True)
    parser.add_argument("--out", required=False, help="Output directory; stdout when omitted")
    parser.add_argument("--format", choices=list(REPORT_FORMATS), default="json")
    parser.add_argument("--ignore", nargs="*", default=[], help="Columns to leave out")
    parser.add_argument("--config", required=False, help="generator.yaml path")
    parser.add_argument("--name", required=False, help="Output file name without suffix")
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    outcome = run_generate(
        schema_path=Path(args.schema),
        table=args.table,
        output_path=Path(args.out) if args.out else None,
        report_format=args.format,
        ignore_columns=tuple(args.ignore),
        config_path=Path(args.config) if args.config else None,
        name=args.name,
    )

    if not outcome.output_files:
        print(render_rule_sets(outcome.rule_sets, args.format), end="")
    else:
        print(f"[OK] table={outcome.table}, columns={outcome.column_count}")
        for path in outcome.output_files:
            print(f"[OK] output={path}")

    for item in outcome.warnings:
        print(f"[WARN] {item}")
    return 0
