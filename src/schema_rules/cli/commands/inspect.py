"""inspect command handler."""

from __future__ import annotations

import argparse
from pathlib import Path

from schema_rules.pipeline import run_inspect


def configure(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("inspect", help="Show columns and the strategies they match")
    parser.add_argument("--schema", required=True)
    parser.add_argument("--table", required=True)
    parser.add_argument("--config", required=False)
    parser.set_defaults(handler=execute)


def execute(args: argparse.Namespace) -> int:
    inspections = run_inspect(
        schema_path=Path(args.schema),
        table=args.table,
        config_path=Path(args.config) if args.config else None,
    )

    for item in inspections:
        column = item.column
        nullable = "null" if column.nullable else "not null"
        print(
            f"{column.name}\t{column.raw_type or '-'}\t{nullable}\t"
            f"{','.join(item.strategies)}"
        )
    return 0
