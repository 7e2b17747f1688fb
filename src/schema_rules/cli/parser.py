"""CLI parser construction."""

from __future__ import annotations

import argparse
from pathlib import Path

from schema_rules import __version__
from schema_rules.cli.commands import COMMAND_MODULES


def build_parser() -> argparse.ArgumentParser:
    """Creates the main ArgumentParser with logging options and the rule subcommands."""
    parser = argparse.ArgumentParser(
        prog="schema-rules",
        description="Generate store/update validation rules from a table schema.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-config",
        type=Path,
        default=None,
        help="logging dictConfig YAML (e.g. configs/logging/default.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log per-column strategy decisions at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for module in COMMAND_MODULES:
        module.configure(subparsers)

    return parser
