"""Entry point for the schema-rules CLI."""

from __future__ import annotations

import logging
from typing import Sequence

from schema_rules.cli import build_parser
from schema_rules.common import UserInputError
from schema_rules.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    setup_logging(
        args.log_config,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("rule generation aborted: %s", exc)
        return 1
    except OSError as exc:
        logger.error("cannot access %s: %s", exc.filename or "path", exc.strerror or exc)
        return 1
    except Exception as exc:  # pragma: no cover
        logger.exception("unexpected failure while generating rules: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
