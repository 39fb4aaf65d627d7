"""Validate example domain values from the command line.

Prints ``ok`` when every field is valid. Otherwise prints the failing reports
as a JSON list on stderr and exits with status 1.

Run with: fieldcheck [--log-level LEVEL] [--json-logs] postal-code VALUE
          fieldcheck user --name NAME --status STATUS
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from fieldcheck.core.config import get_settings
from fieldcheck.core.logging import bind_context, configure_logging, get_logger
from fieldcheck.examples import UserDomainObject, postal_code_validator
from fieldcheck.validation.report import Report

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="fieldcheck", description="Validate field values.")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Log level (default: %(default)s)")
    parser.add_argument("--json-logs", action="store_true", default=settings.LOG_JSON,
                        help="Emit logs as JSON lines")
    sub = parser.add_subparsers(dest="command", required=True)

    postal = sub.add_parser("postal-code", help="Five or seven character postal code")
    postal.add_argument("value")

    user = sub.add_parser("user", help="User name and login status")
    user.add_argument("--name", required=True)
    user.add_argument("--status", required=True)
    return parser


def collect_reports(args: argparse.Namespace) -> list[Report]:
    """Run the requested check and return the failing reports."""
    if args.command == "postal-code":
        result = postal_code_validator(args.value).validate()
        return [] if result.is_valid else [result.report]
    return UserDomainObject.of(name=args.name, status=args.status).invalid_reports()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)
    bind_context(command=args.command)

    invalids = collect_reports(args)
    if invalids:
        logger.debug("check_failed", failures=len(invalids))
        print(json.dumps([r.to_dict() for r in invalids], ensure_ascii=False), file=sys.stderr)
        return 1

    logger.debug("check_passed")
    print("ok")
    return 0


if __name__ == "__main__":
    sys.exit(main())
