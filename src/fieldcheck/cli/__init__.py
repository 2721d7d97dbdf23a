"""Fieldcheck CLI — check JSON payloads against rule files.

Entry point registered as ``fieldcheck`` in ``pyproject.toml``::

    [project.scripts]
    fieldcheck = "fieldcheck.cli:main"
"""

import argparse
import sys

from fieldcheck.catalog import available_locales


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fieldcheck`` command."""
    parser = argparse.ArgumentParser(
        prog="fieldcheck",
        description="Fieldcheck — declarative validation for submitted form fields.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fieldcheck check -------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a JSON payload")
    check_parser.add_argument("rules", help="JSON file mapping field names to rules")
    check_parser.add_argument("data", help="JSON file mapping field names to submitted values")
    check_parser.add_argument(
        "--format",
        dest="output_format",
        choices=("html", "json", "text"),
        default="text",
        help="Output format (default: text)",
    )
    check_parser.add_argument(
        "--locale",
        choices=available_locales(),
        default="en",
        help="Bundled message catalog to use",
    )
    check_parser.add_argument(
        "--catalog",
        default=None,
        help="JSON message catalog replacing the bundled locale",
    )

    # -- fieldcheck rules -------------------------------------------------
    rules_parser = subparsers.add_parser("rules", help="List built-in rules and their messages")
    rules_parser.add_argument(
        "--locale",
        choices=available_locales(),
        default="en",
        help="Bundled message catalog to use",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from fieldcheck.cli._check import run_check

        run_check(args)
    elif args.command == "rules":
        from fieldcheck.cli._rules import list_rules

        list_rules(args)
