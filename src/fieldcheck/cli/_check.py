"""``fieldcheck check`` — validate a JSON payload against a JSON rule file.

Prints the rendered outcome to stdout. Exits with code 1 when the payload
is invalid or when the rules, data, or catalog cannot be loaded.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from fieldcheck.config import ValidatorConfig
from fieldcheck.errors import ConfigurationError
from fieldcheck.validator import Validator


def _load_object(path: str, what: str) -> dict[str, Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot read {what} file {path}: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(data, dict):
        msg = f"The {what} file {path} must contain a JSON object"
        raise ConfigurationError(msg)
    return data


def _submitted_values(data: dict[str, Any]) -> dict[str, str | None]:
    # Request bodies arrive as strings; mirror that for JSON scalars
    values: dict[str, str | None] = {}
    for name, value in data.items():
        if value is None or isinstance(value, str):
            values[name] = value
        elif isinstance(value, bool):
            values[name] = "1" if value else ""
        else:
            values[name] = str(value)
    return values


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.data`` against ``args.rules`` and print the result."""
    config = ValidatorConfig(locale=args.locale, catalog_path=args.catalog)
    try:
        rules = _load_object(args.rules, "rules")
        data = _load_object(args.data, "data")
        validator = Validator(_submitted_values(data), config=config)
        validator.rules(rules)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(validator.messages().render(args.output_format))
    if not validator.is_valid:
        raise SystemExit(1)
