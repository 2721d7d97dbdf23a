"""``fieldcheck rules`` — list the built-in rules with their templates."""

import argparse

from fieldcheck.catalog import load_catalog
from fieldcheck.checkers import BUILTIN_RULES


def list_rules(args: argparse.Namespace) -> None:
    catalog = load_catalog(args.locale)
    width = max(len(name) for name in BUILTIN_RULES)
    for name in BUILTIN_RULES:
        print(f"{name:<{width}}  {catalog.template(name)}")
