"""Rule engine — interprets field specs and records failures.

A field spec maps rule names to arguments, in the order they run::

    {
        "email": {"label": "Email address", "required": True, "format_email": True},
        "age": {"between": [18, 65]},
    }

For each field the engine resolves the label, then walks the rules:

1. ``label`` is not a rule; it is consumed before anything runs.
2. A rule runs only if it is ``required`` or the field was submitted.
   Optional fields that were left out are never checked.
3. The rule name is looked up in ``BUILTIN_RULES``, then in the
   registry. A name found in neither raises ``UnknownRuleError``.
4. A failed rule writes its message to the error bag, replacing any
   message an earlier rule left for the same field.

Label, value, and argument travel as parameters; the engine holds no
per-field state between calls.
"""

import logging
from collections.abc import Mapping
from typing import Any

from fieldcheck.catalog import MessageCatalog
from fieldcheck.checkers import BUILTIN_RULES
from fieldcheck.errors import UnknownRuleError
from fieldcheck.messages import render_extension_message, render_message
from fieldcheck.registry import RuleRegistry
from fieldcheck.result import ErrorBag

logger = logging.getLogger("fieldcheck.engine")

LABEL_KEY = "label"
REQUIRED_RULE = "required"


class RuleEngine:
    """Dispatches rule names to built-in checkers or registered extensions."""

    __slots__ = ("_catalog", "_registry")

    def __init__(self, catalog: MessageCatalog, registry: RuleRegistry) -> None:
        self._catalog = catalog
        self._registry = registry

    def resolve_label(self, field_name: str, spec: Mapping[str, Any]) -> str:
        """Explicit ``label`` argument, then catalog label, then the capitalized name."""
        explicit = spec.get(LABEL_KEY)
        if explicit is not None:
            return str(explicit)
        override = self._catalog.label(field_name)
        if override is not None:
            return override
        return field_name[:1].upper() + field_name[1:]

    def evaluate(
        self,
        field_specs: Mapping[str, Any],
        submitted: Mapping[str, str | None],
        bag: ErrorBag,
    ) -> None:
        """Run every field spec against *submitted*, recording failures in *bag*."""
        for field_name, spec in field_specs.items():
            if not isinstance(spec, Mapping):
                logger.warning(
                    "Skipping field %r: rules must be a mapping, got %s",
                    field_name,
                    type(spec).__name__,
                )
                continue
            self.evaluate_field(field_name, spec, submitted, bag)

    def evaluate_field(
        self,
        field_name: str,
        spec: Mapping[str, Any],
        submitted: Mapping[str, str | None],
        bag: ErrorBag,
    ) -> None:
        """Run one field's rules in declaration order."""
        label = self.resolve_label(field_name, spec)
        present = field_name in submitted
        value = submitted.get(field_name)

        for rule, argument in spec.items():
            if rule == LABEL_KEY:
                continue
            if rule != REQUIRED_RULE and not present:
                continue

            message = self._run_rule(rule, field_name, value, argument, label)
            if message is not None:
                logger.debug("Field %r failed rule %r", field_name, rule)
                bag.set(field_name, message)

    def _run_rule(
        self,
        rule: str,
        field_name: str,
        value: str | None,
        argument: Any,
        label: str,
    ) -> str | None:
        """Return the failure message, or ``None`` when the rule passes."""
        builtin = BUILTIN_RULES.get(rule)
        if builtin is not None:
            if builtin.check(value, argument):
                return None
            template = self._catalog.template(rule)
            return render_message(template, label, argument if builtin.interpolate else None)

        extension = self._registry.get(rule)
        if extension is None:
            raise UnknownRuleError(rule, field_name)
        if extension.predicate(field_name, value, argument):
            return None
        return render_extension_message(extension.message, label, argument)
