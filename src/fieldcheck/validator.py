"""Validator — the object applications hold while checking a submission.

Usage::

    from fieldcheck import Validator

    validator = Validator(form)
    validator.rules({
        "email": {"required": True, "format_email": True},
        "password": {"label": "Password", "required": True, "min": 8},
        "password_confirm": {"confirm": [form.get("password"), form.get("password_confirm")]},
    })

    if validator.is_valid:
        ...
    else:
        return validator.to_html()

The validator owns its error bag and wires the engine to a catalog and a
registry. Calling ``rules()`` again adds to the same bag: errors from an
earlier pass are kept.
"""

from collections.abc import Mapping
from typing import Any

from fieldcheck.catalog import MessageCatalog, load_catalog
from fieldcheck.config import ValidatorConfig
from fieldcheck.engine import RuleEngine
from fieldcheck.registry import RuleRegistry, default_registry
from fieldcheck.rendering import Message
from fieldcheck.result import ErrorBag


class Validator:
    """Checks submitted values against per-field rules."""

    __slots__ = ("_bag", "_catalog", "_config", "_engine", "_registry", "_submitted")

    def __init__(
        self,
        submitted: Mapping[str, str | None] | None = None,
        *,
        catalog: MessageCatalog | None = None,
        registry: RuleRegistry | None = None,
        config: ValidatorConfig | None = None,
    ) -> None:
        self._config = config or ValidatorConfig()
        self._catalog = catalog or load_catalog(
            self._config.locale, self._config.catalog_path
        )
        self._registry = registry if registry is not None else default_registry
        self._submitted: dict[str, str | None] = dict(submitted or {})
        self._engine = RuleEngine(self._catalog, self._registry)
        self._bag = ErrorBag()

    # -- Running rules ---------------------------------------------------

    def rules(self, field_specs: Mapping[str, Mapping[str, Any]]) -> None:
        """Check every field spec against the submitted values.

        Raises ``UnknownRuleError`` for a rule name that is neither built
        in nor registered. Failed rules are recorded, never raised.
        """
        self._engine.evaluate(field_specs, self._submitted, self._bag)

    def add_error(self, message: str) -> None:
        """Record a free-form error not tied to a field."""
        self._bag.add(message)

    def add_error_for(self, field_name: str, message: str) -> None:
        """Record an error on a field, replacing any message it already has."""
        self._bag.set(field_name, message)

    # -- Inspecting the outcome ------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True when no error of any kind has been recorded."""
        return self._bag.is_empty

    def __bool__(self) -> bool:
        """Falsy when invalid — enables ``if not validator:`` pattern."""
        return self.is_valid

    @property
    def errors(self) -> dict[str, str]:
        """Field → message map (copy)."""
        return self._bag.fields

    @property
    def general_errors(self) -> list[str]:
        """Free-form errors (copy)."""
        return self._bag.general

    def has_error(self, field_name: str) -> bool:
        return self._bag.has(field_name)

    def get_error(self, field_name: str) -> str:
        """The field's message, or ``""``."""
        return self._bag.get(field_name)

    @property
    def success_message(self) -> str:
        return self._catalog.success_message

    @property
    def submitted(self) -> dict[str, str | None]:
        """Copy of the values captured at construction."""
        return dict(self._submitted)

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def label_for(self, field_name: str, spec: Mapping[str, Any] | None = None) -> str:
        """The label messages use for *field_name* under *spec*."""
        return self._engine.resolve_label(field_name, spec or {})

    # -- Output ----------------------------------------------------------

    def messages(self) -> Message:
        return Message(self, self._config)

    def to_html(self) -> str:
        return self.messages().to_html()

    def to_json(self) -> str:
        return self.messages().to_json()

    def to_text(self) -> str:
        return self.messages().to_text()

    def __repr__(self) -> str:
        state = "valid" if self.is_valid else f"{len(self._bag)} error(s)"
        return f"<Validator {state}>"


def validate(
    data: Mapping[str, str | None] | None,
    rules: Mapping[str, Mapping[str, Any]],
    **options: Any,
) -> Validator:
    """Validate data against a set of rules in one call.

    Args:
        data: Any mapping of field names to submitted string values —
            form data, query parameters, or a plain ``dict``.
        rules: Field name → ``{rule name: argument}`` specs.
        **options: ``catalog``, ``registry``, or ``config``, passed to
            ``Validator``.

    Returns:
        The ``Validator`` after running *rules*.

    Example::

        result = validate(form, {"title": {"required": True, "max": 200}})
        if not result:
            # result.errors == {"title": "The Title field is required."}
            ...
    """
    validator = Validator(data, **options)
    validator.rules(rules)
    return validator
