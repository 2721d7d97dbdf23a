"""Fieldcheck exception hierarchy.

Configuration mistakes raise; failed validations never do. A field that
fails a rule is recorded in the validator's error bag and reported through
the renderers, so callers only ever catch these for programming errors.
"""


class FieldcheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldcheckError):
    """Raised when rules, catalogs, or rule arguments are invalid.

    Typically surfaces during development: a typo in a rule name, a
    catalog missing a template, a ``between`` rule given one bound.
    """


class UnknownRuleError(ConfigurationError):
    """A rule name matched neither a built-in nor a registered extension."""

    def __init__(self, rule: str, field: str) -> None:
        self.rule = rule
        self.field = field
        super().__init__(f"Rule {rule!r} (on field {field!r}) does not exist.")


class DuplicateRuleError(ConfigurationError):
    """An extension rule was registered under a name already taken."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Rule {rule!r} already exists.")
