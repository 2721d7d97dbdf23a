"""Fieldcheck — declarative validation for submitted form fields.

Describe each field's rules as a mapping, run them against the submitted
values, and render the outcome as HTML, JSON, or text.

Basic usage::

    from fieldcheck import Validator

    validator = Validator({"email": "ada@example.com", "age": "17"})
    validator.rules({
        "email": {"required": True, "format_email": True},
        "age": {"label": "Age", "between": [18, 65]},
    })
    validator.is_valid   # False
    validator.errors     # {"age": "The Age field must be between 18 and 65."}
    validator.to_json()

Custom rules (registered once, at startup)::

    import fieldcheck

    fieldcheck.extend(
        "even",
        lambda field, value, argument: int(value) % 2 == 0,
        "{field} must be an even number.",
    )
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DuplicateRuleError",
    "FieldcheckError",
    "Message",
    "MessageCatalog",
    "RuleRegistry",
    "UnknownRuleError",
    "Validator",
    "ValidatorConfig",
    "default_registry",
    "extend",
    "load_catalog",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fieldcheck`` fast while providing a clean top-level API.
    """
    if name in ("Validator", "validate"):
        from fieldcheck import validator as _validator

        return getattr(_validator, name)

    if name == "ValidatorConfig":
        from fieldcheck.config import ValidatorConfig

        return ValidatorConfig

    if name in ("MessageCatalog", "load_catalog"):
        from fieldcheck import catalog as _catalog

        return getattr(_catalog, name)

    if name in ("RuleRegistry", "default_registry", "extend"):
        from fieldcheck import registry as _registry

        return getattr(_registry, name)

    if name == "Message":
        from fieldcheck.rendering import Message

        return Message

    if name in ("ConfigurationError", "DuplicateRuleError", "FieldcheckError", "UnknownRuleError"):
        from fieldcheck import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
