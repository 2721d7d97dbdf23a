"""Message catalog — localized error templates and field labels.

A catalog is loaded once and never mutated. It follows a flat JSON shape::

    {
      "success_message": "The form has been submitted successfully.",
      "labels": {"email": "Email address"},
      "required": "The {field} field is required.",
      "between": "The {field} field must be between {value_0} and {value_1}.",
      ...
    }

Every built-in rule name needs a template; extra keys are kept so
applications can ship their own messages next to the built-in ones.

Bundled locales live in ``fieldcheck/locales/<locale>.json`` and are
cached per process. Custom catalogs are read from any JSON file.
"""

import functools
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from types import MappingProxyType
from typing import Any

from fieldcheck.checkers import BUILTIN_RULES
from fieldcheck.errors import ConfigurationError

logger = logging.getLogger("fieldcheck.catalog")


@dataclass(frozen=True, slots=True)
class MessageCatalog:
    """Immutable store of message templates and field labels."""

    templates: Mapping[str, str]
    labels: Mapping[str, str]
    success_message: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MessageCatalog:
        """Build a catalog from its JSON-shaped mapping.

        Raises ``ConfigurationError`` if the success message or any
        built-in rule template is missing.
        """
        success = data.get("success_message")
        if not isinstance(success, str):
            msg = "Catalog is missing a 'success_message' string"
            raise ConfigurationError(msg)

        labels = data.get("labels") or {}
        if not isinstance(labels, Mapping):
            msg = "Catalog 'labels' must be a mapping of field name to label"
            raise ConfigurationError(msg)

        templates = {
            key: value
            for key, value in data.items()
            if key not in ("success_message", "labels") and isinstance(value, str)
        }
        missing = sorted(name for name in BUILTIN_RULES if name not in templates)
        if missing:
            msg = f"Catalog is missing templates for: {', '.join(missing)}"
            raise ConfigurationError(msg)

        return cls(
            templates=MappingProxyType(templates),
            labels=MappingProxyType({str(k): str(v) for k, v in labels.items()}),
            success_message=success,
        )

    def template(self, rule: str) -> str:
        """Return the template for *rule*. Raises ``ConfigurationError`` if absent."""
        try:
            return self.templates[rule]
        except KeyError:
            msg = f"Catalog has no message template for rule {rule!r}"
            raise ConfigurationError(msg) from None

    def label(self, field: str) -> str | None:
        """Return the label override for *field*, or ``None``."""
        return self.labels.get(field)


def _read_json(path: Path | Any) -> Mapping[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Cannot load message catalog {path}: {exc}"
        raise ConfigurationError(msg) from exc
    if not isinstance(data, dict):
        msg = f"Message catalog {path} must contain a JSON object"
        raise ConfigurationError(msg)
    return data


@functools.cache
def _bundled(locale: str) -> MessageCatalog:
    resource = files("fieldcheck") / "locales" / f"{locale}.json"
    if not resource.is_file():
        msg = f"No bundled message catalog for locale {locale!r}"
        raise ConfigurationError(msg)
    logger.debug("Loading bundled catalog %r", locale)
    return MessageCatalog.from_mapping(_read_json(resource))


def load_catalog(locale: str = "en", path: str | Path | None = None) -> MessageCatalog:
    """Load a message catalog.

    Args:
        locale: Name of a bundled locale (``"en"``, ``"fr"``). Ignored
            when *path* is given.
        path: A JSON catalog file to load instead of a bundled locale.

    Bundled catalogs are cached for the lifetime of the process; file
    catalogs are read on every call.
    """
    if path is not None:
        logger.debug("Loading catalog from %s", path)
        return MessageCatalog.from_mapping(_read_json(Path(path)))
    return _bundled(locale)


def available_locales() -> list[str]:
    """Names of the bundled locales."""
    directory = files("fieldcheck") / "locales"
    return sorted(
        entry.name.removesuffix(".json")
        for entry in directory.iterdir()
        if entry.name.endswith(".json")
    )
