"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, shared
freely between validators, no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ValidatorConfig(locale="fr", html_error_class="alert alert-danger")
    """

    # Catalog
    locale: str = "en"
    catalog_path: str | Path | None = None  # JSON file replacing the bundled locale

    # HTML output
    html_error_class: str = "fieldcheck-errors"
    html_success_class: str = "fieldcheck-success"

    # JSON output
    json_ensure_ascii: bool = False
    general_errors_key: str = "__all__"  # Free-form errors not tied to a field
