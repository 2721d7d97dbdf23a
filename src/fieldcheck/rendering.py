"""Output rendering — HTML, JSON, and plain text.

Renderers read a ``ValidationOutcome`` (anything shaped like a
``Validator``) and produce a string: the errors when validation failed,
the catalog's success message when it passed. ``Message`` bundles the
three formats behind one object::

    message = validator.messages()
    message.to_html()   # <div class="fieldcheck-errors"><ul>...</ul></div>
    message.to_json()   # {"email": "The Email field is required."}
    str(message)        # same as to_html()

HTML is rendered with kida and autoescaped: labels and messages that
contain markup are shown as text.
"""

import functools
import json
from dataclasses import dataclass
from typing import Protocol

from kida import Environment

from fieldcheck.config import ValidatorConfig

_ERRORS_SOURCE = (
    '<div class="{{ css_class }}"><ul>'
    '{% for line in lines %}<li data-field="{{ line.field }}">{{ line.message }}</li>{% end %}'
    "{% for message in general %}<li>{{ message }}</li>{% end %}"
    "</ul></div>"
)

_SUCCESS_SOURCE = '<div class="{{ css_class }}">{{ message }}</div>'


class ValidationOutcome(Protocol):
    """What a renderer needs to know about a finished validation."""

    @property
    def is_valid(self) -> bool: ...

    @property
    def errors(self) -> dict[str, str]: ...

    @property
    def general_errors(self) -> list[str]: ...

    @property
    def success_message(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ErrorLine:
    """One field error as the HTML template sees it."""

    field: str
    message: str


@functools.cache
def _environment() -> Environment:
    return Environment(autoescape=True)


@functools.cache
def _template(source: str):
    return _environment().from_string(source)


class HtmlRenderer:
    """Renders the outcome as an HTML block."""

    __slots__ = ("_config", "_outcome")

    def __init__(self, outcome: ValidationOutcome, config: ValidatorConfig | None = None) -> None:
        self._outcome = outcome
        self._config = config or ValidatorConfig()

    def errors(self) -> str:
        """The error list, or ``""`` when the outcome is valid."""
        if self._outcome.is_valid:
            return ""
        lines = [ErrorLine(name, message) for name, message in self._outcome.errors.items()]
        return _template(_ERRORS_SOURCE).render(
            {
                "css_class": self._config.html_error_class,
                "lines": lines,
                "general": self._outcome.general_errors,
            }
        )

    def success(self) -> str:
        """The success block, or ``""`` when the outcome is invalid."""
        if not self._outcome.is_valid:
            return ""
        return _template(_SUCCESS_SOURCE).render(
            {
                "css_class": self._config.html_success_class,
                "message": self._outcome.success_message,
            }
        )


class JsonRenderer:
    """Renders the outcome as JSON."""

    __slots__ = ("_config", "_outcome")

    def __init__(self, outcome: ValidationOutcome, config: ValidatorConfig | None = None) -> None:
        self._outcome = outcome
        self._config = config or ValidatorConfig()

    def errors(self) -> str:
        """JSON object of field errors, or ``""`` when the outcome is valid.

        Free-form errors, if any, are listed under the configured
        ``general_errors_key``.
        """
        if self._outcome.is_valid:
            return ""
        data: dict[str, str | list[str]] = dict(self._outcome.errors)
        general = self._outcome.general_errors
        if general:
            data[self._config.general_errors_key] = general
        return json.dumps(data, ensure_ascii=self._config.json_ensure_ascii)

    def success(self) -> str:
        """JSON string of the success message, or ``""`` when invalid."""
        if not self._outcome.is_valid:
            return ""
        return json.dumps(
            self._outcome.success_message,
            ensure_ascii=self._config.json_ensure_ascii,
        )


class TextRenderer:
    """Renders the outcome as plain text, one message per line."""

    __slots__ = ("_outcome",)

    def __init__(self, outcome: ValidationOutcome) -> None:
        self._outcome = outcome

    def errors(self) -> str:
        if self._outcome.is_valid:
            return ""
        return "\n".join([*self._outcome.errors.values(), *self._outcome.general_errors])

    def success(self) -> str:
        if not self._outcome.is_valid:
            return ""
        return self._outcome.success_message


class Message:
    """The validator's response in every supported format."""

    __slots__ = ("_config", "_outcome")

    def __init__(self, outcome: ValidationOutcome, config: ValidatorConfig | None = None) -> None:
        self._outcome = outcome
        self._config = config or ValidatorConfig()

    def to_html(self) -> str:
        renderer = HtmlRenderer(self._outcome, self._config)
        if self._outcome.is_valid:
            return renderer.success()
        return renderer.errors()

    def to_json(self) -> str:
        renderer = JsonRenderer(self._outcome, self._config)
        if self._outcome.is_valid:
            return renderer.success()
        return renderer.errors()

    def to_text(self) -> str:
        renderer = TextRenderer(self._outcome)
        if self._outcome.is_valid:
            return renderer.success()
        return renderer.errors()

    def render(self, output_format: str) -> str:
        """Render by format name: ``"html"``, ``"json"``, or ``"text"``."""
        match output_format:
            case "html":
                return self.to_html()
            case "json":
                return self.to_json()
            case "text":
                return self.to_text()
        msg = f"Unknown output format: {output_format!r}"
        raise ValueError(msg)

    def __str__(self) -> str:
        return self.to_html()
