"""Message templating — placeholder substitution for error text.

Catalog templates use three kinds of placeholders::

    "The {field} field may not be greater than {value} characters."
    "The {field} field must be between {value_0} and {value_1}."

``{field}`` always receives the field label. A list or tuple argument
fills ``{value_0}``, ``{value_1}``, … positionally; any other argument
fills ``{value}``. Substitution is plain text replacement, so braces that
are not placeholders (regex quantifiers, JSON snippets) are left alone.
"""

import re
from typing import Any


def _display(value: Any) -> str:
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def render_message(template: str, label: str, argument: Any = None) -> str:
    """Fill a catalog template with the field label and rule argument."""
    message = template.replace("{field}", label)

    if argument is None:
        return message

    if isinstance(argument, (list, tuple)):
        for index, item in enumerate(argument):
            message = message.replace(f"{{value_{index}}}", _display(item))
        return message

    return message.replace("{value}", _display(argument))


def render_extension_message(template: str, label: str, argument: Any = None) -> str:
    """Render the message of a registered extension rule.

    Extension messages are often written without a ``{field}``
    placeholder (``"must be an even number"``); those are prefixed with
    the label so the reader still knows which field failed.
    """
    message = render_message(template, label, argument)
    if "{field}" not in template:
        message = f"{label}: {message}"
    return message
