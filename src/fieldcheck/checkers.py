"""Built-in rule checkers.

Each checker is a plain function with the signature::

    def check(value: str | None, argument: Any) -> bool:
        '''Return True when the value satisfies the rule.'''

``value`` is ``None`` only when the field was not submitted at all, which
the engine lets through to ``required`` alone. Every other checker sees a
string.

``BUILTIN_RULES`` is the lookup table the engine dispatches through, keyed
by the snake_case rule name used in field specs::

    {"email": {"required": True, "format_email": True, "max": 120}}

Rules whose argument belongs in the failure message (``between``, ``max``,
``min``, ``regex``, ``no_regex``) are flagged ``interpolate=True``; the
engine then passes the argument to the message renderer.
"""

import ipaddress
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlsplit

from email_validator import EmailNotValidError, validate_email

from fieldcheck.errors import ConfigurationError

# Type alias for a built-in checker function
type Checker = Callable[[str | None, Any], bool]


@dataclass(frozen=True, slots=True)
class BuiltinRule:
    """A built-in rule: its name, checker, and whether its argument
    is substituted into the failure message."""

    name: str
    check: Checker
    interpolate: bool = False


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_ALPHA_RE = re.compile(r"[a-z]+", re.IGNORECASE | re.ASCII)
_ALPHA_NUMERIC_RE = re.compile(r"[a-z0-9]+", re.IGNORECASE | re.ASCII)
_INTEGER_RE = re.compile(r"[0-9]+")
_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII)
_DATE_TIME_RE = re.compile(r"\d{2}/\d{2}/\d{4} \d{2}:\d{2}", re.ASCII)
_POSTAL_CODE_RE = re.compile(r"[0-9]{5}")
_SLUG_RE = re.compile(r"[a-z0-9\-]+")
_TEL_RE = re.compile(r"[0-9\-+(),;._ /]{4,20}")
_NUMBER_RE = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)

# Characters rejected in file names: path separators, wildcards, shell
# punctuation, the space, and the extended Latin / symbol range.
_PROHIBITED_NAME_FILE_RE = re.compile(
    r'[/:*?"<>|\\ '
    r"ÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖØŒŠþÙÚÛÜÝŸàáâãäåæçèéêëìíîïðñòóôõöøœšÞùúûüýÿ"
    r"¢ß¥£™©®ª×÷±²³¼½¾µ¿¶·¸º°¯§…¤¦≠¬ˆ¨‰]"
)

# URL schemes that are valid without an authority part (``mailto:a@b.c``)
_HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})
_SCHEME_RE = re.compile(r"[a-z][a-z0-9+.\-]*", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Argument helpers
# ---------------------------------------------------------------------------


def _pair(rule: str, argument: Any) -> tuple[Any, Any]:
    if not isinstance(argument, (list, tuple)):
        msg = f"Rule {rule!r} expects a [first, second] pair, got {argument!r}"
        raise ConfigurationError(msg)
    if len(argument) < 2:
        msg = f"Rule {rule!r} expects two values, got {len(argument)}"
        raise ConfigurationError(msg)
    return argument[0], argument[1]


def _length(rule: str, argument: Any) -> int:
    if isinstance(argument, bool) or not isinstance(argument, int):
        msg = f"Rule {rule!r} expects an integer length, got {argument!r}"
        raise ConfigurationError(msg)
    return argument


def _members(rule: str, argument: Any) -> frozenset[str]:
    if isinstance(argument, (str, bytes)) or not isinstance(argument, Iterable):
        msg = f"Rule {rule!r} expects a collection of values, got {argument!r}"
        raise ConfigurationError(msg)
    # Loose membership: submitted values are strings, allowed values may not be
    return frozenset(str(member) for member in argument)


def _is_number(value: Any) -> bool:
    if isinstance(value, str):
        return _NUMBER_RE.fullmatch(value) is not None
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text(value: str | None) -> str:
    return "" if value is None else value


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def check_required(value: str | None, argument: Any) -> bool:
    """Field must be submitted and non-empty."""
    if not argument:
        return True
    return value is not None and value != ""


def check_empty(value: str | None, argument: Any) -> bool:
    """Field must stay blank (honeypot fields)."""
    return _text(value) == ""


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


def check_alpha(value: str | None, argument: Any) -> bool:
    return not argument or _ALPHA_RE.fullmatch(_text(value)) is not None


def check_alpha_numeric(value: str | None, argument: Any) -> bool:
    return not argument or _ALPHA_NUMERIC_RE.fullmatch(_text(value)) is not None


def check_integer(value: str | None, argument: Any) -> bool:
    return not argument or _INTEGER_RE.fullmatch(_text(value)) is not None


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------


def check_between(value: str | None, argument: Any) -> bool:
    """Value must lie within ``[low, high]``, bounds included.

    Numeric bounds, numbers or numeric strings such as ``"10"``, compare
    numerically (a non-numeric value fails); anything else compares as
    strings.
    """
    low, high = _pair("between", argument)
    text = _text(value)
    if _is_number(low) and _is_number(high):
        if not _is_number(text):
            return False
        return float(low) <= float(text) <= float(high)
    return str(low) <= text <= str(high)


def check_confirm(value: str | None, argument: Any) -> bool:
    """Both values of the argument pair must be equal (password confirmation)."""
    first, second = _pair("confirm", argument)
    return first == second


def check_in_array(value: str | None, argument: Any) -> bool:
    return _text(value) in _members("in_array", argument)


def check_not_in_array(value: str | None, argument: Any) -> bool:
    return _text(value) not in _members("not_in_array", argument)


# ---------------------------------------------------------------------------
# Length (code points, not bytes)
# ---------------------------------------------------------------------------


def check_max(value: str | None, argument: Any) -> bool:
    return len(_text(value)) <= _length("max", argument)


def check_min(value: str | None, argument: Any) -> bool:
    return len(_text(value)) >= _length("min", argument)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------


def _search(rule: str, pattern: Any, text: str) -> bool:
    if isinstance(pattern, re.Pattern):
        return pattern.search(text) is not None
    if not isinstance(pattern, str):
        msg = f"Rule {rule!r} expects a regular expression, got {pattern!r}"
        raise ConfigurationError(msg)
    try:
        return re.search(pattern, text) is not None
    except re.error as exc:
        msg = f"Rule {rule!r} has an invalid pattern {pattern!r}: {exc}"
        raise ConfigurationError(msg) from exc


def check_regex(value: str | None, argument: Any) -> bool:
    return _search("regex", argument, _text(value))


def check_no_regex(value: str | None, argument: Any) -> bool:
    return not _search("no_regex", argument, _text(value))


# ---------------------------------------------------------------------------
# Formats: a blank value always passes, pair with ``required`` to forbid it
# ---------------------------------------------------------------------------


def _predicate(test: Callable[[str], bool]) -> Checker:
    def check(value: str | None, argument: Any) -> bool:
        text = _text(value)
        if text == "" or not argument:
            return True
        return test(text)

    return check


def _format(pattern: re.Pattern[str]) -> Checker:
    return _predicate(lambda text: pattern.fullmatch(text) is not None)


def _is_file_name(text: str) -> bool:
    return _PROHIBITED_NAME_FILE_RE.search(text) is None


def _is_email(text: str) -> bool:
    try:
        validate_email(text, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_ip(text: str) -> bool:
    try:
        ipaddress.ip_address(text)
    except ValueError:
        return False
    return True


def _is_url(text: str) -> bool:
    if any(ch.isspace() for ch in text):
        return False
    try:
        parts = urlsplit(text)
        hostname = parts.hostname
    except ValueError:
        return False
    if not parts.scheme or _SCHEME_RE.fullmatch(parts.scheme) is None:
        return False
    if parts.scheme.lower() in _HOSTLESS_SCHEMES:
        return bool(parts.netloc or parts.path)
    return bool(hostname)


check_format_date = _format(_DATE_RE)
check_format_date_time = _format(_DATE_TIME_RE)
check_format_postal_code = _format(_POSTAL_CODE_RE)
check_format_slug = _format(_SLUG_RE)
check_format_tel = _format(_TEL_RE)
check_format_email = _predicate(_is_email)
check_format_ip = _predicate(_is_ip)
check_format_name_file = _predicate(_is_file_name)
check_format_url = _predicate(_is_url)


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------

BUILTIN_RULES: dict[str, BuiltinRule] = {
    rule.name: rule
    for rule in (
        BuiltinRule("required", check_required),
        BuiltinRule("alpha", check_alpha),
        BuiltinRule("alpha_numeric", check_alpha_numeric),
        BuiltinRule("integer", check_integer),
        BuiltinRule("between", check_between, interpolate=True),
        BuiltinRule("confirm", check_confirm),
        BuiltinRule("empty", check_empty),
        BuiltinRule("format_date", check_format_date),
        BuiltinRule("format_date_time", check_format_date_time),
        BuiltinRule("format_email", check_format_email),
        BuiltinRule("format_ip", check_format_ip),
        BuiltinRule("format_name_file", check_format_name_file),
        BuiltinRule("format_postal_code", check_format_postal_code),
        BuiltinRule("format_slug", check_format_slug),
        BuiltinRule("format_tel", check_format_tel),
        BuiltinRule("format_url", check_format_url),
        BuiltinRule("in_array", check_in_array),
        BuiltinRule("not_in_array", check_not_in_array),
        BuiltinRule("max", check_max, interpolate=True),
        BuiltinRule("min", check_min, interpolate=True),
        BuiltinRule("regex", check_regex, interpolate=True),
        BuiltinRule("no_regex", check_no_regex, interpolate=True),
    )
}
