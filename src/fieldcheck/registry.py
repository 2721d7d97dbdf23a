"""Rule registry — user-registered extension rules.

Mirrors the built-in table in ``fieldcheck.checkers``: ``RuleDef`` is the
frozen definition, ``RuleRegistry`` is the lookup table the engine falls
back to when a rule name is not built in.

Names are write-once. Registering a taken name raises
``DuplicateRuleError`` for as long as the registry lives, so two parts of
an application can never silently replace each other's rules.

Free-threading safety:
    - RuleDef is a frozen dataclass (immutable)
    - Writes go through a ``threading.Lock``; entries are never removed
      or replaced, so lookups read the dict without locking
"""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fieldcheck.checkers import BUILTIN_RULES
from fieldcheck.errors import DuplicateRuleError

logger = logging.getLogger("fieldcheck.registry")

# (field name, submitted value, rule argument) -> True when valid
type Predicate = Callable[[str, str | None, Any], bool]


@dataclass(frozen=True, slots=True)
class RuleDef:
    """A registered extension rule."""

    name: str
    predicate: Predicate
    message: str


class RuleRegistry:
    """Write-once table of extension rules.

    Usage::

        registry = RuleRegistry()
        registry.extend(
            "even",
            lambda field, value, arg: int(value) % 2 == 0,
            "{field} must be an even number.",
        )
        validator = Validator(form, registry=registry)

    Built-in rules are always resolved first. A registered name equal to a
    built-in name is accepted but can never be reached; a warning is
    logged when that happens.
    """

    __slots__ = ("_lock", "_rules")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._rules: dict[str, RuleDef] = {}

    def extend(self, name: str, predicate: Predicate, message: str) -> RuleDef:
        """Register an extension rule.

        Raises ``DuplicateRuleError`` if *name* is already registered.
        """
        with self._lock:
            if name in self._rules:
                raise DuplicateRuleError(name)
            rule = RuleDef(name=name, predicate=predicate, message=message)
            self._rules[name] = rule

        if name in BUILTIN_RULES:
            logger.warning(
                "Extension rule %r is shadowed by the built-in rule of the same name",
                name,
            )
        logger.debug("Registered extension rule %r", name)
        return rule

    def get(self, name: str) -> RuleDef | None:
        """Look up a rule by name. Returns ``None`` if not registered."""
        return self._rules.get(name)

    def names(self) -> list[str]:
        """Registered rule names, in registration order."""
        return list(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __repr__(self) -> str:
        return f"RuleRegistry({self.names()!r})"


# Process-wide registry used by validators that are not given their own
default_registry = RuleRegistry()


def extend(name: str, predicate: Predicate, message: str) -> RuleDef:
    """Register an extension rule on the process-wide ``default_registry``."""
    return default_registry.extend(name, predicate, message)
