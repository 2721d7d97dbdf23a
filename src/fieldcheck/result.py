"""Error bag — the mutable record of one validator's failures."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class ErrorBag:
    """Field errors plus free-form errors.

    Each field holds exactly one message. Recording a second failure for
    the same field replaces the first, so the message that survives is
    the one from the last rule that failed::

        bag.set("pwd", "Too short")
        bag.set("pwd", "Not an email")
        bag.get("pwd")  # "Not an email"

    Free-form errors (``bag.add(...)``) are not tied to a field and are
    kept in insertion order.
    """

    _fields: dict[str, str] = field(default_factory=dict)
    _general: list[str] = field(default_factory=list)

    def set(self, field_name: str, message: str) -> None:
        """Record *message* for *field_name*, replacing any earlier one."""
        self._fields[field_name] = message

    def add(self, message: str) -> None:
        """Record a free-form error."""
        self._general.append(message)

    def get(self, field_name: str) -> str:
        """The field's message, or ``""`` if it has none."""
        return self._fields.get(field_name, "")

    def has(self, field_name: str) -> bool:
        return field_name in self._fields

    @property
    def fields(self) -> dict[str, str]:
        """Copy of the field → message map, in first-failure order."""
        return dict(self._fields)

    @property
    def general(self) -> list[str]:
        """Copy of the free-form errors."""
        return list(self._general)

    @property
    def is_empty(self) -> bool:
        return not self._fields and not self._general

    def __len__(self) -> int:
        return len(self._fields) + len(self._general)
