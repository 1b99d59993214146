"""Messages — ordered accumulator of validation findings by severity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .message import Message


class Messages:
    """Collects error, warning and info messages in insertion order.

    A collection is created by the caller and handed down the whole
    validator tree; validators only ever append to it.  It is not
    thread-safe: use one collection per validation pass.

    Usage::

        messages = validator.validate(candidate, Messages())
        if messages.has_errors():
            ...
    """

    def __init__(self) -> None:
        self._errors: list[Message] = []
        self._warnings: list[Message] = []
        self._infos: list[Message] = []

    # ── Adding ───────────────────────────────────────────────────

    def add_error(self, message: Message) -> Messages:
        self._errors.append(message)
        return self

    def add_warning(self, message: Message) -> Messages:
        self._warnings.append(message)
        return self

    def add_info(self, message: Message) -> Messages:
        self._infos.append(message)
        return self

    def extend(self, other: Messages) -> Messages:
        """Append every message of *other*, severity by severity."""
        self._errors.extend(other.errors)
        self._warnings.extend(other.warnings)
        self._infos.extend(other.infos)
        return self

    # ── Queries ──────────────────────────────────────────────────

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_warnings(self) -> bool:
        return bool(self._warnings)

    def has_infos(self) -> bool:
        return bool(self._infos)

    def has_error_like(self, message: Message) -> bool:
        """True if an error raised from *message* has been collected.

        See :meth:`Message.is_like`: parameters only take part in the match
        when *message* presets them.
        """
        return any(message.is_like(m) for m in self._errors)

    def has_warning_like(self, message: Message) -> bool:
        return any(message.is_like(m) for m in self._warnings)

    def has_info_like(self, message: Message) -> bool:
        return any(message.is_like(m) for m in self._infos)

    def error_count(self) -> int:
        return len(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> tuple[Message, ...]:
        return tuple(self._errors)

    @property
    def warnings(self) -> tuple[Message, ...]:
        return tuple(self._warnings)

    @property
    def infos(self) -> tuple[Message, ...]:
        return tuple(self._infos)

    def for_field(self, field: str | None) -> tuple[Message, ...]:
        """Errors attached to *field* (``None`` selects global errors)."""
        return tuple(m for m in self._errors if m.field == field)

    def size(self) -> int:
        """Total number of messages across all severities."""
        return len(self._errors) + len(self._warnings) + len(self._infos)

    def __len__(self) -> int:
        return self.size()

    # ── Export ───────────────────────────────────────────────────

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "errors": [m.to_dict() for m in self._errors],
            "warnings": [m.to_dict() for m in self._warnings],
            "infos": [m.to_dict() for m in self._infos],
        }

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationFailedError` if any error was collected."""
        if self._errors:
            from ..exceptions import ValidationFailedError

            raise ValidationFailedError(self)

    def __repr__(self) -> str:
        return (
            f"Messages(errors={len(self._errors)}, "
            f"warnings={len(self._warnings)}, infos={len(self._infos)})"
        )
