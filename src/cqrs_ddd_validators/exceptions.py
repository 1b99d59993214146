"""Exception hierarchy for cqrs-ddd-validators.

Expected validation failures are never raised: they are collected as
:class:`~cqrs_ddd_validators.messages.message.Message` instances.  The
exceptions below cover misconfiguration and opt-in exception flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .messages.collection import Messages


class ValidatorsError(Exception):
    """Root exception for the validators package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ConfigurationError(ValidatorsError):
    """Raised when a validator or builder is misconfigured.

    Raised at construction time, never while validating, because a validator
    is built once and reused across many validation passes.
    """

    def __init__(self, message: str, component: str | None = None) -> None:
        self.message = message
        self.component = component
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "CONFIGURATION_ERROR",
            "message": self.message,
            "component": self.component,
        }


class ValidationFailedError(ValidatorsError):
    """Raised by :meth:`Messages.raise_for_errors` when errors were collected.

    Carries the full collection so callers can still inspect warnings and
    infos.
    """

    def __init__(self, messages: Messages) -> None:
        self.messages = messages
        codes = ", ".join(m.code for m in messages.errors)
        super().__init__(f"Validation failed with {len(messages.errors)} error(s): {codes}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            **self.messages.to_dict(),
        }
