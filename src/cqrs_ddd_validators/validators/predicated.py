"""PredicatedValidator — leaf validator driven by a boolean test."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..exceptions import ConfigurationError
from .base import AbstractValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.collection import Messages
    from ..messages.message import Message

T = TypeVar("T")


class PredicatedValidator(AbstractValidator[T]):
    """
    Adds one error when ``validation(subject)`` is false.

    The subject is the context object, or what the value provider derives
    from it.  The validation predicate never runs when the condition
    rejects the context object.

    Usage::

        adult = PredicatedValidator(
            field_message("age", "adult", "{1} is under 18"),
            lambda age: age >= 18,
            value_provider=attribute("age"),
        )
    """

    def __init__(
        self,
        message: Message,
        validation: Callable[[Any], bool],
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        if message is None:
            raise ConfigurationError(
                f"{type(self).__name__} requires a message", type(self).__name__
            )
        if validation is None:
            raise ConfigurationError(
                f"{type(self).__name__} requires a validation predicate",
                type(self).__name__,
            )
        super().__init__(message, condition=condition, value_provider=value_provider)
        self._validation = validation

    @property
    def validation(self) -> Callable[[Any], bool]:
        return self._validation

    def _do_validate(self, obj: T, messages: Messages) -> Messages:
        subject = self.get_validation_value(obj)
        if not self._validation(subject):
            messages.add_error(self._failure_message(obj, subject))
        return messages
