"""Base validators: guard condition, value provider and message template."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..messages.message import Message

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.collection import Messages

logger = logging.getLogger("cqrs_ddd.validators")

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """
    Base class for all validators.

    Holds two optional pieces of configuration:

    * ``condition``: a guard evaluated against the raw context object.
      When it returns ``False`` the validator does nothing.
    * ``value_provider``: derives the subject of validation from the
      context object (e.g. one field of it).  Without one, the context
      object itself is the subject.

    Subclasses implement :meth:`_do_validate`.
    """

    def __init__(
        self,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        self._condition = condition
        self._value_provider = value_provider

    @property
    def condition(self) -> Callable[[T], bool] | None:
        return self._condition

    @property
    def value_provider(self) -> Callable[[T], Any] | None:
        return self._value_provider

    def validate(self, obj: T, messages: Messages) -> Messages:
        """Run :meth:`_do_validate` unless the condition rejects *obj*."""
        if self._condition is None or self._condition(obj):
            return self._do_validate(obj, messages)
        logger.debug("%s skipped: condition not met", type(self).__name__)
        return messages

    @abstractmethod
    def _do_validate(self, obj: T, messages: Messages) -> Messages:
        """Validate *obj* once the condition has passed."""
        ...

    def get_validation_value(self, context: T) -> Any:
        """The subject of validation for *context*."""
        if self._value_provider is None:
            return context
        return self._value_provider(context)

    def get_validation_value_as_string(self, context: T) -> str | None:
        value = self.get_validation_value(context)
        return None if value is None else str(value)

    def _repr_fields(self) -> dict[str, Any]:
        return {
            "condition": self._condition,
            "value_provider": self._value_provider,
        }

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._repr_fields().items())
        return f"{type(self).__name__}({fields})"


class AbstractValidator(BaseValidator[T]):
    """A validator that reports failures using a message template."""

    def __init__(
        self,
        message: Message | None = None,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        super().__init__(condition=condition, value_provider=value_provider)
        self._message = message

    @property
    def message(self) -> Message | None:
        return self._message

    def _failure_message(self, context: T, subject: Any) -> Message:
        """
        Build the message to report for a failure.

        The template's own parameters are used when it has any; otherwise
        the parameters are ``(context, subject)`` so the template can refer
        to the whole object as ``{0}`` and the offending value as ``{1}``.
        """
        template = self._message
        assert template is not None  # ensured by reporting subclasses
        parameters = template.parameters
        if parameters is None:
            parameters = (context, subject)
        return Message(
            field=template.field,
            code=template.code,
            template=template.template,
            parameters=parameters,
        )

    def _repr_fields(self) -> dict[str, Any]:
        return {**super()._repr_fields(), "message": self._message}
