"""FixedErrorValidator — reports an error whenever its condition passes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..exceptions import ConfigurationError
from ..predicates import true_predicate
from .base import AbstractValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.collection import Messages
    from ..messages.message import Message

T = TypeVar("T")


class FixedErrorValidator(AbstractValidator[T]):
    """Unconditionally (or conditionally, via ``condition``) forces an error.

    Useful for states that must never be reached, e.g. a combination of
    fields that is forbidden.
    """

    def __init__(
        self,
        message: Message,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        if message is None:
            raise ConfigurationError(
                "FixedErrorValidator requires a message", "FixedErrorValidator"
            )
        super().__init__(
            message,
            condition=condition if condition is not None else true_predicate(),
            value_provider=value_provider,
        )

    def _do_validate(self, obj: T, messages: Messages) -> Messages:
        messages.add_error(self._failure_message(obj, self.get_validation_value(obj)))
        return messages
