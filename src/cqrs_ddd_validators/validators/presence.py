"""Presence rules: required and not-empty."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from ..messages.message import global_message
from .predicated import PredicatedValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.message import Message

T = TypeVar("T")


def _is_present(value: Any) -> bool:
    return value is not None


def _is_not_empty(value: Any) -> bool:
    return value is not None and bool(str(value).strip())


class RequiredValidator(PredicatedValidator[T]):
    """Fails when the subject is ``None``."""

    DEFAULT_MESSAGE_CODE = "required"
    DEFAULT_PARAM_MESSAGE = "Value is required"

    def __init__(
        self,
        message: Message | None = None,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        if message is None:
            message = global_message(self.DEFAULT_MESSAGE_CODE, self.DEFAULT_PARAM_MESSAGE)
        super().__init__(
            message,
            _is_present,
            condition=condition,
            value_provider=value_provider,
        )


class NotEmptyValidator(PredicatedValidator[T]):
    """Fails when the subject is ``None`` or blank once whitespace is trimmed."""

    DEFAULT_MESSAGE_CODE = "empty"
    DEFAULT_PARAM_MESSAGE = "Value is required and must not be empty"

    def __init__(
        self,
        message: Message | None = None,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        if message is None:
            message = global_message(self.DEFAULT_MESSAGE_CODE, self.DEFAULT_PARAM_MESSAGE)
        super().__init__(
            message,
            _is_not_empty,
            condition=condition,
            value_provider=value_provider,
        )
