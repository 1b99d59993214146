"""CompositeValidator — validates one subject against an ordered list of validators."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .base import BaseValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.collection import Messages
    from ..ports.validator import IValidator

logger = logging.getLogger("cqrs_ddd.validators.composite")

T = TypeVar("T")
R = TypeVar("R")


class CompositeValidator(BaseValidator[T], Generic[T, R]):
    """
    Runs child validators in order against the same subject.

    The subject is the context object, or what ``value_provider`` derives
    from it, so children may validate a different type (``R``) than the
    composite's own context (``T``).  The condition, as everywhere, sees the
    raw context object.

    With ``stop_on_first_error`` the remaining children are skipped as soon
    as one of them adds an error.  Only errors added while this composite
    runs count: errors already in the collection, and any warnings or
    infos, never stop iteration.

    Usage::

        validator = CompositeValidator(
            NotEmptyValidator(field_message("name", "empty", "Name is required")),
            CompositeValidator(
                RequiredValidator(),
                StringLengthValidator(None, 10),
                value_provider=attribute("nickname"),
            ),
            stop_on_first_error=True,
        )
        messages = validator.validate(person, Messages())
    """

    def __init__(
        self,
        *validators: IValidator[R],
        stop_on_first_error: bool = False,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], R] | None = None,
    ) -> None:
        super().__init__(condition=condition, value_provider=value_provider)
        self._validators: tuple[IValidator[R], ...] = tuple(validators)
        self._stop_on_first_error = stop_on_first_error

    @property
    def validators(self) -> tuple[IValidator[R], ...]:
        return self._validators

    @property
    def stop_on_first_error(self) -> bool:
        return self._stop_on_first_error

    def _do_validate(self, obj: T, messages: Messages) -> Messages:
        subject = self.get_validation_value(obj)
        original_error_count = messages.error_count()
        for index, validator in enumerate(self._validators):
            validator.validate(subject, messages)
            if self._stop_on_first_error and messages.error_count() > original_error_count:
                logger.debug(
                    "Stopping after validator %d of %d: %r added an error",
                    index + 1,
                    len(self._validators),
                    validator,
                )
                break
        return messages

    def _repr_fields(self) -> dict[str, Any]:
        return {
            **super()._repr_fields(),
            "stop_on_first_error": self._stop_on_first_error,
            "validators": list(self._validators),
        }
