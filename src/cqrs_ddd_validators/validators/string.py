"""String rules: regular-expression pattern and trimmed length bounds."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, TypeVar

from ..exceptions import ConfigurationError
from ..messages.message import global_message
from .predicated import PredicatedValidator

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..messages.message import Message

T = TypeVar("T")


class PatternValidator(PredicatedValidator[T]):
    """
    Fails unless the subject's text fully matches *pattern*.

    A ``None`` subject never matches.  The pattern is compiled once, here;
    an invalid pattern raises :class:`ConfigurationError`.
    """

    DEFAULT_MESSAGE_CODE = "pattern"
    DEFAULT_PARAM_MESSAGE = "Value is not in the expected format"

    def __init__(
        self,
        pattern: str | re.Pattern[str],
        message: Message | None = None,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        try:
            self._pattern = re.compile(pattern)
        except re.error as e:
            raise ConfigurationError(
                f"Invalid pattern {pattern!r}: {e}", "PatternValidator"
            ) from e
        if message is None:
            message = global_message(self.DEFAULT_MESSAGE_CODE, self.DEFAULT_PARAM_MESSAGE)
        super().__init__(
            message,
            self._matches,
            condition=condition,
            value_provider=value_provider,
        )

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def _matches(self, value: Any) -> bool:
        if value is None:
            return False
        return self._pattern.fullmatch(str(value)) is not None

    def _repr_fields(self) -> dict[str, Any]:
        return {**super()._repr_fields(), "pattern": self._pattern.pattern}


class StringLengthValidator(PredicatedValidator[T]):
    """
    Fails unless the trimmed text length lies within inclusive bounds.

    Either bound may be ``None`` (open-ended).  A ``None`` subject has
    length 0.  The default message depends on which bounds are set and
    carries them as its preset parameters, so it renders as e.g. "between 5
    and 10" rather than with the ``(context, subject)`` fallback.  A message
    passed in explicitly gets the usual fallback when it has no parameters.
    """

    DEFAULT_MESSAGE_CODE = "length"
    DEFAULT_PARAM_MESSAGE_MIN_MAX = "Value must be between {0} and {1} characters in length"
    DEFAULT_PARAM_MESSAGE_MIN = "Value must be more than or equal to {0} characters in length"
    DEFAULT_PARAM_MESSAGE_MAX = "Value must be less than or equal to {0} characters in length"

    def __init__(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
        message: Message | None = None,
        *,
        condition: Callable[[T], bool] | None = None,
        value_provider: Callable[[T], Any] | None = None,
    ) -> None:
        for bound in (min_length, max_length):
            if bound is not None and bound < 0:
                raise ConfigurationError(
                    f"Length bounds must not be negative, got {bound}",
                    "StringLengthValidator",
                )
        if min_length is not None and max_length is not None and min_length > max_length:
            raise ConfigurationError(
                f"min_length ({min_length}) is greater than max_length ({max_length})",
                "StringLengthValidator",
            )
        self._min_length = min_length
        self._max_length = max_length
        if message is None:
            message = self._default_message(min_length, max_length)
        super().__init__(
            message,
            self._within_bounds,
            condition=condition,
            value_provider=value_provider,
        )

    @property
    def min_length(self) -> int | None:
        return self._min_length

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def _within_bounds(self, value: Any) -> bool:
        length = 0 if value is None else len(str(value).strip())
        if self._min_length is not None and length < self._min_length:
            return False
        return self._max_length is None or length <= self._max_length

    @classmethod
    def _default_message(cls, min_length: int | None, max_length: int | None) -> Message:
        if min_length is not None and max_length is not None:
            return global_message(
                cls.DEFAULT_MESSAGE_CODE, cls.DEFAULT_PARAM_MESSAGE_MIN_MAX, min_length, max_length
            )
        if min_length is not None:
            return global_message(
                cls.DEFAULT_MESSAGE_CODE, cls.DEFAULT_PARAM_MESSAGE_MIN, min_length
            )
        if max_length is not None:
            return global_message(
                cls.DEFAULT_MESSAGE_CODE, cls.DEFAULT_PARAM_MESSAGE_MAX, max_length
            )
        return global_message(cls.DEFAULT_MESSAGE_CODE)

    def _repr_fields(self) -> dict[str, Any]:
        return {
            **super()._repr_fields(),
            "min_length": self._min_length,
            "max_length": self._max_length,
        }
