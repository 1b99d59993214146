"""
Fluent builder for constructing validator trees.

Example::

    validator = (
        ValidatorBuilder(stop_on_first_error=True)
        .not_empty(field_message("name", "empty", "Name is required"),
                   value_provider=attribute("name"))
        .field("address")
            .required(field_message("address.city", "required", "City is required"),
                      value_provider=attribute("city"))
            .pattern(r"[A-Z]{1,2}\\d[A-Z\\d]? ?\\d[A-Z]{2}",
                     field_message("address.postcode", "pattern", "Invalid postcode"),
                     value_provider=attribute("postcode"))
        .end_group()
        .build()
    )
    # → Composite(stop_on_first_error)[not_empty(name), Composite(address)[...]]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .exceptions import ConfigurationError
from .providers import attribute
from .validators.composite import CompositeValidator
from .validators.fixed import FixedErrorValidator
from .validators.presence import NotEmptyValidator, RequiredValidator
from .validators.string import PatternValidator, StringLengthValidator

if TYPE_CHECKING:
    import re
    from collections.abc import Callable

    from .messages.message import Message
    from .ports.validator import IValidator


@dataclass
class _Group:
    stop_on_first_error: bool = False
    condition: Callable[[Any], bool] | None = None
    value_provider: Callable[[Any], Any] | None = None
    validators: list[IValidator[Any]] = field(default_factory=list)

    def to_composite(self) -> CompositeValidator[Any, Any]:
        return CompositeValidator(
            *self.validators,
            stop_on_first_error=self.stop_on_first_error,
            condition=self.condition,
            value_provider=self.value_provider,
        )


class ValidatorBuilder:
    """
    Fluent builder for composing validator trees.

    Validators added at the same level are children of the same composite.
    Use ``group()`` / ``field()`` to open a nested composite and
    ``end_group()`` to close it.
    """

    def __init__(
        self,
        *,
        stop_on_first_error: bool = False,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> None:
        self._stop_on_first_error = stop_on_first_error
        self._condition = condition
        self._value_provider = value_provider
        self._root = self._new_root()
        self._stack: list[_Group] = []

    # -- leaf rules ----------------------------------------------------------

    def add(self, validator: IValidator[Any]) -> ValidatorBuilder:
        """Add an already-constructed validator to the current group."""
        self._current().validators.append(validator)
        return self

    def required(
        self,
        message: Message | None = None,
        *,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> ValidatorBuilder:
        return self.add(
            RequiredValidator(message, condition=condition, value_provider=value_provider)
        )

    def not_empty(
        self,
        message: Message | None = None,
        *,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> ValidatorBuilder:
        return self.add(
            NotEmptyValidator(message, condition=condition, value_provider=value_provider)
        )

    def pattern(
        self,
        pattern: str | re.Pattern[str],
        message: Message | None = None,
        *,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> ValidatorBuilder:
        return self.add(
            PatternValidator(
                pattern, message, condition=condition, value_provider=value_provider
            )
        )

    def length(
        self,
        min_length: int | None = None,
        max_length: int | None = None,
        message: Message | None = None,
        *,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> ValidatorBuilder:
        return self.add(
            StringLengthValidator(
                min_length,
                max_length,
                message,
                condition=condition,
                value_provider=value_provider,
            )
        )

    def fail(
        self,
        message: Message,
        *,
        condition: Callable[[Any], bool] | None = None,
    ) -> ValidatorBuilder:
        """Add a :class:`FixedErrorValidator` (always fails when *condition* passes)."""
        return self.add(FixedErrorValidator(message, condition=condition))

    # -- grouping ------------------------------------------------------------

    def group(
        self,
        *,
        stop_on_first_error: bool = False,
        condition: Callable[[Any], bool] | None = None,
        value_provider: Callable[[Any], Any] | None = None,
    ) -> ValidatorBuilder:
        """Open a nested composite.  Close with ``end_group()``."""
        self._stack.append(
            _Group(
                stop_on_first_error=stop_on_first_error,
                condition=condition,
                value_provider=value_provider,
            )
        )
        return self

    def field(
        self,
        path: str,
        *,
        stop_on_first_error: bool = False,
        condition: Callable[[Any], bool] | None = None,
    ) -> ValidatorBuilder:
        """Open a nested composite validating the value at dotted *path*."""
        return self.group(
            stop_on_first_error=stop_on_first_error,
            condition=condition,
            value_provider=attribute(path),
        )

    def end_group(self) -> ValidatorBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ConfigurationError("No open group to close", "ValidatorBuilder")
        group = self._stack.pop()
        if not group.validators:
            raise ConfigurationError("Cannot create an empty group", "ValidatorBuilder")
        self._current().validators.append(group.to_composite())
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> CompositeValidator[Any, Any]:
        """
        Finalise and return the root composite.

        Raises:
            ConfigurationError: If groups are still open or nothing was added.
        """
        if self._stack:
            raise ConfigurationError(
                f"{len(self._stack)} group(s) still open; "
                f"call end_group() before build()",
                "ValidatorBuilder",
            )
        if not self._root.validators:
            raise ConfigurationError("No validators added to builder", "ValidatorBuilder")
        return self._root.to_composite()

    def reset(self) -> ValidatorBuilder:
        """Clear all validators and return ``self`` for reuse."""
        self._root = self._new_root()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _new_root(self) -> _Group:
        return _Group(
            stop_on_first_error=self._stop_on_first_error,
            condition=self._condition,
            value_provider=self._value_provider,
        )

    def _current(self) -> _Group:
        if self._stack:
            return self._stack[-1]
        return self._root
