"""IValidator — composable object-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..messages.collection import Messages

T = TypeVar("T", contravariant=True)


@runtime_checkable
class IValidator(Protocol[T]):
    """Protocol for validators.

    Validators are composable via
    :class:`~cqrs_ddd_validators.validators.composite.CompositeValidator`.
    """

    def validate(self, obj: T, messages: Messages) -> Messages:
        """Validate *obj*, adding any findings to *messages*.

        Must return the same *messages* instance it was given.  Failures are
        reported as added messages, never as raised exceptions.
        """
        ...
