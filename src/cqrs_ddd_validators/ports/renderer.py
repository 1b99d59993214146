"""IMessageRenderer — turns a message template and its parameters into text."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class IMessageRenderer(Protocol):
    """Protocol for message template renderers."""

    def render(
        self,
        template: str | None,
        parameters: Sequence[Any] | None,
    ) -> str | None:
        """Interpolate *parameters* into *template*.

        Returns ``None`` when there is no template to render.
        """
        ...
