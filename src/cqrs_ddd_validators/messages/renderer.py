"""Message template renderers.

:class:`PositionalMessageRenderer` is the default: ``{0}``, ``{1}``, ...
are replaced by the textual form of the parameter at that index.
:class:`StringFormatMessageRenderer` delegates to :meth:`str.format` and
fails loudly on a missing parameter.
"""

from __future__ import annotations

import logging
import re
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..ports.renderer import IMessageRenderer

logger = logging.getLogger("cqrs_ddd.validators.renderer")

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


class PositionalMessageRenderer:
    """Tolerant positional renderer.

    Placeholders referring to a missing parameter, and any other braces, are
    left in the output verbatim.  Quotes have no special meaning: neither
    ``''`` nor ``'{0}'`` is treated as an escape, so a quoted
    placeholder is still substituted and both quotes are kept.
    """

    def render(
        self,
        template: str | None,
        parameters: Sequence[Any] | None,
    ) -> str | None:
        if template is None:
            return None
        params = tuple(parameters or ())

        def _substitute(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < len(params):
                return str(params[index])
            return match.group(0)

        return _PLACEHOLDER.sub(_substitute, template)


class StringFormatMessageRenderer:
    """Strict renderer using Python's native string formatting."""

    def render(
        self,
        template: str | None,
        parameters: Sequence[Any] | None,
    ) -> str | None:
        if template is None:
            return None
        try:
            return template.format(*(parameters or ()))
        except (IndexError, KeyError) as e:
            logger.error("Missing message parameter %s in template %r", e, template)
            raise


_renderer_var: ContextVar[IMessageRenderer | None] = ContextVar(
    "message_renderer", default=None
)


def get_message_renderer() -> IMessageRenderer:
    """Get the message renderer for the current context.

    Creates a :class:`PositionalMessageRenderer` on first access within each
    context.
    """
    renderer = _renderer_var.get()
    if renderer is None:
        renderer = PositionalMessageRenderer()
        _renderer_var.set(renderer)
    return renderer


def set_message_renderer(renderer: IMessageRenderer) -> None:
    """Set a custom message renderer in the current context."""
    _renderer_var.set(renderer)
