"""Messages: findings, their collection, and rendering."""

from __future__ import annotations

from .collection import Messages
from .message import Message, field_message, global_message
from .renderer import (
    PositionalMessageRenderer,
    StringFormatMessageRenderer,
    get_message_renderer,
    set_message_renderer,
)

__all__ = [
    "Message",
    "Messages",
    "PositionalMessageRenderer",
    "StringFormatMessageRenderer",
    "field_message",
    "get_message_renderer",
    "global_message",
    "set_message_renderer",
]
