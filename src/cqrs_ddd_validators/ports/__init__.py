"""Protocols implemented by validators and message renderers."""

from __future__ import annotations

from .renderer import IMessageRenderer
from .validator import IValidator

__all__ = [
    "IMessageRenderer",
    "IValidator",
]
