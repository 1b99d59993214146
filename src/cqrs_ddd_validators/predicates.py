"""Ready-made guard predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def true_predicate() -> Callable[[Any], bool]:
    """A predicate that accepts everything."""
    return lambda _obj: True


def false_predicate() -> Callable[[Any], bool]:
    """A predicate that rejects everything."""
    return lambda _obj: False


def negate(predicate: Callable[[Any], bool]) -> Callable[[Any], bool]:
    """Invert *predicate*."""
    return lambda obj: not predicate(obj)
