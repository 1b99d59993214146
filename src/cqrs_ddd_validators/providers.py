"""Value providers: extract the subject of validation from a context object."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import ConfigurationError


def resolve_path(obj: Any, path: str) -> Any:
    """
    Resolve a dot-separated attribute path on *obj*.

    Mappings are traversed by key, anything else by attribute.  A missing
    segment or an intermediate ``None`` yields ``None``.  A list or tuple
    met along the way maps the remaining path over its items
    (``items.name`` gives ``[item.name for item in items]``).
    """
    parts = path.split(".")
    for index, part in enumerate(parts):
        if obj is None:
            return None
        if isinstance(obj, list | tuple):
            remaining = ".".join(parts[index:])
            return [resolve_path(item, remaining) for item in obj]
        obj = obj.get(part) if isinstance(obj, Mapping) else getattr(obj, part, None)
    return obj


class AttributeProvider:
    """Callable value provider bound to a dotted path."""

    __slots__ = ("path",)

    def __init__(self, path: str) -> None:
        if not path:
            raise ConfigurationError("Attribute path must not be empty", "attribute")
        self.path = path

    def __call__(self, obj: Any) -> Any:
        return resolve_path(obj, self.path)

    def __repr__(self) -> str:
        return f"attribute({self.path!r})"


def attribute(path: str) -> AttributeProvider:
    """Build a value provider resolving *path* on the context object.

    Usage::

        NotEmptyValidator(message, value_provider=attribute("address.city"))
    """
    return AttributeProvider(path)
