"""Message — one immutable validation finding."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .renderer import get_message_renderer


class Message(BaseModel):
    """A global or field-related validation message.

    A global message has no ``field``; a field message names the property it
    applies to.  ``template`` may contain positional placeholders (``{0}``,
    ``{1}``, ...) which are filled from ``parameters`` when rendered.

    Messages are value objects: equality covers
    ``(field, code, template, parameters)``.  The hash leaves the parameters
    out, since failure messages often carry the (unhashable) context object
    as a parameter; equal messages still hash equal.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    field: str | None = None
    template: str | None = None
    parameters: tuple[Any, ...] | None = None

    @field_validator("parameters", mode="before")
    @classmethod
    def _normalise_parameters(cls, value: Any) -> tuple[Any, ...] | None:
        # An empty parameter list means "no preset parameters".
        if value is None:
            return None
        value = tuple(value)
        return value or None

    def __hash__(self) -> int:
        return hash((self.field, self.code, self.template))

    def is_like(self, other: Message) -> bool:
        """
        True if *other* was raised from this message.

        Field, code and template must be equal.  Parameters are compared only
        when this message presets them, so a template without parameters
        matches failures that were given the ``(context, subject)`` fallback.
        """
        if (self.field, self.code, self.template) != (other.field, other.code, other.template):
            return False
        return self.parameters is None or self.parameters == other.parameters

    @property
    def is_global(self) -> bool:
        return self.field is None

    @property
    def rendered_message(self) -> str | None:
        """The template rendered with the parameters by the current renderer."""
        return get_message_renderer().render(self.template, self.parameters)

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.rendered_message,
        }


def global_message(code: str, template: str | None = None, *parameters: Any) -> Message:
    """Create a message not associated with any field."""
    return Message(code=code, template=template, parameters=parameters)


def field_message(
    field: str | None,
    code: str,
    template: str | None = None,
    *parameters: Any,
) -> Message:
    """Create a message associated with *field*."""
    return Message(field=field, code=code, template=template, parameters=parameters)
