"""cqrs-ddd-validators — Declarative, composable validation of in-memory objects.

Build a tree of validators (leaf rules and composites), run it against a
context object, and inspect the collected error, warning and info messages.
"""

from __future__ import annotations

from .builder import ValidatorBuilder
from .exceptions import ConfigurationError, ValidationFailedError, ValidatorsError

# ── Messages ─────────────────────────────────────────────────────
from .messages import (
    Message,
    Messages,
    PositionalMessageRenderer,
    StringFormatMessageRenderer,
    field_message,
    get_message_renderer,
    global_message,
    set_message_renderer,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IMessageRenderer, IValidator
from .predicates import false_predicate, negate, true_predicate
from .providers import AttributeProvider, attribute, resolve_path

# ── Validators ───────────────────────────────────────────────────
from .validators import (
    AbstractValidator,
    BaseValidator,
    CompositeValidator,
    FixedErrorValidator,
    NotEmptyValidator,
    PatternValidator,
    PredicatedValidator,
    RequiredValidator,
    StringLengthValidator,
)

__all__ = [
    # Messages
    "Message",
    "Messages",
    "PositionalMessageRenderer",
    "StringFormatMessageRenderer",
    "field_message",
    "get_message_renderer",
    "global_message",
    "set_message_renderer",
    # Ports
    "IMessageRenderer",
    "IValidator",
    # Validators
    "AbstractValidator",
    "BaseValidator",
    "CompositeValidator",
    "FixedErrorValidator",
    "NotEmptyValidator",
    "PatternValidator",
    "PredicatedValidator",
    "RequiredValidator",
    "StringLengthValidator",
    # Builder
    "ValidatorBuilder",
    # Guards and value providers
    "AttributeProvider",
    "attribute",
    "false_predicate",
    "negate",
    "resolve_path",
    "true_predicate",
    # Exceptions
    "ConfigurationError",
    "ValidationFailedError",
    "ValidatorsError",
]
