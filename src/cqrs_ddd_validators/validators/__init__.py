"""Validators: the base contract, leaf rules and the composite."""

from __future__ import annotations

from .base import AbstractValidator, BaseValidator
from .composite import CompositeValidator
from .fixed import FixedErrorValidator
from .predicated import PredicatedValidator
from .presence import NotEmptyValidator, RequiredValidator
from .string import PatternValidator, StringLengthValidator

__all__ = [
    "AbstractValidator",
    "BaseValidator",
    "CompositeValidator",
    "FixedErrorValidator",
    "NotEmptyValidator",
    "PatternValidator",
    "PredicatedValidator",
    "RequiredValidator",
    "StringLengthValidator",
]
