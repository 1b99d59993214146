"""Shared fixtures for validator tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from cqrs_ddd_validators.messages import (
    Messages,
    PositionalMessageRenderer,
    set_message_renderer,
)


@dataclass
class Address:
    city: str | None = None
    postcode: str | None = None


@dataclass
class Person:
    name: str | None = None
    age: int | None = None
    address: Address | None = None


@pytest.fixture(autouse=True)
def _default_renderer():
    """Every test starts with the default positional renderer."""
    set_message_renderer(PositionalMessageRenderer())


@pytest.fixture
def messages() -> Messages:
    return Messages()


@pytest.fixture
def person() -> Person:
    return Person(name="Jane", age=34, address=Address(city="Leeds", postcode="LS1 4AP"))
