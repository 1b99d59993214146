"""Tests for message renderers and the context-local renderer setting."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from cqrs_ddd_validators.messages import (
    PositionalMessageRenderer,
    StringFormatMessageRenderer,
    get_message_renderer,
    global_message,
    set_message_renderer,
)
from cqrs_ddd_validators.ports import IMessageRenderer


class TestPositionalMessageRenderer:
    def test_substitutes_placeholders_by_index(self) -> None:
        renderer = PositionalMessageRenderer()

        assert renderer.render("{1} before {0}", ("a", "b")) == "b before a"

    def test_uses_textual_form_of_parameters(self) -> None:
        renderer = PositionalMessageRenderer()

        assert renderer.render("[{0}] [{1}]", (1234, None)) == "[1234] [None]"

    def test_repeated_placeholder(self) -> None:
        assert PositionalMessageRenderer().render("{0}-{0}", ("x",)) == "x-x"

    def test_missing_parameter_left_verbatim(self) -> None:
        renderer = PositionalMessageRenderer()

        assert renderer.render("{0} and {1}", ("only",)) == "only and {1}"
        assert renderer.render("{0}", None) == "{0}"

    def test_other_braces_untouched(self) -> None:
        renderer = PositionalMessageRenderer()

        assert renderer.render("{name} {} {0}", ("x",)) == "{name} {} x"

    def test_quotes_have_no_special_meaning(self) -> None:
        renderer = PositionalMessageRenderer()

        assert renderer.render("it''s '{0}'", ("x",)) == "it''s 'x'"

    def test_none_template(self) -> None:
        assert PositionalMessageRenderer().render(None, ("x",)) is None


class TestStringFormatMessageRenderer:
    def test_formats_positionally(self) -> None:
        renderer = StringFormatMessageRenderer()

        assert renderer.render("{0} is {1:>3}", ("x", 7)) == "x is   7"

    def test_missing_parameter_logged_and_raised(self, caplog) -> None:
        caplog.set_level(logging.ERROR)
        renderer = StringFormatMessageRenderer()

        with pytest.raises(IndexError):
            renderer.render("{0} and {1}", ("only",))

        assert "Missing message parameter" in caplog.text

    def test_none_template(self) -> None:
        assert StringFormatMessageRenderer().render(None, ()) is None


def test_renderers_satisfy_protocol() -> None:
    assert isinstance(PositionalMessageRenderer(), IMessageRenderer)
    assert isinstance(StringFormatMessageRenderer(), IMessageRenderer)


def test_default_renderer_is_positional() -> None:
    assert isinstance(get_message_renderer(), PositionalMessageRenderer)


def test_message_uses_current_renderer() -> None:
    renderer = MagicMock(spec=IMessageRenderer)
    renderer.render.return_value = "rendered!"
    set_message_renderer(renderer)

    message = global_message("code", "template {0}", "p")

    assert message.rendered_message == "rendered!"
    renderer.render.assert_called_once_with("template {0}", ("p",))
