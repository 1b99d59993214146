"""Tests for the Messages collection."""

from __future__ import annotations

import pytest

from cqrs_ddd_validators.exceptions import ValidationFailedError
from cqrs_ddd_validators.messages import Messages, field_message, global_message

ERROR = field_message("name", "required", "Name is required")
WARNING = global_message("deprecated", "Field {0} is deprecated", "nickname")
INFO = global_message("normalised", "Value was trimmed")


def test_new_collection_is_empty(messages: Messages) -> None:
    assert not messages.has_errors()
    assert not messages.has_warnings()
    assert not messages.has_infos()
    assert messages.is_valid
    assert messages.size() == 0
    assert len(messages) == 0
    assert messages.errors == ()


def test_add_methods_return_same_collection(messages: Messages) -> None:
    assert messages.add_error(ERROR) is messages
    assert messages.add_warning(WARNING) is messages
    assert messages.add_info(INFO) is messages


def test_severities_are_kept_apart(messages: Messages) -> None:
    messages.add_error(ERROR).add_warning(WARNING).add_info(INFO)

    assert messages.errors == (ERROR,)
    assert messages.warnings == (WARNING,)
    assert messages.infos == (INFO,)
    assert messages.has_errors()
    assert messages.has_warnings()
    assert messages.has_infos()
    assert not messages.is_valid
    assert messages.size() == 3


def test_warnings_alone_do_not_make_it_invalid(messages: Messages) -> None:
    messages.add_warning(WARNING).add_info(INFO)

    assert not messages.has_errors()
    assert messages.is_valid


def test_insertion_order_preserved(messages: Messages) -> None:
    first = global_message("a")
    second = global_message("b")
    third = global_message("c")

    messages.add_error(second).add_error(first).add_error(third)

    assert [m.code for m in messages.errors] == ["b", "a", "c"]


def test_duplicates_are_kept(messages: Messages) -> None:
    messages.add_error(ERROR).add_error(ERROR)

    assert messages.size() == 2


def test_views_are_read_only(messages: Messages) -> None:
    messages.add_error(ERROR)

    errors = messages.errors
    assert isinstance(errors, tuple)
    messages.add_error(global_message("other"))
    assert len(errors) == 1


def test_has_error_like_uses_value_equality(messages: Messages) -> None:
    messages.add_error(field_message("name", "required", "Name is required"))

    assert messages.has_error_like(field_message("name", "required", "Name is required"))
    assert not messages.has_error_like(field_message("name", "empty", "Name is required"))
    assert not messages.has_warning_like(ERROR)


def test_has_error_like_ignores_fallback_parameters(messages: Messages) -> None:
    context = {"name": " "}
    messages.add_error(field_message("name", "required", "Name is required", context, " "))

    assert messages.has_error_like(ERROR)
    assert not messages.has_error_like(
        field_message("name", "required", "Name is required", context, "other")
    )


def test_has_warning_and_info_like(messages: Messages) -> None:
    messages.add_warning(WARNING).add_info(INFO)

    assert messages.has_warning_like(WARNING)
    assert messages.has_info_like(INFO)
    assert not messages.has_error_like(WARNING)


def test_error_count(messages: Messages) -> None:
    messages.add_error(ERROR).add_warning(WARNING).add_error(ERROR)

    assert messages.error_count() == 2


def test_for_field(messages: Messages) -> None:
    other = field_message("age", "min", "Too young")
    messages.add_error(ERROR).add_error(other).add_error(global_message("global"))

    assert messages.for_field("name") == (ERROR,)
    assert messages.for_field("age") == (other,)
    assert [m.code for m in messages.for_field(None)] == ["global"]


def test_extend_appends_per_severity(messages: Messages) -> None:
    messages.add_error(global_message("first"))
    other = Messages().add_error(ERROR).add_warning(WARNING).add_info(INFO)

    assert messages.extend(other) is messages
    assert [m.code for m in messages.errors] == ["first", "required"]
    assert messages.warnings == (WARNING,)
    assert messages.infos == (INFO,)


def test_to_dict(messages: Messages) -> None:
    messages.add_error(ERROR).add_warning(WARNING)

    assert messages.to_dict() == {
        "errors": [{"field": "name", "code": "required", "message": "Name is required"}],
        "warnings": [
            {"field": None, "code": "deprecated", "message": "Field nickname is deprecated"}
        ],
        "infos": [],
    }


def test_raise_for_errors_without_errors(messages: Messages) -> None:
    messages.add_warning(WARNING)

    messages.raise_for_errors()


def test_raise_for_errors(messages: Messages) -> None:
    messages.add_error(ERROR).add_error(global_message("other"))

    with pytest.raises(ValidationFailedError) as exc_info:
        messages.raise_for_errors()

    assert exc_info.value.messages is messages
    assert "2 error(s)" in str(exc_info.value)
    assert "required, other" in str(exc_info.value)


def test_repr(messages: Messages) -> None:
    messages.add_error(ERROR).add_info(INFO)

    assert repr(messages) == "Messages(errors=1, warnings=0, infos=1)"
