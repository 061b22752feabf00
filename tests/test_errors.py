"""Tests for the typed error hierarchy."""

from __future__ import annotations

import pytest

from contractgen.utils.errors import (
    ArgumentError,
    GenerationError,
    PropertyAssignmentError,
    UnsupportedTypeError,
)


class Widget:
    pass


def test_unsupported_type_message() -> None:
    err = UnsupportedTypeError(Widget, "no public constructor")
    assert str(err) == "Unsupported type: Widget (no public constructor)"
    assert err.target is Widget
    assert isinstance(err, TypeError)
    assert isinstance(err, GenerationError)


def test_unsupported_type_non_class_target() -> None:
    err = UnsupportedTypeError(list[int])
    assert str(err) == f"Unsupported type: {list[int]!r}"
    assert err.reason is None


def test_property_assignment_error_keeps_cause() -> None:
    cause = ValueError("rejected")
    err = PropertyAssignmentError(Widget, "size", cause)
    assert err.__cause__ is cause
    assert err.property_name == "size"
    assert "'size' on Widget" in str(err)
    assert "ValueError: rejected" in str(err)


def test_argument_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        raise ArgumentError("bad")
