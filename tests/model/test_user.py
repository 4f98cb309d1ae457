"""Tests for UserContext attribute accessors."""

import pytest

from condmatch.errors import AttributeNotFoundError, AttributeValueTypeInvalidError
from condmatch.model import UserContext, ValueKind


@pytest.fixture
def ctx() -> UserContext:
    return UserContext(
        id="u1",
        attributes={
            "version": "2.0.1",
            "age": 30,
            "score": 4.5,
            "beta": True,
            "unset": None,
        },
    )


def test_get_attribute(ctx: UserContext) -> None:
    assert ctx.get_attribute("age") == 30
    with pytest.raises(AttributeNotFoundError, match='no attribute named "missing"'):
        ctx.get_attribute("missing")


def test_none_counts_as_missing(ctx: UserContext) -> None:
    assert ctx.has_attribute("unset") is False
    with pytest.raises(AttributeNotFoundError):
        ctx.get_attribute("unset")


def test_typed_accessors(ctx: UserContext) -> None:
    assert ctx.get_string_attribute("version") == "2.0.1"
    assert ctx.get_number_attribute("age") == 30
    assert ctx.get_number_attribute("score") == 4.5
    assert ctx.get_bool_attribute("beta") is True
    assert ctx.get_typed_attribute("score", ValueKind.NUMBER) == 4.5


def test_typed_accessor_type_errors(ctx: UserContext) -> None:
    with pytest.raises(AttributeValueTypeInvalidError) as exc_info:
        ctx.get_string_attribute("age")
    assert exc_info.value.condition_name == "age"
    assert exc_info.value.expected == "string"

    with pytest.raises(AttributeValueTypeInvalidError):
        ctx.get_number_attribute("beta")
    with pytest.raises(AttributeValueTypeInvalidError):
        ctx.get_bool_attribute("age")


def test_typed_accessor_missing(ctx: UserContext) -> None:
    with pytest.raises(AttributeNotFoundError):
        ctx.get_string_attribute("missing")
