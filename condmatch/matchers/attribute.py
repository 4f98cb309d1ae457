"""Presence and substring matchers."""

from __future__ import annotations

from condmatch.errors import UnsupportedConditionValueTypeError
from condmatch.model import Condition, UserContext

__all__ = ["exists_match", "substring_match"]


def exists_match(condition: Condition, user: UserContext) -> bool:
    """Return True if the user has a non-null value for the attribute."""
    return user.has_attribute(condition.name)


def substring_match(condition: Condition, user: UserContext) -> bool:
    """Return True if the condition string occurs in the attribute string."""
    if not isinstance(condition.value, str):
        raise UnsupportedConditionValueTypeError(condition.name)
    return condition.value in user.get_string_attribute(condition.name)
