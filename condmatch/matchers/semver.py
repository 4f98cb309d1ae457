"""Semantic version matchers.

Each matcher compares the user's version attribute against the condition's
version with :func:`condmatch.semver.compare_versions` and maps the signed
result to a boolean.
"""

from __future__ import annotations

from condmatch.errors import (
    AttributeFormatInvalidError,
    UnsupportedConditionValueTypeError,
)
from condmatch.model import Condition, UserContext
from condmatch.semver import compare_versions

__all__ = [
    "semver_compare",
    "semver_eq_match",
    "semver_ge_match",
    "semver_gt_match",
    "semver_le_match",
    "semver_lt_match",
]


def semver_compare(condition: Condition, user: UserContext) -> int:
    """Return -1, 0 or 1 comparing the user's version to the condition's.

    Raises:
        UnsupportedConditionValueTypeError: Condition value is not a string.
        AttributeNotFoundError: Attribute missing.
        AttributeValueTypeInvalidError: Attribute is not a string.
        AttributeFormatInvalidError: Either version string is malformed.
    """
    if not isinstance(condition.value, str):
        raise UnsupportedConditionValueTypeError(condition.name)
    attribute = user.get_string_attribute(condition.name)
    try:
        return compare_versions(condition.value, attribute)
    except AttributeFormatInvalidError as exc:
        exc.condition_name = condition.name
        raise


def semver_eq_match(condition: Condition, user: UserContext) -> bool:
    return semver_compare(condition, user) == 0


def semver_ge_match(condition: Condition, user: UserContext) -> bool:
    return semver_compare(condition, user) >= 0


def semver_gt_match(condition: Condition, user: UserContext) -> bool:
    return semver_compare(condition, user) > 0


def semver_le_match(condition: Condition, user: UserContext) -> bool:
    return semver_compare(condition, user) <= 0


def semver_lt_match(condition: Condition, user: UserContext) -> bool:
    return semver_compare(condition, user) < 0
