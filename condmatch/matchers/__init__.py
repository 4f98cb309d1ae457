"""Condition matchers.

Every matcher has the signature ``(condition, user) -> bool`` and raises a
:class:`condmatch.errors.MatchError` when the condition cannot be evaluated.

Usage:
    from condmatch.matchers import get_matcher

    matched = get_matcher(condition.match)(condition, user)
"""

from .attribute import exists_match, substring_match
from .registry import MATCHERS, Matcher, get_matcher, register_matcher
from .relational import (
    either_match,
    exact_match,
    ge_match,
    gt_match,
    le_match,
    lt_match,
)
from .semver import (
    semver_compare,
    semver_eq_match,
    semver_ge_match,
    semver_gt_match,
    semver_le_match,
    semver_lt_match,
)

__all__ = [
    # Registry
    "MATCHERS",
    "Matcher",
    "get_matcher",
    "register_matcher",
    # Relational
    "exact_match",
    "gt_match",
    "ge_match",
    "lt_match",
    "le_match",
    "either_match",
    # Attribute
    "exists_match",
    "substring_match",
    # Semantic version
    "semver_compare",
    "semver_eq_match",
    "semver_ge_match",
    "semver_gt_match",
    "semver_le_match",
    "semver_lt_match",
]
