"""Lookup table from match type names to matcher callables."""

from __future__ import annotations

from typing import Dict, Union

from condmatch.errors import UnknownMatchTypeError
from condmatch.model import MatchType

from .attribute import exists_match, substring_match
from .relational import (
    Matcher,
    exact_match,
    ge_match,
    gt_match,
    le_match,
    lt_match,
)
from .semver import (
    semver_eq_match,
    semver_ge_match,
    semver_gt_match,
    semver_le_match,
    semver_lt_match,
)

__all__ = [
    "MATCHERS",
    "Matcher",
    "get_matcher",
    "register_matcher",
]

MATCHERS: Dict[str, Matcher] = {
    MatchType.EXACT.value: exact_match,
    MatchType.EXISTS.value: exists_match,
    MatchType.GT.value: gt_match,
    MatchType.GE.value: ge_match,
    MatchType.LT.value: lt_match,
    MatchType.LE.value: le_match,
    MatchType.SUBSTRING.value: substring_match,
    MatchType.SEMVER_EQ.value: semver_eq_match,
    MatchType.SEMVER_GE.value: semver_ge_match,
    MatchType.SEMVER_GT.value: semver_gt_match,
    MatchType.SEMVER_LE.value: semver_le_match,
    MatchType.SEMVER_LT.value: semver_lt_match,
}


def get_matcher(match: Union[MatchType, str]) -> Matcher:
    """Return the matcher registered for ``match``.

    Raises:
        UnknownMatchTypeError: If nothing is registered under that name.
    """
    key = match.value if isinstance(match, MatchType) else match
    try:
        return MATCHERS[key]
    except (KeyError, TypeError):
        raise UnknownMatchTypeError(match) from None


def register_matcher(name: str, matcher: Matcher, replace: bool = False) -> None:
    """Register a custom matcher under ``name``.

    Raises:
        ValueError: If ``name`` is taken and ``replace`` is False.
    """
    if name in MATCHERS and not replace:
        raise ValueError(f"Matcher already registered for '{name}'")
    MATCHERS[name] = matcher
