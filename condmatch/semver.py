"""Semantic version splitting and precision-limited comparison.

A version string has the shape ``core[-prerelease][+build]`` where ``core``
is one to three dot-separated non-negative integers. Splitting produces a
token list: the numeric core segments followed by the prerelease identifier,
if any. Build metadata is validated and then dropped, so it never affects
ordering.

Comparison only walks as many tokens as the *target* has. A target of
``"2.0"`` therefore treats ``"2.0.0"`` and ``"2.0.7"`` as equal to itself,
which lets ``semver_ge 2.0`` mean "at least 2.0" regardless of patch level.

Example:
    >>> compare_versions("2.0", "2.0.1")
    0
    >>> compare_versions("1.0.0", "1.0.0-beta")
    -1
"""

from __future__ import annotations

import re
from enum import IntEnum
from typing import List, Optional

from condmatch.config import SEMVER_CONFIG, SemanticVersionConfig
from condmatch.errors import AttributeFormatInvalidError

__all__ = [
    "SuffixKind",
    "compare_version_parts",
    "compare_versions",
    "is_alnum_hyphen",
    "is_digits_only",
    "split_semantic_version",
    "suffix_kind",
]

_DIGITS = re.compile(r"[0-9]+")
_ALNUM_HYPHEN = re.compile(r"[A-Za-z0-9-]*")
_WHITESPACE = re.compile(r"\s")


class SuffixKind(IntEnum):
    """Which suffix, if any, a version string carries."""

    BUILD = -1
    NONE = 0
    PRERELEASE = 1


def is_digits_only(token: str) -> bool:
    """Return True if ``token`` is one or more ASCII digits."""
    return _DIGITS.fullmatch(token) is not None


def is_alnum_hyphen(token: str) -> bool:
    """Return True if ``token`` holds only ASCII alphanumerics and hyphens.

    The empty string is accepted.
    """
    return _ALNUM_HYPHEN.fullmatch(token) is not None


def suffix_kind(
    version: str, config: SemanticVersionConfig = SEMVER_CONFIG
) -> SuffixKind:
    """Classify ``version`` by whichever separator occurs first in it."""
    pre_idx = version.find(config.prerelease_separator)
    build_idx = version.find(config.build_separator)
    if pre_idx == -1 and build_idx == -1:
        return SuffixKind.NONE
    if build_idx == -1:
        return SuffixKind.PRERELEASE
    if pre_idx == -1:
        return SuffixKind.BUILD
    return SuffixKind.PRERELEASE if pre_idx < build_idx else SuffixKind.BUILD


def _strip_build(
    version: str, kind: SuffixKind, suffix: str, config: SemanticVersionConfig
) -> str:
    """Validate and drop build metadata, returning the comparable suffix."""
    if kind is SuffixKind.BUILD:
        if not is_alnum_hyphen(suffix):
            raise AttributeFormatInvalidError(version, "invalid build metadata")
        return ""
    prerelease, sep, build = suffix.partition(config.build_separator)
    if sep and not is_alnum_hyphen(build):
        raise AttributeFormatInvalidError(version, "invalid build metadata")
    return prerelease


def split_semantic_version(
    version: str, config: SemanticVersionConfig = SEMVER_CONFIG
) -> List[str]:
    """Split a version string into comparable tokens.

    Args:
        version: Version string such as ``"1.2.3-beta+exp"``.
        config: Grammar settings.

    Returns:
        Numeric core tokens followed by the prerelease token, if present.

    Raises:
        AttributeFormatInvalidError: If the string violates the grammar.
    """
    if not version or _WHITESPACE.search(version):
        raise AttributeFormatInvalidError(version, "empty or contains whitespace")

    prefix = version
    suffix = ""
    kind = suffix_kind(version, config)

    if kind is not SuffixKind.NONE:
        if version.count(config.build_separator) > 1:
            raise AttributeFormatInvalidError(
                version, "more than one build separator"
            )
        sep = (
            config.prerelease_separator
            if kind is SuffixKind.PRERELEASE
            else config.build_separator
        )
        prefix, _, suffix = version.partition(sep)
        if not prefix or not suffix:
            raise AttributeFormatInvalidError(
                version, f"empty value around separator {sep!r}"
            )
        suffix = _strip_build(version, kind, suffix, config)

    if not is_alnum_hyphen(suffix):
        raise AttributeFormatInvalidError(version, "invalid prerelease identifier")

    parts = prefix.split(".")
    if not 0 < len(parts) <= config.max_core_parts:
        raise AttributeFormatInvalidError(
            version, f"expected 1 to {config.max_core_parts} core segments"
        )
    for part in parts:
        if not is_digits_only(part):
            raise AttributeFormatInvalidError(
                version, f"non-numeric core segment {part!r}"
            )

    if suffix:
        parts.append(suffix)
    return parts


def _sign(left: str, right: str) -> int:
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _compare_digits(left: str, right: str) -> int:
    """Order two digit strings numerically without converting them to int.

    Segments may be arbitrarily long, so ``int()`` and its digit limit are
    avoided: once leading zeros are gone, the longer string is the larger
    number and equal lengths compare lexically.
    """
    left = left.lstrip("0")
    right = right.lstrip("0")
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return _sign(left, right)


def compare_version_parts(
    target_parts: List[str],
    version_parts: List[str],
    version_is_prerelease: bool,
    target_is_prerelease: bool,
) -> int:
    """Compare two token lists up to the precision of the target.

    Args:
        target_parts: Tokens of the condition's version.
        version_parts: Tokens of the attribute's version.
        version_is_prerelease: Whether the attribute string is a prerelease.
        target_is_prerelease: Whether the target string is a prerelease.

    Returns:
        -1, 0 or 1 as the attribute is less than, equal to or greater than
        the target.
    """
    for idx, target_token in enumerate(target_parts):
        if len(version_parts) <= idx:
            return 1 if version_is_prerelease else -1

        token = version_parts[idx]
        if not is_digits_only(token):
            result = _sign(token, target_token)
        elif is_digits_only(target_token):
            result = _compare_digits(token, target_token)
        else:
            return -1

        if result:
            return result

    if version_is_prerelease and not target_is_prerelease:
        return -1
    return 0


def compare_versions(
    target: str,
    version: str,
    config: Optional[SemanticVersionConfig] = None,
) -> int:
    """Compare an attribute version against a target version.

    Args:
        target: The condition's version string.
        version: The user's attribute version string.
        config: Grammar settings (defaults to ``SEMVER_CONFIG``).

    Returns:
        -1, 0 or 1 as ``version`` is less than, equal to or greater than
        ``target``.

    Raises:
        AttributeFormatInvalidError: If either string is not a valid version.
    """
    cfg = config if config is not None else SEMVER_CONFIG
    target_parts = split_semantic_version(target, cfg)
    version_parts = split_semantic_version(version, cfg)
    return compare_version_parts(
        target_parts,
        version_parts,
        version_is_prerelease=suffix_kind(version, cfg) is SuffixKind.PRERELEASE,
        target_is_prerelease=suffix_kind(target, cfg) is SuffixKind.PRERELEASE,
    )
