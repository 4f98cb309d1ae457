"""Error taxonomy for condition evaluation.

Every failure a matcher can report is a :class:`MatchError`. Matchers raise
them; :func:`condmatch.evaluator.evaluate_condition` turns them into a
``MatchResult`` with ``matched=False`` so the caller can treat the condition
as unknown rather than false.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "MatchError",
    "AttributeNotFoundError",
    "AttributeValueTypeInvalidError",
    "UnsupportedConditionValueTypeError",
    "AttributeFormatInvalidError",
    "UnknownMatchTypeError",
]


class MatchError(ValueError):
    """Base class for errors raised while matching a condition.

    Attributes:
        reason: Stable, machine-readable description of the failure kind.
        condition_name: Name of the condition or attribute involved, if known.
    """

    reason = "Condition could not be evaluated."

    def __init__(self, message: str, condition_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.condition_name = condition_name


class AttributeNotFoundError(MatchError):
    """The user has no value for the condition's attribute."""

    reason = "Attribute not found."

    def __init__(self, name: str) -> None:
        super().__init__(f'no attribute named "{name}"', condition_name=name)


class AttributeValueTypeInvalidError(MatchError):
    """The attribute exists but has the wrong type for the comparison."""

    reason = "Attribute value type is invalid."

    def __init__(self, name: str, expected: str, value: object) -> None:
        super().__init__(
            f'attribute "{name}" is not a {expected} '
            f"(got {type(value).__name__})",
            condition_name=name,
        )
        self.expected = expected


class UnsupportedConditionValueTypeError(MatchError):
    """The condition's literal value cannot be used with its match type."""

    reason = "Condition value type is not supported."

    def __init__(self, name: str) -> None:
        super().__init__(
            f"audience condition {name} evaluated to NULL because the "
            "condition value type is not supported",
            condition_name=name,
        )


class AttributeFormatInvalidError(MatchError):
    """A semantic version string failed grammar validation."""

    reason = "Provided attributes are in an invalid format."

    def __init__(self, version: str, detail: str) -> None:
        super().__init__(f"invalid semantic version {version!r}: {detail}")
        self.version = version
        self.detail = detail


class UnknownMatchTypeError(MatchError):
    """The condition names a match type that has no matcher."""

    reason = "Unknown match type."

    def __init__(self, match: object, condition_name: Optional[str] = None) -> None:
        super().__init__(f"Unknown match type: {match!r}", condition_name)
        self.match = match
