"""Condition model and value classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

from condmatch.errors import UnknownMatchTypeError

__all__ = [
    "Condition",
    "MatchType",
    "Value",
    "ValueKind",
    "value_kind",
]

#: Literal accepted as a condition or attribute value.
Value = Union[int, float, str, bool]


class ValueKind(Enum):
    """Closed set of value variants a matcher can compare."""

    NUMBER = "number"
    STRING = "string"
    BOOL = "bool"


def value_kind(value: Any) -> Optional[ValueKind]:
    """Classify a literal into a :class:`ValueKind`.

    ``bool`` is tested before numbers because it subclasses ``int``;
    integers and floats share the NUMBER kind so ``42`` and ``42.0`` compare
    equal.

    Returns:
        The kind, or ``None`` if the value is not a supported literal.
    """
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    return None


class MatchType(str, Enum):
    """Surface names of the supported match types."""

    EXACT = "exact"
    EXISTS = "exists"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    SUBSTRING = "substring"
    SEMVER_EQ = "semver_eq"
    SEMVER_GE = "semver_ge"
    SEMVER_GT = "semver_gt"
    SEMVER_LE = "semver_le"
    SEMVER_LT = "semver_lt"

    @classmethod
    def from_string(cls, value: str) -> "MatchType":
        """Parse a case-insensitive match type name.

        Raises:
            UnknownMatchTypeError: If the name is not a known match type.
        """
        try:
            return cls(value.lower())
        except (AttributeError, ValueError):
            raise UnknownMatchTypeError(value) from None


@dataclass(frozen=True)
class Condition:
    """A single targeting rule evaluated against one user attribute.

    Attributes:
        name: Attribute name looked up in the user context.
        match: Match type surface name (see :class:`MatchType`).
        value: Literal right-hand operand (unused by ``exists``).
        type: Condition category; only custom attributes are matched here.
    """

    name: str
    match: str
    value: Any = None
    type: str = "custom_attribute"

    @property
    def match_type(self) -> MatchType:
        """The parsed match type. Raises ``UnknownMatchTypeError``."""
        try:
            return MatchType.from_string(self.match)
        except UnknownMatchTypeError as exc:
            exc.condition_name = self.name
            raise

    @property
    def value_kind(self) -> Optional[ValueKind]:
        return value_kind(self.value)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Condition":
        """Build a condition from a mapping with ``name``/``match``/``value``.

        Raises:
            ValueError: If required keys are missing or have the wrong type.
        """
        if not isinstance(raw, dict):
            raise ValueError(
                f"Condition must be a mapping, got {type(raw).__name__}"
            )
        if "name" not in raw or "match" not in raw:
            raise ValueError("Each condition must have 'name' and 'match'")
        unknown = set(raw) - {"name", "match", "value", "type"}
        if unknown:
            raise ValueError(
                f"Unrecognized condition key(s): {', '.join(sorted(unknown))}"
            )
        name = raw["name"]
        match = raw["match"]
        if not isinstance(name, str) or not name:
            raise ValueError("Condition 'name' must be a non-empty string")
        if not isinstance(match, str):
            raise ValueError("Condition 'match' must be a string")
        return cls(
            name=name,
            match=match,
            value=raw.get("value"),
            type=raw.get("type", "custom_attribute"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "match": self.match,
            "value": self.value,
            "type": self.type,
        }
