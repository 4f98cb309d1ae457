"""Data model: conditions, value kinds and the user attribute context."""

from .condition import Condition, MatchType, Value, ValueKind, value_kind
from .user import UserContext

__all__ = [
    "Condition",
    "MatchType",
    "UserContext",
    "Value",
    "ValueKind",
    "value_kind",
]
