"""Relational matchers: exact, gt, lt and the composites ge, le.

``exact``, ``gt`` and ``lt`` compare the attribute against the condition
value directly. ``ge`` and ``le`` have no comparison code of their own; they
are assembled by :func:`either_match` from two primitives.
"""

from __future__ import annotations

from typing import Any, Callable, FrozenSet

from condmatch.errors import MatchError, UnsupportedConditionValueTypeError
from condmatch.model import Condition, UserContext, ValueKind

__all__ = [
    "either_match",
    "exact_match",
    "ge_match",
    "gt_match",
    "le_match",
    "lt_match",
]

Matcher = Callable[[Condition, UserContext], bool]

_ORDERED_KINDS: FrozenSet[ValueKind] = frozenset({ValueKind.NUMBER, ValueKind.STRING})


def _operands(
    condition: Condition, user: UserContext, allowed: FrozenSet[ValueKind]
) -> tuple[Any, Any]:
    """Return ``(attribute, condition value)`` checked to share one kind.

    Raises:
        UnsupportedConditionValueTypeError: Condition value kind not allowed.
        AttributeNotFoundError: Attribute missing.
        AttributeValueTypeInvalidError: Attribute kind differs from the
            condition value kind.
    """
    kind = condition.value_kind
    if kind is None or kind not in allowed:
        raise UnsupportedConditionValueTypeError(condition.name)
    return user.get_typed_attribute(condition.name, kind), condition.value


def exact_match(condition: Condition, user: UserContext) -> bool:
    """Return True if the attribute equals the condition value."""
    attribute, expected = _operands(condition, user, frozenset(ValueKind))
    return attribute == expected


def gt_match(condition: Condition, user: UserContext) -> bool:
    """Return True if the attribute is greater than the condition value."""
    attribute, expected = _operands(condition, user, _ORDERED_KINDS)
    return attribute > expected


def lt_match(condition: Condition, user: UserContext) -> bool:
    """Return True if the attribute is less than the condition value."""
    attribute, expected = _operands(condition, user, _ORDERED_KINDS)
    return attribute < expected


def either_match(primary: Matcher, fallback: Matcher) -> Matcher:
    """Compose two matchers into one that passes if either passes.

    ``primary`` is tried first and any error it raises is discarded. If it
    does not pass, ``fallback`` decides the outcome and only its error is
    raised. An error from ``primary`` is therefore lost whenever
    ``fallback`` evaluates cleanly.
    """

    def composite(condition: Condition, user: UserContext) -> bool:
        try:
            if primary(condition, user):
                return True
        except MatchError:
            pass
        return fallback(condition, user)

    composite.__name__ = f"either_{primary.__name__}_{fallback.__name__}"
    return composite


ge_match = either_match(lt_match, exact_match)
ge_match.__doc__ = "Pass if ``lt`` passes, otherwise if ``exact`` passes."

le_match = either_match(gt_match, exact_match)
le_match.__doc__ = "Pass if ``gt`` passes, otherwise if ``exact`` passes."
