"""Single-condition evaluation for the decision engine.

Matchers raise :class:`~condmatch.errors.MatchError` on failure. This module
turns that into a value the caller can branch on: a :class:`MatchResult` whose
``error`` is populated when the condition could not be evaluated. Such a
result must be treated as unknown, not as a false match.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from condmatch.errors import MatchError
from condmatch.logging import LevelLogConsumer, LogConsumer, LogLevel
from condmatch.matchers import get_matcher
from condmatch.model import Condition, UserContext

__all__ = ["MatchResult", "evaluate_condition"]


@dataclass(frozen=True)
class MatchResult:
    """Outcome of evaluating one condition.

    Attributes:
        matched: Whether the attribute satisfied the condition. Always False
            when ``error`` is set.
        error: The failure that prevented evaluation, if any.
    """

    matched: bool
    error: Optional[MatchError] = None

    def __post_init__(self) -> None:
        if self.matched and self.error is not None:
            raise ValueError("A matched result cannot carry an error")

    @property
    def is_unknown(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "error": str(self.error) if self.error is not None else None,
            "reason": self.error.reason if self.error is not None else None,
        }


def evaluate_condition(
    condition: Condition,
    user: UserContext,
    log_consumer: Optional[LogConsumer] = None,
) -> MatchResult:
    """Evaluate ``condition`` against ``user``.

    Args:
        condition: Condition to evaluate.
        user: Attribute source.
        log_consumer: Diagnostic sink. Defaults to a :class:`LevelLogConsumer`
            writing to the ``condmatch.diagnostics`` logger.

    Returns:
        ``MatchResult(matched, None)`` on success, ``MatchResult(False, err)``
        when the condition cannot be evaluated.
    """
    sink = log_consumer if log_consumer is not None else LevelLogConsumer()
    fields = {"condition": condition.name, "match": condition.match}

    try:
        matched = get_matcher(condition.match)(condition, user)
    except MatchError as exc:
        if exc.condition_name is None:
            exc.condition_name = condition.name
        sink.log(
            LogLevel.WARNING,
            f"Condition could not be evaluated: {exc}",
            {**fields, "reason": exc.reason},
        )
        return MatchResult(False, exc)

    sink.log(LogLevel.DEBUG, f"Condition evaluated to {matched}", fields)
    return MatchResult(bool(matched))
