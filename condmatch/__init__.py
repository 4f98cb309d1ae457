"""condmatch: targeting condition matchers.

Evaluates one audience condition (attribute name, match type, literal value)
against a user's attributes. Includes relational matchers and a
precision-limited semantic version comparator.

Primary API:
    evaluate_condition() - Evaluate a condition, returning a MatchResult
    get_matcher() - Look up the raw matcher for a match type
    compare_versions() - Three-way semantic version comparison
    Condition, UserContext - Inputs to every matcher

Example:
    from condmatch import Condition, UserContext, evaluate_condition

    cond = Condition(name="app_version", match="semver_ge", value="2.0")
    user = UserContext(attributes={"app_version": "2.0.3"})

    result = evaluate_condition(cond, user)
    assert result.matched and result.error is None
"""

from __future__ import annotations

from condmatch import cli, logging
from condmatch._version import __version__
from condmatch.config import SEMVER_CONFIG, SemanticVersionConfig
from condmatch.errors import (
    AttributeFormatInvalidError,
    AttributeNotFoundError,
    AttributeValueTypeInvalidError,
    MatchError,
    UnknownMatchTypeError,
    UnsupportedConditionValueTypeError,
)
from condmatch.evaluator import MatchResult, evaluate_condition
from condmatch.loader import load_attributes_yaml, load_conditions_yaml
from condmatch.matchers import MATCHERS, get_matcher, register_matcher
from condmatch.model import Condition, MatchType, UserContext, ValueKind
from condmatch.semver import compare_versions, split_semantic_version

__all__ = [
    # Version
    "__version__",
    # Model
    "Condition",
    "MatchType",
    "UserContext",
    "ValueKind",
    # Evaluation (primary API)
    "evaluate_condition",
    "MatchResult",
    "get_matcher",
    "register_matcher",
    "MATCHERS",
    # Semantic versions
    "compare_versions",
    "split_semantic_version",
    "SemanticVersionConfig",
    "SEMVER_CONFIG",
    # Errors
    "MatchError",
    "AttributeNotFoundError",
    "AttributeValueTypeInvalidError",
    "UnsupportedConditionValueTypeError",
    "AttributeFormatInvalidError",
    "UnknownMatchTypeError",
    # Loading
    "load_conditions_yaml",
    "load_attributes_yaml",
    # Utilities
    "cli",
    "logging",
]
