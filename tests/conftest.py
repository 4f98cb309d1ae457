"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from condmatch.model import Condition, UserContext


@pytest.fixture
def user() -> Callable[..., UserContext]:
    """Build a UserContext from keyword attributes."""

    def _make(**attributes: Any) -> UserContext:
        return UserContext(id="test-user", attributes=attributes)

    return _make


@pytest.fixture
def condition() -> Callable[[str, Any, str], Condition]:
    """Build a Condition as ``condition(match, value, name="attr")``."""

    def _make(match: str, value: Any, name: str = "attr") -> Condition:
        return Condition(name=name, match=match, value=value)

    return _make
