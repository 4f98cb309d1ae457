"""User attribute context consumed by matchers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from condmatch.errors import AttributeNotFoundError, AttributeValueTypeInvalidError
from condmatch.model.condition import ValueKind, value_kind

__all__ = ["UserContext"]


@dataclass(frozen=True)
class UserContext:
    """Read-only view over one user's attributes.

    An attribute whose value is ``None`` is treated as absent.

    Attributes:
        id: User identifier (informational only).
        attributes: Flat mapping of attribute name to literal value.
    """

    id: str = ""
    attributes: Dict[str, Any] = field(default_factory=dict)

    def has_attribute(self, name: str) -> bool:
        return self.attributes.get(name) is not None

    def get_attribute(self, name: str) -> Any:
        value = self.attributes.get(name)
        if value is None:
            raise AttributeNotFoundError(name)
        return value

    def _get_typed(self, name: str, kind: ValueKind) -> Any:
        value = self.get_attribute(name)
        if value_kind(value) is not kind:
            raise AttributeValueTypeInvalidError(name, kind.value, value)
        return value

    def get_string_attribute(self, name: str) -> str:
        return self._get_typed(name, ValueKind.STRING)

    def get_number_attribute(self, name: str) -> Union[int, float]:
        return self._get_typed(name, ValueKind.NUMBER)

    def get_bool_attribute(self, name: str) -> bool:
        return self._get_typed(name, ValueKind.BOOL)

    def get_typed_attribute(self, name: str, kind: ValueKind) -> Any:
        """Return the attribute after checking it has the given kind."""
        return self._get_typed(name, kind)
