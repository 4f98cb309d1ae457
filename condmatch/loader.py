"""YAML loading for condition lists and user attribute maps.

Conditions may be given as a single mapping, a list of mappings, or a
mapping with a ``conditions`` list::

    conditions:
      - {name: app_version, match: semver_ge, value: "2.0"}
      - {name: age, match: gt, value: 17}

Attributes are a flat mapping of name to literal value.
"""

from __future__ import annotations

from typing import Any, Dict, List

import yaml

from condmatch.model import Condition, value_kind
from condmatch.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = [
    "load_attributes_yaml",
    "load_conditions_yaml",
    "parse_attributes",
    "parse_condition",
    "parse_conditions",
]


def parse_condition(raw: Any) -> Condition:
    """Parse one condition mapping. Raises ``ValueError`` if malformed."""
    if isinstance(raw, dict):
        raw = normalize_yaml_dict_keys(raw)
    return Condition.from_dict(raw)


def parse_conditions(raw: Any) -> List[Condition]:
    """Parse a condition mapping, list, or ``{"conditions": [...]}`` wrapper.

    Raises:
        ValueError: If the structure or any entry is malformed.
    """
    if raw is None:
        return []
    if isinstance(raw, dict) and "conditions" in raw:
        extra = set(raw) - {"conditions"}
        if extra:
            raise ValueError(
                f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}"
            )
        raw = raw["conditions"]
        if raw is None:
            return []
    if isinstance(raw, dict):
        return [parse_condition(raw)]
    if not isinstance(raw, list):
        raise ValueError(
            f"Conditions must be a mapping or a list, got {type(raw).__name__}"
        )

    conditions = []
    for idx, entry in enumerate(raw):
        try:
            conditions.append(parse_condition(entry))
        except ValueError as exc:
            raise ValueError(f"Invalid condition at index {idx}: {exc}") from exc
    return conditions


def parse_attributes(raw: Any) -> Dict[str, Any]:
    """Validate a flat attribute mapping. Raises ``ValueError`` if malformed."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Attributes must be a mapping, got {type(raw).__name__}"
        )
    attributes = normalize_yaml_dict_keys(raw)
    for name, value in attributes.items():
        if value is not None and value_kind(value) is None:
            raise ValueError(
                f"Attribute '{name}' must be a number, string or bool, "
                f"got {type(value).__name__}"
            )
    return attributes


def load_conditions_yaml(yaml_str: str) -> List[Condition]:
    """Load conditions from a YAML (or JSON) string."""
    return parse_conditions(yaml.safe_load(yaml_str))


def load_attributes_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load a user attribute mapping from a YAML (or JSON) string."""
    return parse_attributes(yaml.safe_load(yaml_str))
