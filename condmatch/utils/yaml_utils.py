"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` whose keys are all strings.

    YAML 1.1 turns keys such as ``yes``, ``on`` or ``true`` into Python
    booleans. Attribute names must stay strings, so booleans become
    ``"True"``/``"False"`` and every other key goes through ``str``.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 3: 2, "plan": 3})
        {'True': 1, '3': 2, 'plan': 3}
    """
    return {str(key): value for key, value in data.items()}
