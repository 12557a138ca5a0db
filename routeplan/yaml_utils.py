"""Utilities for handling YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Normalize dictionary keys from YAML parsing to strings.

    YAML 1.1 boolean words (yes, no, on, off, true, false) become Python
    booleans when used as keys. They are turned into "True"/"False" and every
    other key is passed through ``str``.

    Args:
        data: Mapping as returned by the YAML loader.

    Returns:
        Dict[str, V]: Mapping with string keys.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, "routes": 2})
        {'True': 1, 'routes': 2}
    """
    return {str(key): value for key, value in data.items()}
