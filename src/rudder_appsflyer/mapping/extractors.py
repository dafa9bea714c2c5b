"""Typed reads over free-form property maps.

Every helper returns None (or an empty result) instead of raising when a key
is missing or holds a value of the wrong type. Callers omit the output field
in that case, so no default is ever substituted.

`None` values count as missing for untyped reads.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

__all__ = ["read_any", "read_str", "read_non_empty_str", "read_dict_list"]


def read_any(properties: Mapping[str, Any], key: str) -> Optional[Any]:
    return properties.get(key)


def read_str(properties: Mapping[str, Any], key: str) -> Optional[str]:
    value = properties.get(key)
    return value if isinstance(value, str) else None


def read_non_empty_str(properties: Mapping[str, Any], key: str) -> Optional[str]:
    value = read_str(properties, key)
    return value if value else None


def read_dict_list(properties: Mapping[str, Any], key: str) -> List[Dict[str, Any]]:
    """Return the dict entries of a list-valued property.

    A non-list value yields an empty list. Entries that are not dicts are
    skipped individually.
    """
    value = properties.get(key)
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, dict)]
