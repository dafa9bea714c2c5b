"""Merge of custom (unrecognized) track properties into rule output."""
from __future__ import annotations

import copy
from typing import AbstractSet, Any, Dict, Mapping

from .constants import TRACK_RESERVED_KEYWORDS

__all__ = ["merge_custom_properties"]


def merge_custom_properties(
    values: Dict[str, Any],
    properties: Mapping[str, Any],
    reserved: AbstractSet[str] = TRACK_RESERVED_KEYWORDS,
) -> Dict[str, Any]:
    """Append non-reserved properties to the rule output.

    Keys already written by the rule win; a property with the same key is
    skipped rather than overwriting it. Empty or non-string keys are skipped.
    Values are deep-copied so later mutation of the source event cannot leak
    into a logged event.

    Args:
        values: Rule output; updated in place.
        properties: Original track properties.
        reserved: Keys never copied verbatim.

    Returns:
        The same `values` dict, for chaining.
    """
    for key, value in properties.items():
        if not isinstance(key, str) or not key or key in reserved:
            continue
        if key in values:
            continue
        values[key] = copy.deepcopy(value)
    return values
