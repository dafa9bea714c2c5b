"""Internal mapping subpackage for RudderStack to AppsFlyer translation.

All functions within this package are pure (no I/O, no shared mutable state)
and deterministic. The public API lives in the top-level `mapper.py` facade;
callers should not import from this package except to reach internal helpers
in tests.

Modules:
    constants: Event names, parameter keys and the reserved keyword set
    extractors: Typed reads over free-form property maps
    rules: Ecommerce rule table and default event name transform
    custom_properties: Reserved-keyword-aware merge of leftover properties
    router: Track/screen/identify dispatch producing sink-ready models

Design Invariants:
    - At most one AppsFlyer event per track event; none for blank names
    - Reserved keys only appear in output when a rule wrote them explicitly
    - Missing or mistyped fields are omitted, never defaulted
    - Screen events are never filtered by the reserved keyword set
"""
from __future__ import annotations

from . import constants as constants  # noqa: F401

__all__ = ["constants"]
