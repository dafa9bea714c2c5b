"""Public facade for RudderStack to AppsFlyer event mapping.

This module provides the stable public API for converting canonical events
into AppsFlyer calls. The mapping logic itself lives in the
rudder_appsflyer.mapping package.

Public Functions:
    map_track_event: Track event -> AppsFlyerEvent (None for blank names)
    map_screen_event: Screen event -> AppsFlyerEvent
    map_identify_event: Identify event -> IdentityUpdate
    map_event: Dispatch on the canonical event union

Internal Re-exports:
    ECOMMERCE_RULES: Ordered rule table (test usage)
    TRACK_RESERVED_KEYWORDS: Keys excluded from custom properties (test usage)
"""

from __future__ import annotations

from typing import Optional, Union

from .config import IntegrationConfig
from .mapping.constants import TRACK_RESERVED_KEYWORDS
from .mapping.router import map_identify_event, map_screen_event, map_track_event
from .mapping.rules import ECOMMERCE_RULES
from .models.appsflyer import AppsFlyerEvent, IdentityUpdate
from .models.rudderstack import IdentifyEvent, ScreenEvent, TrackEvent

__all__ = [
    "map_event",
    "map_identify_event",
    "map_screen_event",
    "map_track_event",
    # Helper re-exports (test-only / internal use)
    "ECOMMERCE_RULES",
    "TRACK_RESERVED_KEYWORDS",
]


def map_event(
    event: Union[IdentifyEvent, TrackEvent, ScreenEvent],
    config: Optional[IntegrationConfig] = None,
) -> Union[AppsFlyerEvent, IdentityUpdate, None]:
    """Map any canonical event with the given destination config.

    Args:
        event: Identify, track or screen event
        config: Destination config snapshot; defaults to rich naming off

    Returns:
        IdentityUpdate for identify events, AppsFlyerEvent for screen events,
        AppsFlyerEvent or None (dropped) for track events

    Raises:
        TypeError: If `event` is not one of the canonical event models
    """
    if isinstance(event, IdentifyEvent):
        return map_identify_event(event)
    if isinstance(event, TrackEvent):
        return map_track_event(event)
    if isinstance(event, ScreenEvent):
        effective = config if config is not None else IntegrationConfig()
        return map_screen_event(event, effective.use_rich_event_name)
    raise TypeError(f"unsupported event type: {type(event).__name__}")
