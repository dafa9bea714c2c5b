"""Routing of canonical events to AppsFlyer calls.

Track flow:
    1. Drop the event when its name is blank (no sink call, no error)
    2. Look the name up in the ecommerce rule table (exact match)
    3. Run the rule extractor, or fall back to the default name transform
    4. Merge custom properties, skipping reserved keywords
    5. Return one `AppsFlyerEvent`

Screen events bypass the rule table and the reserved-keyword filter: the full
property map is passed through, only the event name depends on the rich
naming flag.

Identify events produce an `IdentityUpdate`; the integration decides which
sink setters to call from it.

All functions are pure; logging is the only side effect.
"""
from __future__ import annotations

import copy
import logging
from typing import Optional

from ..models.appsflyer import AppsFlyerEvent, EmailCryptType, IdentityUpdate
from ..models.rudderstack import IdentifyEvent, ScreenEvent, TrackEvent
from .constants import (
    RICH_SCREEN_EVENT_FALLBACK,
    RICH_SCREEN_EVENT_TEMPLATE,
    SCREEN_EVENT_NAME,
)
from .custom_properties import merge_custom_properties
from .extractors import read_non_empty_str
from .rules import default_event_name, find_rule

logger = logging.getLogger(__name__)

__all__ = ["map_identify_event", "map_screen_event", "map_track_event", "screen_event_name"]


def map_track_event(event: TrackEvent) -> Optional[AppsFlyerEvent]:
    """Map a track event to a single AppsFlyer event.

    Args:
        event: Canonical track event.

    Returns:
        The mapped event, or None when the event name is blank.
    """
    name = event.name
    if not name.strip():
        logger.debug("Event name is empty, dropping track event")
        return None

    properties = event.properties
    rule = find_rule(name)
    if rule is not None:
        af_name = rule.output_name
        # rule output may alias nested input values
        values = copy.deepcopy(rule.extract(properties))
    else:
        af_name = default_event_name(name)
        values = {}
    merge_custom_properties(values, properties)
    return AppsFlyerEvent(name=af_name, values=values)


def screen_event_name(event: ScreenEvent, use_rich_event_name: bool) -> str:
    """Resolve the AppsFlyer name for a screen event.

    With rich naming the screen's own name wins, then a non-empty string
    `name` property, then the generic fallback.
    """
    if not use_rich_event_name:
        return SCREEN_EVENT_NAME
    if event.name:
        return RICH_SCREEN_EVENT_TEMPLATE.format(name=event.name)
    property_name = read_non_empty_str(event.properties, "name")
    if property_name is not None:
        return RICH_SCREEN_EVENT_TEMPLATE.format(name=property_name)
    return RICH_SCREEN_EVENT_FALLBACK


def map_screen_event(event: ScreenEvent, use_rich_event_name: bool) -> AppsFlyerEvent:
    return AppsFlyerEvent(
        name=screen_event_name(event, use_rich_event_name),
        values=copy.deepcopy(event.properties),
    )


def map_identify_event(event: IdentifyEvent) -> IdentityUpdate:
    """Extract the identity setters implied by an identify event.

    A blank user id and a blank or non-string email are ignored independently.
    """
    user_id = event.userId if event.userId else None
    email = read_non_empty_str(event.traits, "email")
    return IdentityUpdate(
        customer_user_id=user_id,
        emails=[email] if email is not None else [],
        crypt_type=EmailCryptType.SHA256,
    )
