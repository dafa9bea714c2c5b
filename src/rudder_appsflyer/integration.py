"""RudderStack device-mode integration for AppsFlyer.

`AppsFlyerIntegration` is the plugin the host registers with its analytics
client. It owns the destination config snapshot and a sink, and forwards the
output of the pure mapping functions to that sink:

- identify -> `set_customer_user_id` and/or `set_user_emails`
- track    -> at most one `log_event` (blank names are dropped)
- screen   -> exactly one `log_event`

The config is replaced wholesale by `create`/`update` and read once at the
start of each event, so a caller that serializes updates and events needs no
locking. There is no module-level instance; build one per sink.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from .config import IntegrationConfig
from .mapper import map_identify_event, map_screen_event, map_track_event
from .models.rudderstack import IdentifyEvent, ScreenEvent, TrackEvent
from .sink import AppsFlyerSink

logger = logging.getLogger(__name__)

__all__ = ["AppsFlyerIntegration"]


class AppsFlyerIntegration:
    """Terminal plugin translating canonical events into AppsFlyer calls."""

    key = "AppsFlyer"

    def __init__(self, sink: AppsFlyerSink) -> None:
        self._sink = sink
        self._config = IntegrationConfig()

    @property
    def config(self) -> IntegrationConfig:
        return self._config

    def create(self, destination_config: Mapping[str, Any]) -> None:
        """Apply the destination config delivered when the plugin is created.

        Raises:
            TypeError: If the config is not a mapping.
        """
        self._config = IntegrationConfig.from_destination_config(destination_config)
        logger.debug(
            "AppsFlyer integration initialized with useRichEventName: %s",
            self._config.use_rich_event_name,
        )

    def update(self, destination_config: Mapping[str, Any]) -> None:
        """Replace the config without touching the sink."""
        self._config = IntegrationConfig.from_destination_config(destination_config)
        logger.debug(
            "AppsFlyer integration configuration updated with useRichEventName: %s",
            self._config.use_rich_event_name,
        )

    def get_destination_instance(self) -> AppsFlyerSink:
        return self._sink

    def identify(self, event: IdentifyEvent) -> None:
        update = map_identify_event(event)
        if update.is_empty:
            logger.debug("AppsFlyer: identify event carries no user id or email, skipping")
            return
        if update.customer_user_id is not None:
            self._sink.set_customer_user_id(update.customer_user_id)
            logger.debug("AppsFlyer: Set customer user ID: %s", update.customer_user_id)
        if update.emails:
            self._sink.set_user_emails(update.emails, update.crypt_type)
            logger.debug("AppsFlyer: Set user email with %s hashing", update.crypt_type.value)

    def track(self, event: TrackEvent) -> None:
        mapped = map_track_event(event)
        if mapped is None:
            return
        self._sink.log_event(mapped.name, mapped.values)
        logger.debug("AppsFlyer: Logged event '%s' with properties: %s", mapped.name, mapped.values)

    def screen(self, event: ScreenEvent) -> None:
        config = self._config
        mapped = map_screen_event(event, config.use_rich_event_name)
        self._sink.log_event(mapped.name, mapped.values)
        logger.debug(
            "AppsFlyer: Logged screen event '%s' with properties: %s", mapped.name, mapped.values
        )

    def process(self, event: Union[IdentifyEvent, TrackEvent, ScreenEvent]) -> None:
        """Dispatch a canonical event to the matching handler.

        Raises:
            TypeError: If `event` is not one of the canonical event models.
        """
        if isinstance(event, IdentifyEvent):
            self.identify(event)
        elif isinstance(event, TrackEvent):
            self.track(event)
        elif isinstance(event, ScreenEvent):
            self.screen(event)
        else:
            raise TypeError(f"unsupported event type: {type(event).__name__}")
