"""Configuration for the AppsFlyer mapping integration.

Two layers of configuration exist:

* `Settings` loads process-level parameters (log level, the default
  rich-naming toggle used by the replay CLI) from environment variables and an
  optional `.env` file via `pydantic-settings`. `get_settings` returns a
  cached singleton.
* `IntegrationConfig` is the per-destination snapshot built from the
  RudderStack destination config dict. It carries a single flag and is
  replaced wholesale on every create/update; there is no incremental merge.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict

__all__ = ["IntegrationConfig", "Settings", "get_settings"]


class Settings(BaseSettings):
    """Process-level configuration parameters.

    Values are read from the environment or a `.env` file. The CLI falls back
    to `USE_RICH_EVENT_NAME` when neither a flag nor a destination config file
    is supplied.
    """

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    DEBUG: bool = Field(
        default=False,
        description="Force DEBUG logging (every mapped sink call is logged)",
    )
    USE_RICH_EVENT_NAME: bool = Field(
        default=False,
        description=(
            "Default for the useRichEventName destination option when the CLI "
            "receives no explicit flag or config file"
        ),
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Upper-case the level name; blank values fall back to INFO."""
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"


class IntegrationConfig(BaseModel):
    """Immutable destination configuration snapshot.

    Built from the raw destination config dict delivered by the host. Only the
    `useRichEventName` key is recognized; anything else in the dict (API keys,
    dev keys, etc.) is ignored. A missing or non-boolean value yields `False`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    use_rich_event_name: bool = Field(default=False, alias="useRichEventName")

    @field_validator("use_rich_event_name", mode="before")
    @classmethod
    def strict_bool(cls, v: Any) -> bool:
        # "true", 1 and friends are not booleans; only a real bool counts
        return v if isinstance(v, bool) else False

    @classmethod
    def from_destination_config(cls, destination_config: Mapping[str, Any]) -> "IntegrationConfig":
        """Build a snapshot from a raw destination config mapping.

        Raises:
            TypeError: If `destination_config` is not a mapping (malformed blob
                handed over by the host).
        """
        if not isinstance(destination_config, Mapping):
            raise TypeError(
                "destination config must be a mapping, got "
                f"{type(destination_config).__name__}"
            )
        return cls.model_validate(
            {"useRichEventName": destination_config.get("useRichEventName", False)}
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the process settings."""
    return Settings()
