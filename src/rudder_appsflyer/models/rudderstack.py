"""Pydantic models for canonical RudderStack events.

These models give a typed shape to the identify / track / screen payloads that
the upstream event source delivers. Property and trait maps stay free-form
(`Dict[str, Any]`); the mapping layer reads them defensively.

`CanonicalEvent` is a discriminated union keyed on `type`, so raw dicts (e.g.
lines of a JSON Lines replay file) can be validated in one step with
`parse_event`.
"""
from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, TypeAdapter, field_validator, model_validator

__all__ = [
    "CanonicalEvent",
    "IdentifyEvent",
    "ScreenEvent",
    "TrackEvent",
    "parse_event",
]


def _empty_if_none(v: Any) -> Any:
    return {} if v is None else v


class IdentifyEvent(BaseModel):
    """Identify call. `traits` may arrive nested under `context.traits`."""

    type: Literal["identify"] = "identify"
    userId: Optional[str] = None
    traits: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def lift_context_traits(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("traits") is None:
            context = data.get("context")
            if isinstance(context, dict) and isinstance(context.get("traits"), dict):
                data = {**data, "traits": context["traits"]}
        return data

    @field_validator("traits", mode="before")
    @classmethod
    def none_traits_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)


class TrackEvent(BaseModel):
    """Track call. RudderStack payloads carry the name under `event`."""

    type: Literal["track"] = "track"
    name: str = Field(default="", validation_alias=AliasChoices("name", "event"))
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("properties", mode="before")
    @classmethod
    def none_properties_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def none_name_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v


class ScreenEvent(BaseModel):
    """Screen call."""

    type: Literal["screen"] = "screen"
    name: str = ""
    properties: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("properties", mode="before")
    @classmethod
    def none_properties_to_empty(cls, v: Any) -> Any:
        return _empty_if_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def none_name_to_blank(cls, v: Any) -> Any:
        return "" if v is None else v


CanonicalEvent = Annotated[
    Union[IdentifyEvent, TrackEvent, ScreenEvent], Field(discriminator="type")
]

_EVENT_ADAPTER: TypeAdapter[Any] = TypeAdapter(CanonicalEvent)


def parse_event(raw: Any) -> Union[IdentifyEvent, TrackEvent, ScreenEvent]:
    """Validate a raw payload into one of the canonical event models.

    Raises:
        pydantic.ValidationError: If `type` is missing/unknown or a field has
            an incompatible shape.
    """
    return _EVENT_ADAPTER.validate_python(raw)
