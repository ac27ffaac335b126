"""Input models for the Events API tools."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventType(StrEnum):
    """Visitor event types accepted by the Events API."""

    VIEW = "view"
    CLICK = "click"
    ADD = "add"
    REMOVE = "remove"
    IDENTIFY = "identify"
    ORDER = "order"
    DOWNLOAD = "download"
    BOOKMARK = "bookmark"
    REVIEW = "review"
    WIDGET = "widget"
    REQUEST = "request"


class EventValue(BaseModel):
    """Event value data; unknown keys are passed through."""

    model_config = ConfigDict(extra="allow")

    entity: str | None = None
    entity_id: str | None = None
    widget: str | None = None
    action: str | None = None


class UserContext(BaseModel):
    model_config = ConfigDict(extra="allow")

    uuid: str | None = None
    email: str | None = None


class PageContext(BaseModel):
    uri: str | None = None
    title: str | None = None
    locale: str | None = None
    referrer: str | None = None


class BrowserContext(BaseModel):
    user_agent: str | None = None
    ip: str | None = None


class GeoContext(BaseModel):
    country: str | None = None
    region: str | None = None
    city: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class EventContext(BaseModel):
    """Who triggered the event, where and with what browser."""

    user: UserContext | None = None
    page: PageContext | None = None
    browser: BrowserContext | None = None
    geo: GeoContext | None = None


class TrackEventInput(BaseModel):
    """Arguments of ``sitecore_track_event``."""

    model_config = ConfigDict(extra="forbid")

    domain_id: str | None = None
    customer_key: str | None = Field(default=None, description="Customer key (ckey); defaults to the configured client key")
    event_type: EventType
    value: EventValue | None = None
    context: EventContext | None = None


class ValidateEventInput(BaseModel):
    """Arguments of ``sitecore_validate_event``.

    Validation accepts free-form value and context objects so that malformed
    payloads reach the API and get reported there.
    """

    model_config = ConfigDict(extra="forbid")

    domain_id: str | None = None
    event_type: EventType
    value: dict[str, Any] | None = None
    context: dict[str, dict[str, Any]] | None = None


__all__ = [
    "BrowserContext",
    "EventContext",
    "EventType",
    "EventValue",
    "GeoContext",
    "PageContext",
    "TrackEventInput",
    "UserContext",
    "ValidateEventInput",
]
