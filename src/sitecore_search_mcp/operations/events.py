"""Payload builders and calls for the Events API tools.

The tools accept a nested ``context`` object; the Events API expects the
user, page, browser and geo sections at the top level of the event.
"""

from typing import Any

from ..client.base_client import JsonObject
from ..client.events_client import EventsClient
from ..models.events import TrackEventInput, ValidateEventInput
from .common import drop_none, serialize_model

CONTEXT_SECTIONS = ("user", "page", "browser", "geo")


def build_track_event_payload(params: TrackEventInput) -> dict[str, Any]:
    """Flatten validated track-event input into an Events API payload."""
    context = serialize_model(params.context) or {}
    return drop_none(
        {
            "event": params.event_type.value,
            "value": serialize_model(params.value),
            **{section: context.get(section) for section in CONTEXT_SECTIONS},
        },
    )


def build_validate_event_payload(params: ValidateEventInput) -> dict[str, Any]:
    """Flatten validate-event input into an Events API payload."""
    context = params.context or {}
    return drop_none(
        {
            "event": params.event_type.value,
            "value": params.value,
            **{section: context.get(section) for section in CONTEXT_SECTIONS},
        },
    )


async def track_event(client: EventsClient, customer_key: str | None, params: TrackEventInput) -> JsonObject:
    """Publish an event under the given customer key.

    ``params.customer_key`` takes precedence over the configured key.

    Raises:
        RuntimeError: If neither key is available.

    """
    final_key = params.customer_key or customer_key
    if not final_key:
        msg = "Customer key is required. Either configure SITECORE_CLIENT_KEY or provide customer_key."
        raise RuntimeError(msg)
    return await client.track_event(final_key, build_track_event_payload(params))


async def validate_event(client: EventsClient, params: ValidateEventInput) -> JsonObject:
    """Validate an event payload without publishing it."""
    return await client.validate_event(build_validate_event_payload(params))


__all__ = [
    "CONTEXT_SECTIONS",
    "build_track_event_payload",
    "build_validate_event_payload",
    "track_event",
    "validate_event",
]
