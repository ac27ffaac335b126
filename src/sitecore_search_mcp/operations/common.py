"""Shared helpers for shaping validated tool input into API payloads."""

from typing import Any

from pydantic import BaseModel


def serialize_model(obj: BaseModel | None) -> dict[str, Any] | None:
    """Serialize a pydantic model to a JSON-compatible dict, excluding Nones.

    Returns None for a missing model so callers can drop the field entirely.
    """
    if obj is None:
        return None
    return obj.model_dump(mode="json", exclude_none=True)


def drop_none(payload: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``payload`` without keys whose value is None."""
    return {key: value for key, value in payload.items() if value is not None}


def page_offset(page: int, limit: int) -> int:
    """Convert a 1-based page number into a result offset."""
    return (page - 1) * limit


__all__ = ["drop_none", "page_offset", "serialize_model"]
