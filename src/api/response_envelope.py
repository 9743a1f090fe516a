# This file builds response envelopes for list endpoints in a consistent format.
# It exists so downstream systems always receive schema metadata and request tracing fields.
# The helpers return plain dictionaries that Pydantic response models validate at runtime.
# This keeps endpoint functions focused on data retrieval instead of repetitive envelope assembly.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.api.pagination import PaginationSpec, compute_total_pages


def utc_now() -> datetime:
    """Return timezone-aware UTC timestamp for response generation."""

    return datetime.now(tz=UTC)


def build_pagination_metadata(
    *,
    pagination: PaginationSpec,
    order: str,
    total_count: int,
    current_items: int,
) -> dict[str, Any]:
    return {
        "page": pagination.page,
        "limit": pagination.limit,
        "total_count": total_count,
        "total_pages": compute_total_pages(total_count=total_count, limit=pagination.limit),
        "current_items": current_items,
        "order": order,
    }


def build_list_envelope(
    *,
    schema_version: str,
    request_id: str,
    data: list[dict[str, Any]],
    pagination: dict[str, Any] | None = None,
    warnings: list[str] | None = None,
) -> dict[str, Any]:
    """Build standard list response envelope."""

    payload: dict[str, Any] = {
        "schema_version": schema_version,
        "request_id": request_id,
        "generated_at": utc_now(),
        "data": data,
        "warnings": warnings,
    }
    if pagination is not None:
        payload["pagination"] = pagination
    return payload
