# This file defines shared schema pieces reused by multiple API endpoints.
# It exists so envelope metadata, pagination, and error payloads stay consistent.
# Shared models reduce duplication and keep contract changes easier to review.

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


class PaginationMetadata(BaseModel):
    page: int = Field(ge=1)
    limit: int = Field(ge=1)
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=0)
    current_items: int = Field(ge=0)
    order: Literal["asc", "desc"]


class EnvelopeFields(BaseModel):
    schema_version: str
    request_id: str
    generated_at: datetime
    warnings: list[str] | None = None


class ParentReference(BaseModel):
    id: int
    name: str


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Any | None = None
    request_id: str
    timestamp: datetime
