# This file defines response schemas for health, readiness, and version endpoints.
# It exists to keep operational status contracts explicit for platform consumers.
# The models include request tracing and schema version metadata for observability.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    schema_version: str
    request_id: str
    status: str
    environment: str
    service_name: str
    timestamp: datetime


class ReadinessResponse(BaseModel):
    schema_version: str
    request_id: str
    db_connected: bool
    tables: dict[str, bool]
    ready: bool
    database: str
    timestamp: datetime


class VersionResponse(BaseModel):
    schema_version: str
    request_id: str
    api_prefix: str
    app_version: str
    git_commit: str | None = None
    project: str
    timestamp: datetime
