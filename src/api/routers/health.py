# This file defines liveness, readiness, and version endpoints for API operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The readiness check confirms database connectivity and that every entity table exists,
# answering 503 until both hold.
# Version details here help clients track API and schema compatibility over time.

from __future__ import annotations

import logging
import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response

from src.api.api_config import ApiConfig
from src.api.db_access import DatabaseClient
from src.api.dependencies import get_config, get_database_client
from src.api.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])
ConfigDep = Annotated[ApiConfig, Depends(get_config)]
DBDep = Annotated[DatabaseClient, Depends(get_database_client)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        logger.debug("git commit unavailable for /version")
        return None
    return completed.stdout.strip() or None


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.api_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    response: Response,
    config: ConfigDep,
    db: DBDep,
) -> dict[str, object]:
    db_connected = db.can_connect()
    tables = {
        table_name: db_connected and db.table_exists(table_name)
        for table_name in config.table_names().values()
    }
    is_ready = db_connected and all(tables.values())
    if not is_ready:
        response.status_code = 503

    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "db_connected": db_connected,
        "tables": tables,
        "ready": is_ready,
        "database": "reachable" if db_connected else "unreachable",
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        "schema_version": config.schema_version,
        "request_id": request.state.request_id,
        "api_prefix": config.api_prefix,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.api_name,
        "timestamp": _utc_now(),
    }
