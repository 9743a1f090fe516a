"""Serve the catalog API with uvicorn on the configured host and port."""

from __future__ import annotations

import logging

import uvicorn

from src.api.app import app
from src.common.settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logger.info("Starting %s (%s) on %s:%s", settings.PROJECT_NAME, settings.ENV, settings.API_HOST, settings.API_PORT)
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
