from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from launch_ops.config import load_env_files
from launch_ops.schemas.common import HealthResponse


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    load_env_files()
    _configure_logging()

    application = FastAPI(
        title="Launch Ops Dashboard API",
        version="1.0.0",
    )

    from launch_ops.api.routers import finance_router, upcoming_router

    application.include_router(finance_router)
    application.include_router(upcoming_router)

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        return HealthResponse()

    logging.getLogger(__name__).info("Launch ops API configured")
    return application


app = create_app()
