"""
launch_ops/api/dependencies.py

Shared FastAPI dependencies and response helpers.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse

from launch_ops.config import ResponseCacheSettings, get_response_cache_settings
from launch_ops.schemas.common import ErrorResponse


def get_cache_settings() -> ResponseCacheSettings:
    return get_response_cache_settings()


def error_response(status_code: int, message: str, *, details: Any | None = None) -> JSONResponse:
    """
    Build the ``{error, details?}`` body used by every failing endpoint.
    """

    body = ErrorResponse(error=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))
