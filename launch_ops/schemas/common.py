"""
launch_ops/schemas/common.py

Shared response schema pieces.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model serialised with camelCase keys and built from domain dataclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(BaseModel):
    """
    API error body: a human message plus optional diagnostic details.
    """

    error: str
    details: Any | None = None


class HealthResponse(BaseModel):
    status: str = "ok"
