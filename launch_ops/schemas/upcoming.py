"""
launch_ops/schemas/upcoming.py

Response schemas for the upcoming-tasks endpoint.
"""

from __future__ import annotations

from pydantic import Field

from launch_ops.schemas.common import CamelModel


class UpcomingTaskResponse(CamelModel):
    id: str
    workstream: str
    task: str
    mandatory_category: str = ""
    urgency: str = ""
    critical_path: bool = False
    owner: str = ""
    dependencies: list[str] = Field(default_factory=list)
    due_date: str | None = None
    due_in_days: int | None = None
    status: str = ""
    pressing: bool = False


class UpcomingTasksResponse(CamelModel):
    tasks: list[UpcomingTaskResponse] = Field(default_factory=list)
