"""
launch_ops/services/upcoming_service.py

Request-scoped task checklist ingestion.
"""

from __future__ import annotations

import logging
import time
from functools import lru_cache
from typing import Protocol

from launch_ops.config import get_source_http_settings, get_upcoming_source_settings
from launch_ops.connectors import UpcomingTasksConnector
from launch_ops.domain.tasks import UpcomingTask
from launch_ops.logging_utils import (
    UPCOMING_TASKS_BUILT,
    UPCOMING_TASKS_PARSE_FAILED,
    log_pipeline_event,
)
from launch_ops.pipelines.upcoming import TaskCSVParseError, parse_task_csv

logger = logging.getLogger(__name__)


class TaskSource(Protocol):
    source: str

    def fetch_csv(self) -> str: ...


class UpcomingTaskService:
    """
    Coordinates CSV download and task parsing.
    """

    def __init__(self, *, connector: TaskSource) -> None:
        self._connector = connector

    def load_tasks(self) -> list[UpcomingTask]:
        """
        Fetch the checklist and return tasks sorted by urgency.

        Raises SourceRequestError when the download fails and
        TaskCSVParseError when the CSV is structurally broken.
        """

        started_at = time.perf_counter()
        text = self._connector.fetch_csv()
        result = parse_task_csv(text)
        if result.issues:
            log_pipeline_event(
                logger,
                UPCOMING_TASKS_PARSE_FAILED,
                source=self._connector.source,
                started_at=started_at,
                level=logging.WARNING,
                issues=len(result.issues),
                first_issue=result.issues[0].message,
            )
            raise TaskCSVParseError(result.issues)

        log_pipeline_event(
            logger,
            UPCOMING_TASKS_BUILT,
            source=self._connector.source,
            started_at=started_at,
            tasks=len(result.tasks),
            pressing=sum(1 for task in result.tasks if task.pressing),
        )
        return result.tasks


@lru_cache(maxsize=1)
def get_upcoming_task_service() -> UpcomingTaskService:
    """
    Build and cache the upcoming-task service.
    """

    connector = UpcomingTasksConnector(
        settings=get_upcoming_source_settings(),
        http_settings=get_source_http_settings(),
    )
    return UpcomingTaskService(connector=connector)
