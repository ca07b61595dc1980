"""
launch_ops/api/routers/upcoming.py

Upcoming launch tasks HTTP endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from launch_ops.api.dependencies import error_response, get_cache_settings
from launch_ops.config import ResponseCacheSettings
from launch_ops.connectors import SourceRequestError
from launch_ops.pipelines.upcoming import TaskCSVParseError
from launch_ops.schemas.common import ErrorResponse
from launch_ops.schemas.upcoming import UpcomingTaskResponse, UpcomingTasksResponse
from launch_ops.services.upcoming_service import UpcomingTaskService, get_upcoming_task_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])


@router.get(
    "/api/upcoming",
    response_model=UpcomingTasksResponse,
    responses={
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def get_upcoming_tasks(
    response: Response,
    task_service: UpcomingTaskService = Depends(get_upcoming_task_service),
    cache_settings: ResponseCacheSettings = Depends(get_cache_settings),
) -> UpcomingTasksResponse | JSONResponse:
    """
    Fetch the task checklist and return tasks ordered by how soon they are due.
    """

    try:
        tasks = task_service.load_tasks()
        payload = UpcomingTasksResponse(
            tasks=[UpcomingTaskResponse.model_validate(task) for task in tasks],
        )
    except SourceRequestError as exc:
        logger.error("Task checklist fetch failed error=%s", exc)
        return error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Failed to load task data from Google Sheets.",
        )
    except TaskCSVParseError as exc:
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Unable to parse task data.",
            details=exc.to_list(),
        )
    except Exception as exc:
        logger.exception("Unhandled task pipeline failure error=%s", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Unexpected error loading tasks.",
            details=str(exc),
        )

    response.headers["Cache-Control"] = cache_settings.cache_control
    return payload
