"""
launch_ops/api/routers/finance.py

Finance dashboard HTTP endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from launch_ops.api.dependencies import error_response, get_cache_settings
from launch_ops.config import ResponseCacheSettings
from launch_ops.connectors import SourceRequestError
from launch_ops.pipelines.workbook import WorkbookFormatError
from launch_ops.schemas.common import ErrorResponse
from launch_ops.schemas.finance import FinanceResponse
from launch_ops.services.finance_service import FinanceService, get_finance_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["finance"])


@router.get(
    "/api/finance",
    response_model=FinanceResponse,
    responses={
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def get_finance(
    response: Response,
    finance_service: FinanceService = Depends(get_finance_service),
    cache_settings: ResponseCacheSettings = Depends(get_cache_settings),
) -> FinanceResponse | JSONResponse:
    """
    Fetch the finance workbook and return metrics, ledger and derived series.
    """

    try:
        snapshot = finance_service.load_snapshot()
        payload = FinanceResponse.model_validate(snapshot)
    except SourceRequestError as exc:
        logger.error("Finance workbook fetch failed error=%s", exc)
        return error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Failed to load finance data from Google Sheets.",
        )
    except WorkbookFormatError as exc:
        logger.error("Finance workbook could not be decoded error=%s", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Unexpected error loading finance data.",
            details=str(exc),
        )
    except Exception as exc:
        logger.exception("Unhandled finance pipeline failure error=%s", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Unexpected error loading finance data.",
            details=str(exc),
        )

    response.headers["Cache-Control"] = cache_settings.cache_control
    return payload
