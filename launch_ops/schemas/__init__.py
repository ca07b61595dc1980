"""
launch_ops/schemas package marker.
"""

from launch_ops.schemas.common import ErrorResponse, HealthResponse
from launch_ops.schemas.finance import (
    BurnTrendPointResponse,
    FinanceAttachmentResponse,
    FinanceMetricsResponse,
    FinanceResponse,
    FinanceTransactionResponse,
    RecentExpenseResponse,
    VendorRuleResponse,
)
from launch_ops.schemas.upcoming import UpcomingTaskResponse, UpcomingTasksResponse

__all__ = [
    "BurnTrendPointResponse",
    "ErrorResponse",
    "FinanceAttachmentResponse",
    "FinanceMetricsResponse",
    "FinanceResponse",
    "FinanceTransactionResponse",
    "HealthResponse",
    "RecentExpenseResponse",
    "UpcomingTaskResponse",
    "UpcomingTasksResponse",
    "VendorRuleResponse",
]
