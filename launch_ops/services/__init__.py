"""
launch_ops/services package marker.
"""

from launch_ops.services.finance_service import FinanceService, get_finance_service
from launch_ops.services.upcoming_service import UpcomingTaskService, get_upcoming_task_service

__all__ = [
    "FinanceService",
    "UpcomingTaskService",
    "get_finance_service",
    "get_upcoming_task_service",
]
