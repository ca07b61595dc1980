"""
launch_ops/domain package marker.
"""

from launch_ops.domain.finance import (
    BurnTrendPoint,
    FinanceAttachment,
    FinanceMetrics,
    FinanceSnapshot,
    FinanceTransaction,
    RecentExpense,
    VendorRule,
)
from launch_ops.domain.tasks import CSVParseIssue, TaskParseResult, UpcomingTask

__all__ = [
    "BurnTrendPoint",
    "CSVParseIssue",
    "FinanceAttachment",
    "FinanceMetrics",
    "FinanceSnapshot",
    "FinanceTransaction",
    "RecentExpense",
    "TaskParseResult",
    "UpcomingTask",
    "VendorRule",
]
