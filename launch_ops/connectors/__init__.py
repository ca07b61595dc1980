"""
launch_ops/connectors package marker.
"""

from launch_ops.connectors.base import BaseConnector, SourceRequestError
from launch_ops.connectors.sheet_export import FinanceWorkbookConnector, UpcomingTasksConnector

__all__ = [
    "BaseConnector",
    "FinanceWorkbookConnector",
    "SourceRequestError",
    "UpcomingTasksConnector",
]
