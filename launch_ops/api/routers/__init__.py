"""
launch_ops/api/routers package marker.
"""

from launch_ops.api.routers.finance import router as finance_router
from launch_ops.api.routers.upcoming import router as upcoming_router

__all__ = [
    "finance_router",
    "upcoming_router",
]
