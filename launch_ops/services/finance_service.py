"""
launch_ops/services/finance_service.py

Request-scoped finance workbook ingestion.

Each call downloads the workbook once and derives every record from scratch;
nothing is cached or persisted between calls.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from functools import lru_cache
from typing import Callable, Protocol

from launch_ops.config import get_finance_source_settings, get_source_http_settings
from launch_ops.connectors import FinanceWorkbookConnector
from launch_ops.domain.finance import FinanceSnapshot
from launch_ops.logging_utils import FINANCE_SNAPSHOT_BUILT, log_pipeline_event
from launch_ops.pipelines.finance import build_finance_snapshot
from launch_ops.pipelines.workbook import load_workbook_grids

logger = logging.getLogger(__name__)


class WorkbookSource(Protocol):
    source: str

    def fetch_workbook(self) -> bytes: ...


class FinanceService:
    """
    Coordinates workbook download, decoding and the finance builders.
    """

    def __init__(
        self,
        *,
        connector: WorkbookSource,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._connector = connector
        self._clock = clock

    def load_snapshot(self) -> FinanceSnapshot:
        """
        Fetch and derive the finance snapshot.

        Raises SourceRequestError when the download fails and
        WorkbookFormatError when the payload is not a workbook.
        """

        started_at = time.perf_counter()
        content = self._connector.fetch_workbook()
        sheets = load_workbook_grids(content)
        now = self._clock() if self._clock is not None else None
        snapshot = build_finance_snapshot(sheets, now=now)

        log_pipeline_event(
            logger,
            FINANCE_SNAPSHOT_BUILT,
            source=self._connector.source,
            started_at=started_at,
            sheets=sorted(sheets),
            transactions=len(snapshot.transactions),
            attachments=len(snapshot.attachments),
            vendor_rules=len(snapshot.vendor_rules),
            burn_days=len(snapshot.burn_trend),
        )
        return snapshot


@lru_cache(maxsize=1)
def get_finance_service() -> FinanceService:
    """
    Build and cache the finance service.
    """

    connector = FinanceWorkbookConnector(
        settings=get_finance_source_settings(),
        http_settings=get_source_http_settings(),
    )
    return FinanceService(connector=connector)
