"""
launch_ops/connectors/sheet_export.py

Connectors for the spreadsheet exports backing the dashboard.
"""

from __future__ import annotations

import requests

from launch_ops.config import FinanceSourceSettings, SourceHTTPSettings, UpcomingSourceSettings
from launch_ops.connectors.base import BaseConnector


class FinanceWorkbookConnector(BaseConnector):
    """
    Downloads the finance workbook as XLSX bytes.
    """

    def __init__(
        self,
        *,
        settings: FinanceSourceSettings,
        http_settings: SourceHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="finance_workbook", http_settings=http_settings, session=session)
        self._settings = settings

    def fetch_workbook(self) -> bytes:
        return self._request_bytes(url=self._settings.xlsx_url)


class UpcomingTasksConnector(BaseConnector):
    """
    Downloads the task checklist as CSV text.
    """

    def __init__(
        self,
        *,
        settings: UpcomingSourceSettings,
        http_settings: SourceHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(source="upcoming_tasks", http_settings=http_settings, session=session)
        self._settings = settings

    def fetch_csv(self) -> str:
        return self._request_text(url=self._settings.csv_url)
