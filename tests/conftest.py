"""
Shared pytest fixtures.
"""

from __future__ import annotations

import io
from datetime import datetime

import pytest
from openpyxl import Workbook


@pytest.fixture()
def finance_workbook_bytes() -> bytes:
    """A small finance workbook with all four sheets."""
    workbook = Workbook()

    dashboard = workbook.active
    dashboard.title = "Burn_Dashboard"
    dashboard.append(["Metric", "Value"])
    dashboard.append(["Opening Capital", 50000])
    dashboard.append(["Current Spend to Date (All)", "$12,345.67"])
    dashboard.append(["Runway (Days)", "45"])
    dashboard.append(["Net Cash Out", "N/A"])

    ledger = workbook.create_sheet("Transactions")
    ledger.append(
        [
            "Date", "Account", "Type", "Payee", "Memo", "Category", "Subcategory",
            "Amount", "GST/HST", "Tip", "Total", "Source", "EmailId", "ThreadId",
            "AttachmentFolder", "AttachmentCount", "Status", "Notes", "Month",
        ]
    )
    ledger.append(
        [
            datetime(2025, 10, 14), "Chequing", "Expense", "Sign Shop", "", "Marketing", "Signage",
            -113.0, -13.0, None, -113.0, "Gmail", "msg-1", "thr-1",
            None, 1, "Reconciled", "", "2025-10",
        ]
    )
    ledger.append(
        [
            datetime(2025, 10, 10), "Chequing", "Income", "Investor", "", "Capital", "",
            5000, None, None, 5000, "Manual", "", "", None, 0, "", "", "2025-10",
        ]
    )
    ledger.append(
        [
            None, "Chequing", "Expense", "Ghost", "", "", "", -1, None, None, -1,
            "", "", "", None, 0, "", "", "",
        ]
    )

    log = workbook.create_sheet("Attachments_Log")
    log.append(
        ["SavedAt", "EmailId", "ThreadId", "FileName", "DrivePath", "ByteSize", "VendorGuess", "ParsedAmount", "Notes"]
    )
    log.append(
        [datetime(2025, 10, 14, 9, 30), "msg-1", "thr-1", "signage.pdf", "Receipts/signage.pdf", 2048, "Sign Shop", "$113.00", ""]
    )
    log["D2"].hyperlink = "https://files.example/signage.pdf"

    rules = workbook.create_sheet("Rules_Vendors")
    rules.append(["Vendor_Contains", "Assign_Category", "Assign_Subcategory", "Tag"])
    rules.append(["Sign", "Marketing", "Signage", "launch"])
    rules.append([None, "Ignored", "", ""])

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()
