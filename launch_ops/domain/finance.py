"""
launch_ops/domain/finance.py

Domain records produced by the finance workbook pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FinanceMetrics:
    """
    Point-in-time aggregate financial state read from the dashboard sheet.
    """

    opening_capital: float = 0
    current_spend_to_date: float = 0
    income_to_date: float = 0
    net_cash_out: float = 0
    capital_remaining: float = 0
    month_burn: float = 0
    last30_burn: float = 0
    avg_daily_burn: float = 0
    runway_days: float = 0


@dataclass(frozen=True)
class FinanceAttachment:
    """
    A receipt or file evidencing a transaction.
    """

    saved_at: str | None
    email_id: str
    thread_id: str
    file_name: str
    drive_path: str
    link: str | None
    vendor_guess: str
    parsed_amount: float | None
    notes: str


@dataclass(frozen=True)
class FinanceTransaction:
    """
    One ledger entry joined to its attachments.
    """

    id: str
    date: str | None
    account: str
    type: str
    payee: str
    memo: str
    category: str
    subcategory: str
    amount: float | None
    gst_hst: float | None
    tip: float | None
    total: float | None
    source: str
    email_id: str
    thread_id: str
    attachment_folder: str
    attachment_count: int
    status: str
    notes: str
    month: str
    attachments: tuple[FinanceAttachment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class VendorRule:
    vendor_contains: str
    assign_category: str
    assign_subcategory: str
    tag: str


@dataclass(frozen=True)
class BurnTrendPoint:
    """
    Aggregate expense for one calendar day (``date`` is ``YYYY-MM-DD``).
    """

    date: str
    label: str
    amount: float


@dataclass(frozen=True)
class RecentExpense:
    date: str | None
    label: str
    payee: str
    total: float
    category: str


@dataclass(frozen=True)
class FinanceSnapshot:
    """
    Everything derived from one fetch of the finance workbook.
    """

    metrics: FinanceMetrics
    transactions: list[FinanceTransaction]
    attachments: list[FinanceAttachment]
    vendor_rules: list[VendorRule]
    burn_trend: list[BurnTrendPoint]
    recent_expenses: list[RecentExpense]
