"""
launch_ops/schemas/finance.py

Response schemas for the finance endpoint.
"""

from __future__ import annotations

from pydantic import Field

from launch_ops.schemas.common import CamelModel


class FinanceMetricsResponse(CamelModel):
    opening_capital: float = 0
    current_spend_to_date: float = 0
    income_to_date: float = 0
    net_cash_out: float = 0
    capital_remaining: float = 0
    month_burn: float = 0
    last30_burn: float = Field(default=0, alias="last30Burn")
    avg_daily_burn: float = 0
    runway_days: float = 0


class FinanceAttachmentResponse(CamelModel):
    saved_at: str | None = None
    email_id: str = ""
    thread_id: str = ""
    file_name: str = ""
    drive_path: str = ""
    link: str | None = None
    vendor_guess: str = ""
    parsed_amount: float | None = None
    notes: str = ""


class FinanceTransactionResponse(CamelModel):
    id: str
    date: str | None = None
    account: str = ""
    type: str = ""
    payee: str = ""
    memo: str = ""
    category: str = ""
    subcategory: str = ""
    amount: float | None = None
    gst_hst: float | None = None
    tip: float | None = None
    total: float | None = None
    source: str = ""
    email_id: str = ""
    thread_id: str = ""
    attachment_folder: str = ""
    attachment_count: int = 0
    status: str = ""
    notes: str = ""
    month: str = ""
    attachments: list[FinanceAttachmentResponse] = Field(default_factory=list)


class VendorRuleResponse(CamelModel):
    vendor_contains: str
    assign_category: str = ""
    assign_subcategory: str = ""
    tag: str = ""


class BurnTrendPointResponse(CamelModel):
    date: str
    label: str
    amount: float = Field(..., ge=0)


class RecentExpenseResponse(CamelModel):
    date: str | None = None
    label: str = ""
    payee: str
    total: float = Field(..., ge=0)
    category: str = ""


class FinanceResponse(CamelModel):
    """
    Full finance payload consumed by the dashboard.
    """

    metrics: FinanceMetricsResponse
    transactions: list[FinanceTransactionResponse] = Field(default_factory=list)
    attachments: list[FinanceAttachmentResponse] = Field(default_factory=list)
    vendor_rules: list[VendorRuleResponse] = Field(default_factory=list)
    burn_trend: list[BurnTrendPointResponse] = Field(default_factory=list)
    recent_expenses: list[RecentExpenseResponse] = Field(default_factory=list)
