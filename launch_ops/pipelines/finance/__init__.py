"""
launch_ops/pipelines/finance package.

Builds a :class:`FinanceSnapshot` from decoded workbook grids. Builders run
in dependency order: attachments feed transactions, transactions feed the
derived series.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping

from launch_ops.domain.finance import FinanceSnapshot
from launch_ops.pipelines.finance.attachments import ATTACHMENTS_SHEET, build_attachments
from launch_ops.pipelines.finance.metrics import METRICS_SHEET, collect_metrics
from launch_ops.pipelines.finance.series import build_burn_trend, build_recent_expenses
from launch_ops.pipelines.finance.transactions import TRANSACTIONS_SHEET, build_transactions
from launch_ops.pipelines.finance.vendor_rules import VENDOR_RULES_SHEET, build_vendor_rules
from launch_ops.pipelines.workbook import SheetGrid, grid_records, grid_values


def build_finance_snapshot(
    sheets: Mapping[str, SheetGrid],
    *,
    now: datetime | None = None,
) -> FinanceSnapshot:
    """
    Derive every finance record from one workbook. Missing sheets read as empty.
    """

    metrics = collect_metrics(grid_values(sheets.get(METRICS_SHEET, [])))
    attachments = build_attachments(sheets.get(ATTACHMENTS_SHEET))
    transactions = build_transactions(grid_records(sheets.get(TRANSACTIONS_SHEET, [])), attachments)
    vendor_rules = build_vendor_rules(grid_records(sheets.get(VENDOR_RULES_SHEET, [])))

    return FinanceSnapshot(
        metrics=metrics,
        transactions=transactions,
        attachments=attachments,
        vendor_rules=vendor_rules,
        burn_trend=build_burn_trend(transactions, now=now),
        recent_expenses=build_recent_expenses(transactions),
    )


__all__ = ["build_finance_snapshot"]
