"""
launch_ops/pipelines/finance/metrics.py

Burn dashboard label/value reduction.
"""

from __future__ import annotations

from typing import Any, Sequence

from launch_ops.domain.finance import FinanceMetrics
from launch_ops.pipelines.normalizers import cell_text, parse_numeric

METRICS_SHEET = "Burn_Dashboard"

# FinanceMetrics field -> dashboard label (lower case)
METRIC_LABELS: dict[str, str] = {
    "opening_capital": "opening capital",
    "current_spend_to_date": "current spend to date (all)",
    "income_to_date": "income to date (all)",
    "net_cash_out": "net cash out",
    "capital_remaining": "current capital remaining",
    "month_burn": "this month burn (expenses)",
    "last30_burn": "last 30 days burn",
    "avg_daily_burn": "avg daily burn (30d)",
    "runway_days": "runway (days)",
}


def collect_metrics(rows: Sequence[Sequence[Any]] | None) -> FinanceMetrics:
    """
    Reduce ``[label, value]`` rows to :class:`FinanceMetrics`.

    Labels match case- and whitespace-insensitively. A label that is missing
    or whose value is not numeric reads as 0.
    """

    lookup: dict[str, float] = {}
    for row in rows or []:
        if not row:
            continue
        label = cell_text(row[0]).lower()
        value = parse_numeric(row[1]) if len(row) > 1 else None
        if label and value is not None:
            lookup[label] = value

    return FinanceMetrics(
        **{field_name: lookup.get(label, 0) for field_name, label in METRIC_LABELS.items()}
    )
