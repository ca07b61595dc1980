from __future__ import annotations

from dataclasses import fields

import pytest

from launch_ops.domain.finance import FinanceMetrics
from launch_ops.pipelines.finance.metrics import collect_metrics


def test_runway_days_parses_numeric_value() -> None:
    assert collect_metrics([["Runway (Days)", "45"]]).runway_days == 45


def test_runway_days_falls_back_to_zero_for_non_numeric_value() -> None:
    assert collect_metrics([["Runway (Days)", "N/A"]]).runway_days == 0


def test_labels_match_case_and_whitespace_insensitively() -> None:
    upper = collect_metrics([["Opening Capital", "$10,000"]])
    padded = collect_metrics([[" opening capital ", "$10,000"]])

    assert upper.opening_capital == pytest.approx(10000)
    assert padded.opening_capital == upper.opening_capital


def test_every_metric_is_read() -> None:
    rows = [
        ["Opening Capital", 50000],
        ["Current Spend to Date (All)", "$12,345.67"],
        ["Income to Date (All)", "1,000"],
        ["Net Cash Out", "11345.67"],
        ["Current Capital Remaining", "38654.33"],
        ["This Month Burn (Expenses)", "2,500"],
        ["Last 30 Days Burn", "3,000"],
        ["Avg Daily Burn (30d)", "100"],
        ["Runway (Days)", "386"],
    ]

    metrics = collect_metrics(rows)

    assert metrics == FinanceMetrics(
        opening_capital=50000,
        current_spend_to_date=pytest.approx(12345.67),
        income_to_date=1000,
        net_cash_out=pytest.approx(11345.67),
        capital_remaining=pytest.approx(38654.33),
        month_burn=2500,
        last30_burn=3000,
        avg_daily_burn=100,
        runway_days=386,
    )


def test_missing_labels_and_malformed_rows_default_to_zero() -> None:
    metrics = collect_metrics([[], ["Label only"], ["", "5"], [None, "7"], ["Unknown label", "9"]])

    assert all(getattr(metrics, field.name) == 0 for field in fields(FinanceMetrics))


def test_missing_sheet_yields_zeroed_metrics() -> None:
    assert collect_metrics(None) == FinanceMetrics()
