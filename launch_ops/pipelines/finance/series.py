"""
launch_ops/pipelines/finance/series.py

Derived expense series: 30-day burn trend and the recent expenses list.

Both series share one expense predicate. A transaction counts as an expense
when its type does not mention income and either its effective total is
negative, its type is blank, or its type mentions expense. Untyped rows
therefore count as expenses even when their total is positive.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta, timezone
from typing import Iterable

from launch_ops.domain.finance import BurnTrendPoint, FinanceTransaction, RecentExpense
from launch_ops.pipelines.normalizers import format_label_date, parse_iso

BURN_WINDOW_DAYS = 30
RECENT_EXPENSES_LIMIT = 5


def effective_total(transaction: FinanceTransaction) -> float:
    """
    ``total``, else ``amount``, else 0.
    """

    if transaction.total is not None:
        return transaction.total
    if transaction.amount is not None:
        return transaction.amount
    return 0


def is_qualifying_expense(transaction: FinanceTransaction) -> bool:
    kind = transaction.type.lower()
    if "income" in kind:
        return False
    return effective_total(transaction) < 0 or not kind or "expense" in kind


def expense_payee(transaction: FinanceTransaction) -> str:
    return transaction.payee or transaction.memo or transaction.category or "Unknown"


def expense_category(transaction: FinanceTransaction) -> str:
    return transaction.category or transaction.subcategory or ""


def burn_window(now: datetime | None = None) -> tuple[datetime, datetime]:
    """
    Trailing window covering today and the 29 days before it.

    Naive ``now`` values (and the default) are read in server-local time.
    """

    if now is None:
        reference = datetime.now().astimezone()
    elif now.tzinfo is None:
        reference = now.astimezone()
    else:
        reference = now
    start = (reference - timedelta(days=BURN_WINDOW_DAYS - 1)).replace(
        hour=0, minute=0, second=0, microsecond=0
    )
    end = reference.replace(hour=23, minute=59, second=59, microsecond=999000)
    return start, end


def build_burn_trend(
    transactions: Iterable[FinanceTransaction],
    *,
    now: datetime | None = None,
) -> list[BurnTrendPoint]:
    """
    Daily expense totals within the burn window, ascending by day.

    Days are UTC calendar days; days without expenses produce no point.
    """

    start, end = burn_window(now)
    buckets: dict[str, float] = defaultdict(float)
    for transaction in transactions:
        if not is_qualifying_expense(transaction):
            continue
        moment = parse_iso(transaction.date)
        if moment is None or moment < start or moment > end:
            continue
        day = moment.astimezone(timezone.utc).date().isoformat()
        buckets[day] += abs(effective_total(transaction))

    return [
        BurnTrendPoint(
            date=day,
            label=format_label_date(f"{day}T00:00:00.000Z"),
            amount=round(buckets[day], 2),
        )
        for day in sorted(buckets)
    ]


def build_recent_expenses(transactions: Iterable[FinanceTransaction]) -> list[RecentExpense]:
    """
    Project the newest qualifying expenses; input must already be newest first.
    """

    recent: list[RecentExpense] = []
    for transaction in transactions:
        if len(recent) >= RECENT_EXPENSES_LIMIT:
            break
        if not is_qualifying_expense(transaction):
            continue
        recent.append(
            RecentExpense(
                date=transaction.date,
                label=format_label_date(transaction.date),
                payee=expense_payee(transaction),
                total=abs(effective_total(transaction)),
                category=expense_category(transaction),
            )
        )
    return recent
