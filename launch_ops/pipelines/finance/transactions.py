"""
launch_ops/pipelines/finance/transactions.py

Ledger parsing and attachment joining.

Each ledger row is matched to attachment log entries by email id and by
thread id. The same attachment can be reachable through both keys, so the
joined list is de-duplicated on ``(link or drive path, file name)``.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Any, Iterable

from launch_ops.domain.finance import FinanceAttachment, FinanceTransaction
from launch_ops.pipelines.finance.attachments import sort_newest_first
from launch_ops.pipelines.normalizers import (
    cell_text,
    is_blank,
    is_url,
    parse_date_to_iso,
    parse_numeric,
)
from launch_ops.pipelines.workbook import RawRow

TRANSACTIONS_SHEET = "Transactions"


def transaction_id(email_id: str, thread_id: str, position: int) -> str:
    """
    Display key for a ledger row: email id, else thread id, else ``tx-<position>``.
    """

    return email_id or thread_id or f"tx-{position}"


def raw_total(row: RawRow) -> Any:
    """
    The ``Total`` cell, or ``Amount`` when ``Total`` is blank.
    """

    total = row.get("Total")
    return row.get("Amount") if is_blank(total) else total


def attachment_key(attachment: FinanceAttachment) -> tuple[str, str]:
    return (attachment.link or attachment.drive_path, attachment.file_name)


def folder_attachment(folder: str, *, email_id: str, thread_id: str) -> FinanceAttachment:
    """
    Synthetic attachment standing for the row's own attachment folder.
    """

    return FinanceAttachment(
        saved_at=None,
        email_id=email_id,
        thread_id=thread_id,
        file_name=folder,
        drive_path=folder,
        link=folder if is_url(folder) else None,
        vendor_guess="",
        parsed_amount=None,
        notes="",
    )


def _index_by(
    attachments: Iterable[FinanceAttachment],
    key: str,
) -> dict[str, list[FinanceAttachment]]:
    index: dict[str, list[FinanceAttachment]] = defaultdict(list)
    for attachment in attachments:
        value = getattr(attachment, key)
        if value and attachment not in index[value]:
            index[value].append(attachment)
    return dict(index)


def build_transactions(
    rows: Iterable[RawRow],
    attachments: list[FinanceAttachment],
) -> list[FinanceTransaction]:
    """
    Build ledger transactions, newest first; rows without a date are dropped.
    """

    by_email = _index_by(attachments, "email_id")
    by_thread = _index_by(attachments, "thread_id")

    transactions: list[FinanceTransaction] = []
    dated_rows = [row for row in rows if not is_blank(row.get("Date"))]
    for position, row in enumerate(dated_rows):
        email_id = cell_text(row.get("EmailId"))
        thread_id = cell_text(row.get("ThreadId"))
        attachment_folder = cell_text(row.get("AttachmentFolder"))

        joined: dict[tuple[str, str], FinanceAttachment] = {}
        for attachment in by_email.get(email_id, []):
            joined[attachment_key(attachment)] = attachment
        for attachment in by_thread.get(thread_id, []):
            joined[attachment_key(attachment)] = attachment
        if attachment_folder:
            synthetic = folder_attachment(attachment_folder, email_id=email_id, thread_id=thread_id)
            joined[(attachment_folder, "folder")] = synthetic

        attachment_count = parse_numeric(row.get("AttachmentCount"))

        transactions.append(
            FinanceTransaction(
                id=transaction_id(email_id, thread_id, position),
                date=parse_date_to_iso(row.get("Date")),
                account=cell_text(row.get("Account")),
                type=cell_text(row.get("Type")),
                payee=cell_text(row.get("Payee")),
                memo=cell_text(row.get("Memo")),
                category=cell_text(row.get("Category")),
                subcategory=cell_text(row.get("Subcategory")),
                amount=parse_numeric(row.get("Amount")),
                gst_hst=parse_numeric(row.get("GST/HST")),
                tip=parse_numeric(row.get("Tip")),
                total=parse_numeric(raw_total(row)),
                source=cell_text(row.get("Source")),
                email_id=email_id,
                thread_id=thread_id,
                attachment_folder=attachment_folder,
                attachment_count=max(0, int(attachment_count)) if attachment_count is not None else 0,
                status=cell_text(row.get("Status")),
                notes=cell_text(row.get("Notes")),
                month=cell_text(row.get("Month")),
                attachments=tuple(joined.values()),
            )
        )

    return sort_newest_first(transactions, key=lambda transaction: transaction.date)
