from __future__ import annotations

import pytest

from launch_ops.pipelines.finance.transactions import build_transactions, raw_total, transaction_id
from tests.builders import make_attachment

RECEIPT_BY_BOTH = make_attachment(email_id="e1", thread_id="t1", file_name="r1.pdf", link="https://x/1")
RECEIPT_BY_THREAD = make_attachment(thread_id="t1", file_name="r2.pdf", drive_path="Receipts/r2.pdf")
RECEIPT_BY_EMAIL = make_attachment(email_id="e1", thread_id="t9", file_name="r3.pdf", link="https://x/3")
ATTACHMENTS = [RECEIPT_BY_BOTH, RECEIPT_BY_THREAD, RECEIPT_BY_EMAIL]


def _row(**fields: object) -> dict[str, object]:
    row: dict[str, object] = {"Date": "2025-10-02", "EmailId": "", "ThreadId": "", "Total": "", "Amount": ""}
    row.update(fields)
    return row


def test_rows_with_empty_date_are_dropped() -> None:
    rows = [_row(Date=""), _row(Date="   "), _row(Date=None), _row(Payee="kept")]

    transactions = build_transactions(rows, [])

    assert [transaction.payee for transaction in transactions] == ["kept"]


def test_attachments_union_email_and_thread_matches_without_duplicates() -> None:
    [transaction] = build_transactions([_row(EmailId="e1", ThreadId="t1")], ATTACHMENTS)

    assert len(transaction.attachments) == 3
    assert set(transaction.attachments) == {RECEIPT_BY_BOTH, RECEIPT_BY_THREAD, RECEIPT_BY_EMAIL}


def test_transactions_sharing_email_id_each_get_their_own_thread_matches() -> None:
    rows = [
        _row(Date="2025-10-02", EmailId="e1", ThreadId="t1"),
        _row(Date="2025-10-01", EmailId="e1", ThreadId="t2"),
    ]

    first, second = build_transactions(rows, ATTACHMENTS)

    assert {a.file_name for a in first.attachments} == {"r1.pdf", "r2.pdf", "r3.pdf"}
    assert {a.file_name for a in second.attachments} == {"r1.pdf", "r3.pdf"}
    assert len(second.attachments) == 2


def test_attachment_folder_adds_synthetic_attachment() -> None:
    rows = [
        _row(Date="2025-10-03", AttachmentFolder="https://drive.example/folder"),
        _row(Date="2025-10-02", AttachmentFolder="Receipts/October"),
    ]

    url_folder, path_folder = build_transactions(rows, [])

    [url_attachment] = url_folder.attachments
    assert url_attachment.link == "https://drive.example/folder"
    assert url_attachment.file_name == "https://drive.example/folder"
    [path_attachment] = path_folder.attachments
    assert path_attachment.link is None
    assert path_attachment.drive_path == "Receipts/October"


def test_id_falls_back_from_email_to_thread_to_position() -> None:
    rows = [
        _row(Date="2025-10-05", EmailId="e1", ThreadId="t1"),
        _row(Date="2025-10-04", ThreadId="t7"),
        _row(Date="2025-10-03"),
    ]

    ids = [transaction.id for transaction in build_transactions(rows, [])]

    assert ids == ["e1", "t7", "tx-2"]
    assert transaction_id("", "", 9) == "tx-9"


def test_total_falls_back_to_amount_when_blank() -> None:
    [transaction] = build_transactions([_row(Amount="$-45.10", Total="")], [])

    assert transaction.amount == pytest.approx(-45.1)
    assert transaction.total == pytest.approx(-45.1)
    assert raw_total({"Total": 12, "Amount": 99}) == 12


def test_numeric_fields_and_text_fields_are_normalised() -> None:
    row = _row(
        Account=" Chequing ",
        Type="Expense",
        Payee="Sign Shop",
        Amount=-113.0,
        Total=-113.0,
        **{"GST/HST": "$-13.00", "Tip": "n/a", "AttachmentCount": "2", "Month": "2025-10"},
    )

    [transaction] = build_transactions([row], [])

    assert transaction.account == "Chequing"
    assert transaction.gst_hst == pytest.approx(-13.0)
    assert transaction.tip is None
    assert transaction.attachment_count == 2
    assert transaction.month == "2025-10"
    assert transaction.status == ""


def test_attachment_count_defaults_to_zero() -> None:
    [transaction] = build_transactions([_row(AttachmentCount="")], [])
    assert transaction.attachment_count == 0


def test_sorted_newest_first_with_unparseable_dates_last() -> None:
    rows = [
        _row(Date="2025-10-01", Payee="old"),
        _row(Date="someday", Payee="undated"),
        _row(Date="2025-10-09", Payee="new"),
    ]

    payees = [transaction.payee for transaction in build_transactions(rows, [])]

    assert payees == ["new", "old", "undated"]


@pytest.mark.parametrize("raw", ["-1", -3, "-0.5"])
def test_negative_attachment_count_reads_as_zero(raw: object) -> None:
    [transaction] = build_transactions([_row(AttachmentCount=raw)], [])
    assert transaction.attachment_count == 0
