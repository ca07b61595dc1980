"""
launch_ops/pipelines/finance/attachments.py

Attachment log extraction.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from launch_ops.domain.finance import FinanceAttachment
from launch_ops.pipelines.normalizers import cell_text, is_url, parse_date_to_iso, parse_numeric
from launch_ops.pipelines.workbook import SheetCell, SheetGrid

ATTACHMENTS_SHEET = "Attachments_Log"

T = TypeVar("T")


class _HeaderIndex:
    """
    Case-insensitive column lookup over the header row.

    Columns absent from the header read as ``None`` on every row.
    """

    def __init__(self, header: list[SheetCell]) -> None:
        self._positions: dict[str, int] = {}
        for position, cell in enumerate(header):
            name = cell_text(cell.value).lower()
            if name and name not in self._positions:
                self._positions[name] = position

    def value(self, row: list[SheetCell], column: str) -> Any:
        position = self._positions.get(column)
        if position is None or position >= len(row):
            return None
        return row[position].value


def find_row_link(row: list[SheetCell], drive_path: str) -> str | None:
    """
    First hyperlink target or URL-shaped string in the row, left to right.

    Falls back to ``drive_path`` when it is itself a URL.
    """

    for cell in row:
        candidate = cell.hyperlink or (cell.value if isinstance(cell.value, str) else None)
        if candidate and is_url(candidate):
            return candidate.strip()
    if drive_path and is_url(drive_path):
        return drive_path
    return None


def build_attachments(grid: SheetGrid | None) -> list[FinanceAttachment]:
    """
    Parse the attachment log grid (header row first), newest first.
    """

    if not grid:
        return []

    columns = _HeaderIndex(grid[0])
    results: list[FinanceAttachment] = []
    for row in grid[1:]:
        file_name = cell_text(columns.value(row, "filename"))
        drive_path = cell_text(columns.value(row, "drivepath"))
        if not file_name and not drive_path:
            continue

        results.append(
            FinanceAttachment(
                saved_at=parse_date_to_iso(columns.value(row, "savedat")),
                email_id=cell_text(columns.value(row, "emailid")),
                thread_id=cell_text(columns.value(row, "threadid")),
                file_name=file_name,
                drive_path=drive_path,
                link=find_row_link(row, drive_path),
                vendor_guess=cell_text(columns.value(row, "vendorguess")),
                parsed_amount=parse_numeric(columns.value(row, "parsedamount")),
                notes=cell_text(columns.value(row, "notes")),
            )
        )

    return sort_newest_first(results, key=lambda attachment: attachment.saved_at)


def sort_newest_first(items: list[T], *, key: Callable[[T], str | None]) -> list[T]:
    """
    Stable sort by an ISO timestamp, newest first, undated items last.
    """

    dated = [item for item in items if key(item)]
    undated = [item for item in items if not key(item)]
    dated.sort(key=key, reverse=True)
    return dated + undated
