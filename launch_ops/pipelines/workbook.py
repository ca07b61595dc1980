"""
launch_ops/pipelines/workbook.py

XLSX workbook loading.

The workbook is decoded once into plain sheet grids so the finance builders
never touch openpyxl objects and can be exercised with hand-built rows.
"""

from __future__ import annotations

import io
import logging
import zipfile
from dataclasses import dataclass
from typing import Any, Mapping

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from launch_ops.pipelines.normalizers import cell_text, is_blank

logger = logging.getLogger(__name__)

RawRow = Mapping[str, Any]


class WorkbookFormatError(ValueError):
    """
    Raised when the downloaded payload is not a readable XLSX workbook.
    """


@dataclass(frozen=True)
class SheetCell:
    """
    One cell value plus the hyperlink target attached to it, if any.
    """

    value: Any = None
    hyperlink: str | None = None


SheetGrid = list[list[SheetCell]]


def load_workbook_grids(content: bytes) -> dict[str, SheetGrid]:
    """
    Decode XLSX bytes into ``{sheet name: grid}`` with blank rows removed.
    """

    try:
        workbook = load_workbook(io.BytesIO(content), data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError, ValueError) as exc:
        raise WorkbookFormatError(f"Finance workbook could not be read: {exc}") from exc

    try:
        grids: dict[str, SheetGrid] = {}
        for worksheet in workbook.worksheets:
            grid: SheetGrid = []
            for row in worksheet.iter_rows():
                cells = [_to_sheet_cell(cell) for cell in row]
                if all(is_blank(cell.value) and not cell.hyperlink for cell in cells):
                    continue
                grid.append(cells)
            grids[worksheet.title] = grid
    finally:
        workbook.close()

    logger.debug("Loaded workbook sheets=%s", sorted(grids))
    return grids


def _to_sheet_cell(cell: Any) -> SheetCell:
    hyperlink = getattr(cell, "hyperlink", None)
    target = getattr(hyperlink, "target", None) if hyperlink is not None else None
    return SheetCell(value=cell.value, hyperlink=target or None)


def grid_values(grid: SheetGrid) -> list[list[Any]]:
    """
    Drop hyperlink annotations and keep raw cell values.
    """

    return [[cell.value for cell in row] for row in grid]


def grid_records(grid: SheetGrid) -> list[dict[str, Any]]:
    """
    Turn a grid into header-keyed rows.

    The first row supplies the keys; cells missing from a short row read as
    ``""``. Columns with a blank header are ignored.
    """

    if not grid:
        return []

    headers = [cell_text(cell.value) for cell in grid[0]]
    records: list[dict[str, Any]] = []
    for row in grid[1:]:
        record: dict[str, Any] = {}
        for index, header in enumerate(headers):
            if not header or header in record:
                continue
            value = row[index].value if index < len(row) else None
            record[header] = "" if value is None else value
        records.append(record)
    return records
