"""
launch_ops/pipelines/normalizers.py

Scalar normalizers for loosely typed spreadsheet cells.

Source sheets mix native numbers, currency-formatted strings, date cells,
day serials and free text depending on how a row was entered. Every helper
here is pure and returns a neutral value (``None`` or ``""``) instead of
raising, so one bad cell never fails the row it belongs to.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timezone
from typing import Any

from dateutil import parser as date_parser
from openpyxl.utils.datetime import from_excel

_NON_NUMERIC_CHARS = re.compile(r"[^0-9.\-]")
_LEADING_FLOAT = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")
_URL_PATTERN = re.compile(r"^https?:", re.IGNORECASE)

_PARTIAL_DATE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def parse_numeric(value: Any) -> float | None:
    """
    Parse a cell into a number.

    Finite native numbers are returned as-is. Strings keep only digits, dots
    and minus signs and are read as the longest leading decimal, so
    ``"$1,234.56"`` becomes ``1234.56``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        cleaned = _NON_NUMERIC_CHARS.sub("", value)
        if not cleaned:
            return None
        match = _LEADING_FLOAT.match(cleaned)
        if match is None:
            return None
        return float(match.group(0))
    return None


def to_iso(moment: datetime) -> str:
    """
    Render a datetime as a UTC ISO-8601 string with millisecond precision.

    Naive values are taken to already be in UTC.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    rendered = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


def parse_iso(value: str | None) -> datetime | None:
    """
    Parse an ISO string produced by :func:`to_iso` back into an aware datetime.
    """

    if not value:
        return None
    normalized = value[:-1] + "+00:00" if value.endswith("Z") else value
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date_to_iso(value: Any) -> str | None:
    """
    Convert a date-like cell into a UTC ISO timestamp.

    Accepts native datetimes and dates, spreadsheet day serials (decoded
    against the 1900 epoch and rebuilt as a UTC calendar date) and free-text
    dates. Free text must name a full calendar date; partial values such as
    ``"October"`` or ``"2025-10"`` are rejected rather than completed from
    today. Returns ``None`` for anything that cannot be recovered.
    """

    if not value or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return _safe_iso(value)
    if isinstance(value, date):
        return _safe_iso(datetime(value.year, value.month, value.day, tzinfo=timezone.utc))
    if isinstance(value, (int, float)):
        return _serial_to_iso(value)

    text = str(value).strip()
    if not text:
        return None
    parsed = _parse_full_date(text)
    if parsed is None:
        return None
    return _safe_iso(parsed)


def _parse_full_date(text: str) -> datetime | None:
    # Parsing against two defaults that differ in year, month and day exposes
    # any date part dateutil had to fill in.
    try:
        first, second = (date_parser.parse(text, default=default) for default in _PARTIAL_DATE_DEFAULTS)
    except (ValueError, OverflowError):
        return None
    if first.date() != second.date():
        return None
    return first


def _safe_iso(moment: datetime) -> str | None:
    # Aware values near datetime.min/max cannot always be shifted to UTC.
    try:
        return to_iso(moment)
    except (OverflowError, ValueError):
        return None


def _serial_to_iso(serial: float) -> str | None:
    if not math.isfinite(serial) or serial <= 0:
        return None
    try:
        decoded = from_excel(serial)
    except (ValueError, OverflowError, TypeError):
        return None
    if not isinstance(decoded, datetime):
        return None
    return _safe_iso(datetime(decoded.year, decoded.month, decoded.day, tzinfo=timezone.utc))


def format_label_date(iso: str | None) -> str:
    """
    Short display date for charts and lists, e.g. ``Oct 5``.
    """

    moment = parse_iso(iso)
    if moment is None:
        return ""
    moment = moment.astimezone(timezone.utc)
    return f"{moment:%b} {moment.day}"


def cell_text(value: Any) -> str:
    """
    Read a cell as trimmed text; empty cells read as ``""``.
    """

    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_url(value: Any) -> bool:
    return isinstance(value, str) and bool(_URL_PATTERN.match(value.strip()))
