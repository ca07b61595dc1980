from __future__ import annotations

import math
from datetime import date, datetime, timedelta, timezone

import pytest
from openpyxl.utils.datetime import to_excel

from launch_ops.pipelines.normalizers import (
    cell_text,
    format_label_date,
    is_url,
    parse_date_to_iso,
    parse_iso,
    parse_numeric,
)


class TestParseNumeric:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("$1,234.56", 1234.56),
            ("1,234.56", 1234.56),
            (" 42 ", 42.0),
            ("-12.50 CAD", -12.5),
            ("$-45.10", -45.1),
            ("1.2.3", 1.2),
        ],
    )
    def test_strips_currency_and_separators(self, raw: str, expected: float) -> None:
        assert parse_numeric(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["", "abc", "N/A", "$", "--", "-"])
    def test_non_numeric_strings_return_none(self, raw: str) -> None:
        assert parse_numeric(raw) is None

    def test_native_numbers_are_returned_as_is(self) -> None:
        assert parse_numeric(42) == 42
        assert parse_numeric(-3.25) == -3.25

    def test_non_finite_and_non_numeric_types_return_none(self) -> None:
        assert parse_numeric(math.inf) is None
        assert parse_numeric(float("nan")) is None
        assert parse_numeric(None) is None
        assert parse_numeric(True) is None
        assert parse_numeric(["1"]) is None


class TestParseDateToISO:
    def test_native_datetime_is_rendered_in_utc(self) -> None:
        assert parse_date_to_iso(datetime(2025, 10, 5, 14, 30)) == "2025-10-05T14:30:00.000Z"

    def test_aware_datetime_is_converted_to_utc(self) -> None:
        eastern = timezone(timedelta(hours=-4))
        assert parse_date_to_iso(datetime(2025, 10, 5, 10, 0, tzinfo=eastern)) == "2025-10-05T14:00:00.000Z"

    def test_native_date(self) -> None:
        assert parse_date_to_iso(date(2025, 10, 5)) == "2025-10-05T00:00:00.000Z"

    def test_day_serial_is_decoded_to_calendar_day(self) -> None:
        assert parse_date_to_iso(45000) == "2023-03-15T00:00:00.000Z"

    def test_day_serial_drops_time_of_day(self) -> None:
        assert parse_date_to_iso(45000.75) == "2023-03-15T00:00:00.000Z"

    @pytest.mark.parametrize(
        "day",
        [date(1999, 7, 4), date(2024, 2, 29), date(2025, 12, 31), date(2026, 1, 1)],
    )
    def test_day_serial_round_trips_to_same_utc_day(self, day: date) -> None:
        serial = to_excel(datetime(day.year, day.month, day.day))
        iso = parse_date_to_iso(serial)
        assert iso is not None
        assert iso[:10] == day.isoformat()

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("2025-10-05", "2025-10-05T00:00:00.000Z"),
            ("2025-10-05T10:00:00-04:00", "2025-10-05T14:00:00.000Z"),
            ("October 5, 2025", "2025-10-05T00:00:00.000Z"),
        ],
    )
    def test_free_text_dates(self, raw: str, expected: str) -> None:
        assert parse_date_to_iso(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", 0, "not a date", -5, False, "0001-01-01T00:00:00+05:00", "9999-12-31T23:00:00-05:00"],
    )
    def test_unrecoverable_values_return_none(self, raw: object) -> None:
        assert parse_date_to_iso(raw) is None

    @pytest.mark.parametrize("raw", ["October", "2025-10", "Oct 2025", "5 October"])
    def test_partial_dates_are_not_completed_from_today(self, raw: str) -> None:
        assert parse_date_to_iso(raw) is None

    def test_iso_output_parses_back(self) -> None:
        parsed = parse_iso(parse_date_to_iso("2025-10-05"))
        assert parsed == datetime(2025, 10, 5, tzinfo=timezone.utc)


def test_format_label_date_uses_short_month_and_day() -> None:
    assert format_label_date("2025-10-05T00:00:00.000Z") == "Oct 5"
    assert format_label_date("2025-12-25T23:00:00.000Z") == "Dec 25"


def test_format_label_date_is_blank_for_missing_values() -> None:
    assert format_label_date(None) == ""
    assert format_label_date("garbage") == ""


def test_cell_text_reads_or_defaults() -> None:
    assert cell_text(None) == ""
    assert cell_text("  memo  ") == "memo"
    assert cell_text(12.0) == "12"
    assert cell_text(12.5) == "12.5"
    assert cell_text(7) == "7"


def test_is_url_accepts_http_and_https_only() -> None:
    assert is_url("https://drive.example/x")
    assert is_url("HTTP://drive.example/x")
    assert not is_url("Receipts/2025/x.pdf")
    assert not is_url("ftp://drive.example/x")
    assert not is_url(None)
