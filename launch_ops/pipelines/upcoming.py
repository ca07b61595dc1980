"""
launch_ops/pipelines/upcoming.py

Task checklist CSV parsing.

Rows are read with the header row as field names. Structural problems (a
row whose field count differs from the header, broken quoting) are
collected as :class:`CSVParseIssue` and fail the whole document; value-level
problems only blank out the affected field.
"""

from __future__ import annotations

import csv
import io
import math
import re
from typing import Mapping

from launch_ops.domain.tasks import CSVParseIssue, TaskParseResult, UpcomingTask
from launch_ops.pipelines.normalizers import parse_date_to_iso

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TRUE_VALUES = {"true", "y", "yes"}
DEPENDENCY_DELIMITER = "|"


class TaskCSVParseError(ValueError):
    """
    Raised when the task CSV is structurally broken.
    """

    def __init__(self, issues: list[CSVParseIssue]) -> None:
        super().__init__(f"Task CSV has {len(issues)} structural issue(s).")
        self.issues = tuple(issues)

    def to_list(self) -> list[dict[str, object]]:
        return [
            {"row": issue.row_number, "code": issue.code, "message": issue.message}
            for issue in self.issues
        ]


def parse_bool(value: str | None) -> bool:
    if not value:
        return False
    return value.strip().lower() in _TRUE_VALUES


def parse_due_in_days(value: str | None) -> int | None:
    """
    Leading integer of a non-blank cell (``"12 days"`` is 12); otherwise ``None``.

    ``None`` means the due date is not known yet, which is not the same as 0.
    """

    if not value or not value.strip():
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def parse_dependencies(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    parts = (part.strip() for part in value.split(DEPENDENCY_DELIMITER))
    return tuple(part for part in parts if part)


def _text(row: Mapping[str, str], column: str, default: str = "") -> str:
    value = row.get(column)
    if value is None:
        return default
    return value.strip()


def task_from_row(row: Mapping[str, str]) -> UpcomingTask:
    due_date_raw = row.get("DueDate")
    return UpcomingTask(
        id=_text(row, "ID"),
        workstream=_text(row, "Workstream", "General"),
        task=_text(row, "Task"),
        mandatory_category=_text(row, "MandatoryCategory"),
        urgency=_text(row, "Urgency"),
        critical_path=parse_bool(row.get("CriticalPath")),
        owner=_text(row, "Owner"),
        dependencies=parse_dependencies(row.get("Dependencies")),
        due_date=parse_date_to_iso(due_date_raw) if due_date_raw and due_date_raw.strip() else None,
        due_in_days=parse_due_in_days(row.get("DueInDays")),
        status=_text(row, "Status", "Not Started"),
        pressing=parse_bool(row.get("Pressing")),
    )


def task_sort_key(task: UpcomingTask) -> tuple[float, str]:
    """
    Soonest first; unknown due-in-days last; ties by due date string.
    """

    days = task.due_in_days if task.due_in_days is not None else math.inf
    return (days, task.due_date or "")


def parse_task_csv(text: str) -> TaskParseResult:
    """
    Parse CSV text into sorted tasks plus any structural issues found.
    """

    reader = csv.reader(io.StringIO(text.lstrip("\ufeff"), newline=""), strict=True)
    header: list[str] | None = None
    tasks: list[UpcomingTask] = []
    issues: list[CSVParseIssue] = []

    try:
        for fields in reader:
            if not fields:
                continue
            if header is None:
                header = fields
                continue
            if len(fields) != len(header):
                code = "TooManyFields" if len(fields) > len(header) else "TooFewFields"
                issues.append(
                    CSVParseIssue(
                        row_number=reader.line_num,
                        code=code,
                        message=f"Expected {len(header)} fields but parsed {len(fields)}.",
                    )
                )
            task = task_from_row(dict(zip(header, fields)))
            if task.id and task.task:
                tasks.append(task)
    except csv.Error as exc:
        issues.append(CSVParseIssue(row_number=reader.line_num, code="MalformedCSV", message=str(exc)))

    tasks.sort(key=task_sort_key)
    return TaskParseResult(tasks=tasks, issues=issues)


def build_upcoming_tasks(text: str) -> list[UpcomingTask]:
    """
    Parse the task CSV, raising :class:`TaskCSVParseError` on structural issues.
    """

    result = parse_task_csv(text)
    if result.issues:
        raise TaskCSVParseError(result.issues)
    return result.tasks
