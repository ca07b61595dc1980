"""
launch_ops/domain/tasks.py

Domain models for the launch task checklist.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UpcomingTask:
    """
    One checklist item with derived urgency fields.
    """

    id: str
    workstream: str
    task: str
    mandatory_category: str
    urgency: str
    critical_path: bool
    owner: str
    dependencies: tuple[str, ...]
    due_date: str | None
    due_in_days: int | None
    status: str
    pressing: bool


@dataclass(frozen=True)
class CSVParseIssue:
    """
    One structural problem found while parsing the task CSV.
    """

    row_number: int
    code: str
    message: str


@dataclass(frozen=True)
class TaskParseResult:
    tasks: list[UpcomingTask]
    issues: list[CSVParseIssue] = field(default_factory=list)
