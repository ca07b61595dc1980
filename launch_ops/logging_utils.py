"""
launch_ops/logging_utils.py

Structured logging for pipeline runs.

Every service call ends with one compact JSON line carrying the event name,
the source document it read, the elapsed time and the record counts it
produced.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

FINANCE_SNAPSHOT_BUILT = "finance_snapshot_built"
UPCOMING_TASKS_BUILT = "upcoming_tasks_built"
UPCOMING_TASKS_PARSE_FAILED = "upcoming_tasks_parse_failed"


def log_pipeline_event(
    logger: logging.Logger,
    event: str,
    *,
    source: str,
    started_at: float | None = None,
    level: int = logging.INFO,
    **counts: Any,
) -> None:
    """
    Emit one pipeline event as sorted JSON.

    ``started_at`` is a ``time.perf_counter()`` reading taken when the run
    began; when given, the line includes ``duration_ms``.
    """

    payload: dict[str, Any] = {"event": event, "source": source, **counts}
    if started_at is not None:
        payload["duration_ms"] = round((time.perf_counter() - started_at) * 1000, 1)
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))
