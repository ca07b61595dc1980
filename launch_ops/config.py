"""
launch_ops/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

DEFAULT_FINANCE_SHEET_XLSX_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "1kxuhSGNjXuYehIA0wQeYlgynwL9Pa2wx8DT5jKIsKHU/export?format=xlsx"
)
DEFAULT_UPCOMING_SHEET_EXPORT_URL = (
    "https://docs.google.com/spreadsheets/d/"
    "1Fn7dh3kwvgDaMww7WunkxaOcRiW_qpos/export?format=csv"
)

_HTTP_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    project_root = Path(__file__).resolve().parents[1]
    for filename in (".env", ".env.local"):
        env_path = project_root / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    """
    Read a float from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_url_env(name: str, default: str) -> str:
    """
    Read an http(s) URL from environment variables.

    Blank values and values that are not absolute http(s) URLs fall back
    to ``default``.
    """

    _load_env_once()
    value = (os.getenv(name) or "").strip()
    if value and _HTTP_URL_PATTERN.match(value):
        return value
    return default


@dataclass(frozen=True)
class SourceHTTPSettings:
    """
    Shared HTTP behavior settings for source document connectors.
    """

    timeout_seconds: float = 15.0
    max_retries: int = 0
    backoff_initial_seconds: float = 0.5
    backoff_multiplier: float = 2.0


@dataclass(frozen=True)
class FinanceSourceSettings:
    """
    Location of the finance workbook export.
    """

    xlsx_url: str = DEFAULT_FINANCE_SHEET_XLSX_URL


@dataclass(frozen=True)
class UpcomingSourceSettings:
    """
    Location of the task checklist CSV export.
    """

    csv_url: str = DEFAULT_UPCOMING_SHEET_EXPORT_URL


@dataclass(frozen=True)
class ResponseCacheSettings:
    """
    Revalidation window advertised to the hosting platform's edge cache.
    """

    revalidate_seconds: int = 600

    @property
    def cache_control(self) -> str:
        return f"public, s-maxage={self.revalidate_seconds}, stale-while-revalidate"


@lru_cache(maxsize=1)
def get_source_http_settings() -> SourceHTTPSettings:
    """
    Return shared connector HTTP settings from environment variables.
    """

    return SourceHTTPSettings(
        timeout_seconds=max(1.0, _get_float_env("SOURCE_HTTP_TIMEOUT_SECONDS", 15.0)),
        max_retries=max(0, _get_int_env("SOURCE_HTTP_MAX_RETRIES", 0)),
        backoff_initial_seconds=max(0.1, _get_float_env("SOURCE_HTTP_BACKOFF_INITIAL_SECONDS", 0.5)),
        backoff_multiplier=max(1.0, _get_float_env("SOURCE_HTTP_BACKOFF_MULTIPLIER", 2.0)),
    )


@lru_cache(maxsize=1)
def get_finance_source_settings() -> FinanceSourceSettings:
    return FinanceSourceSettings(
        xlsx_url=_get_url_env("FINANCE_SHEET_XLSX_URL", DEFAULT_FINANCE_SHEET_XLSX_URL),
    )


@lru_cache(maxsize=1)
def get_upcoming_source_settings() -> UpcomingSourceSettings:
    return UpcomingSourceSettings(
        csv_url=_get_url_env("UPCOMING_SHEET_EXPORT_URL", DEFAULT_UPCOMING_SHEET_EXPORT_URL),
    )


@lru_cache(maxsize=1)
def get_response_cache_settings() -> ResponseCacheSettings:
    """
    Return the edge-cache revalidation window from environment variables.
    """

    return ResponseCacheSettings(
        revalidate_seconds=max(0, _get_int_env("SOURCE_REVALIDATE_SECONDS", 600)),
    )
