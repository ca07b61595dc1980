"""
launch_ops/connectors/base.py

Base connector abstraction and shared HTTP mechanics.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from launch_ops.config import SourceHTTPSettings

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class SourceRequestError(RuntimeError):
    """
    Raised when a connector cannot fetch its source document.
    """


class BaseConnector:
    """
    Shared request handling for connectors that download one remote document.
    """

    source: str

    def __init__(
        self,
        *,
        source: str,
        http_settings: SourceHTTPSettings,
        session: requests.Session | None = None,
    ) -> None:
        self.source = source
        self._session = session or requests.Session()
        self._timeout_seconds = http_settings.timeout_seconds
        self._max_retries = http_settings.max_retries
        self._backoff_initial_seconds = http_settings.backoff_initial_seconds
        self._backoff_multiplier = http_settings.backoff_multiplier

    def _request_bytes(
        self,
        *,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> bytes:
        """
        Execute a GET request and return the raw response body.
        """

        return self._request(method="GET", url=url, params=params).content

    def _request_text(
        self,
        *,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> str:
        """
        Execute a GET request and return the response body decoded as UTF-8.
        """

        response = self._request(method="GET", url=url, params=params)
        return response.content.decode("utf-8-sig", errors="replace")

    def _request(
        self,
        *,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> requests.Response:
        """
        Execute an HTTP request, retrying transient failures when configured.
        """

        last_error: Exception | None = None
        for attempt in range(self._max_retries + 1):
            try:
                response = self._session.request(
                    method=method,
                    url=url,
                    params=params,
                    timeout=self._timeout_seconds,
                )
                if response.status_code in RETRYABLE_STATUS_CODES:
                    raise requests.HTTPError(
                        f"Retryable HTTP status code: {response.status_code}",
                        response=response,
                    )
                response.raise_for_status()
                return response
            except requests.HTTPError as exc:
                last_error = exc
                status_code = exc.response.status_code if exc.response is not None else None
                if status_code not in RETRYABLE_STATUS_CODES:
                    logger.error(
                        "Source request failed source=%s status=%s url=%s error=%s",
                        self.source,
                        status_code,
                        url,
                        exc,
                    )
                    raise SourceRequestError(f"{self.source}: non-retryable request failure.") from exc
            except (requests.Timeout, requests.ConnectionError) as exc:
                last_error = exc

            if attempt >= self._max_retries:
                break

            backoff_seconds = self._backoff_initial_seconds * (self._backoff_multiplier**attempt)
            logger.warning(
                "Source request retry source=%s attempt=%s/%s wait_seconds=%.2f url=%s",
                self.source,
                attempt + 1,
                self._max_retries,
                backoff_seconds,
                url,
            )
            time.sleep(backoff_seconds)

        logger.error(
            "Source request failed source=%s url=%s error=%s",
            self.source,
            url,
            last_error,
        )
        raise SourceRequestError(f"{self.source}: request failed.") from last_error
