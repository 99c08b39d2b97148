"""Shared synchronous JSON-over-HTTP client for the external lookup services."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import httpx

from .config import Settings
from .redaction import sanitize_text


class JsonApiClient:
    """One ``httpx.Client`` per service, with failures mapped to ``error_cls``.

    Requests are attempted exactly once. Transport failures, HTTP status
    errors and undecodable bodies all surface as ``error_cls`` so callers can
    apply their own fallback.
    """

    service_name: ClassVar[str] = "HTTP"
    error_cls: ClassVar[type[Exception]] = Exception

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        self.settings = settings
        self.logger = logger
        self._client = httpx.Client(
            timeout=settings.http_timeout_seconds,
            headers={
                "Accept": "application/json",
                "User-Agent": settings.http_user_agent,
            },
        )

    def __enter__(self) -> JsonApiClient:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request_json(
        self,
        url: str,
        *,
        context: str,
        params: dict[str, str] | None = None,
    ) -> Any:
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._status_error(exc, url=url, context=context) from exc
        except httpx.HTTPError as exc:
            raise self.error_cls(
                f"{self.service_name} {context} request failed at {sanitize_text(url)}: "
                f"{sanitize_text(str(exc))}"
            ) from exc

        try:
            return response.json()
        except ValueError as exc:
            raise self.error_cls(
                f"{self.service_name} {context} returned non-JSON response "
                f"at {sanitize_text(url)}."
            ) from exc

    def _status_error(
        self, exc: httpx.HTTPStatusError, *, url: str, context: str
    ) -> Exception:
        status = exc.response.status_code
        return self.error_cls(
            f"{self.service_name} {context} failed with status {status} "
            f"at {sanitize_text(url)}: {sanitize_text(exc.response.text[:300])}"
        )
