# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""GitHub check-run publishing."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Final

import requests

from .config import RunContext
from .errors import CheckRunError
from .models import CheckOutput
from .severity import Conclusion

LOGGER = logging.getLogger(__name__)

API_BASE_URL: Final[str] = "https://api.github.com"
PREVIEW_ACCEPT: Final[str] = "application/vnd.github.antiope-preview+json"
USER_AGENT: Final[str] = "github-actions-rubocop"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time in UTC."""

    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """Return ``moment`` as an ISO-8601 string with second precision."""

    return moment.isoformat(timespec="seconds")


def build_headers(context: RunContext) -> dict[str, str]:
    """Return the fixed header set sent with every check-run request."""

    return {
        "Content-Type": "application/json",
        "Accept": PREVIEW_ACCEPT,
        "Authorization": f"Bearer {context.token.get_secret_value()}",
        "User-Agent": USER_AGENT,
    }


class CheckRunPublisher:
    """Create and complete a single check run for the current commit.

    The publisher is not part of the default pipeline; callers opt in
    explicitly. Every non-success response, transport failure or unusable
    response body raises :class:`CheckRunError`.
    """

    def __init__(
        self,
        context: RunContext,
        *,
        session: requests.Session | None = None,
        clock: Clock = utc_now,
        base_url: str = API_BASE_URL,
    ) -> None:
        self.context = context
        self._session = session or requests.Session()
        self._clock = clock
        self._collection_url = f"{base_url.rstrip('/')}/repos/{context.owner}/{context.repo}/check-runs"

    def start(self) -> int:
        """Create an ``in_progress`` check run and return its identifier.

        Returns:
            int: Identifier taken from the response body's ``id`` field.

        Raises:
            CheckRunError: When the request fails, the API responds with status
                300 or above, or the body carries no usable ``id``.
        """

        body = {
            "name": self.context.check_name,
            "head_sha": self.context.sha,
            "status": "in_progress",
            "started_at": iso_timestamp(self._clock()),
        }
        response = self._send("POST", self._collection_url, body)
        try:
            check_id = int(response.json()["id"])
        except (ValueError, TypeError, KeyError) as exc:
            raise CheckRunError(response.status_code, f"Check-run response has no usable 'id': {exc}") from exc
        LOGGER.debug("created check run id=%s", check_id)
        return check_id

    def complete(self, check_id: int, conclusion: Conclusion, output: CheckOutput | None) -> None:
        """Mark check run ``check_id`` as completed.

        Args:
            check_id: Identifier returned by :meth:`start`.
            conclusion: Overall verdict for the run.
            output: Title, summary and annotations; ``None`` sends a null output.

        Raises:
            CheckRunError: When the request fails or the API responds with
                status 300 or above.
        """

        body: dict[str, Any] = {
            "name": self.context.check_name,
            "head_sha": self.context.sha,
            "status": "completed",
            "completed_at": iso_timestamp(self._clock()),
            "conclusion": conclusion.value,
            "output": output.to_payload() if output is not None else None,
        }
        self._send("PATCH", f"{self._collection_url}/{check_id}", body)
        LOGGER.debug("completed check run id=%s conclusion=%s", check_id, conclusion.value)

    def _send(self, method: str, url: str, body: dict[str, Any]) -> requests.Response:
        send = self._session.post if method == "POST" else self._session.patch
        try:
            response = send(url, json=body, headers=build_headers(self.context))
        except requests.RequestException as exc:
            raise CheckRunError(None, f"Check-run {method} {url} failed: {exc}") from exc
        if response.status_code >= 300:
            raise CheckRunError(response.status_code, response.reason or "")
        return response


__all__ = [
    "API_BASE_URL",
    "PREVIEW_ACCEPT",
    "USER_AGENT",
    "CheckRunPublisher",
    "build_headers",
    "iso_timestamp",
    "utc_now",
]
