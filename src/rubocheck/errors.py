# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error hierarchy shared by the rubocheck pipeline."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses reported to the calling CI shell."""

    SUCCESS = 0
    OFFENSES = 1
    CONFIG_ERROR = 2
    LINTER_ERROR = 3
    SEVERITY_ERROR = 4
    PUBLISH_ERROR = 5


class RubocheckError(RuntimeError):
    """Base error raised when the pipeline must abort with a status code."""

    exit_code: ExitCode = ExitCode.CONFIG_ERROR

    def __init__(self, message: str) -> None:
        """Initialise the error with a human-readable message.

        Args:
            message: Text shown to the user before the process exits.
        """

        super().__init__(message)
        self.message = message


class ConfigError(RubocheckError):
    """Raised when environment or event-file input is missing or invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class LinterError(RubocheckError):
    """Raised when the linter cannot be run or its output cannot be used."""

    exit_code = ExitCode.LINTER_ERROR


class LinterNotFoundError(LinterError):
    """Raised when the linter executable is not reachable on ``PATH``."""


class LinterOutputError(LinterError):
    """Raised when linter stdout is not JSON or lacks the expected shape."""


class UnhandledSeverityError(RubocheckError):
    """Raised when an offense severity has no annotation level."""

    exit_code = ExitCode.SEVERITY_ERROR

    def __init__(self, severity: str) -> None:
        super().__init__(f"Unhandled offense severity '{severity}'")
        self.severity = severity


class CheckRunError(RubocheckError):
    """Raised when the check-run API answers with a non-success status or cannot be reached."""

    exit_code = ExitCode.PUBLISH_ERROR

    def __init__(self, status_code: int | None, reason: str) -> None:
        """Record the HTTP status and reason phrase returned by the API.

        Args:
            status_code: HTTP status code of the failed response, or ``None``
                when no response was received.
            reason: Server-provided status message or transport failure text.
        """

        super().__init__(reason or f"HTTP {status_code}")
        self.status_code = status_code
        self.reason = reason


__all__ = [
    "CheckRunError",
    "ConfigError",
    "ExitCode",
    "LinterError",
    "LinterNotFoundError",
    "LinterOutputError",
    "RubocheckError",
    "UnhandledSeverityError",
]
