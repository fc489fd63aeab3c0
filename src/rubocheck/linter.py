# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""RuboCop invocation and JSON report parsing."""

from __future__ import annotations

import json
import logging
from typing import Final

from pydantic import BaseModel, Field, ValidationError

from .config import RunContext
from .errors import LinterOutputError
from .logging import CLILogger
from .models import Finding
from .process_utils import ensure_executable, run_shell_command

LOGGER = logging.getLogger(__name__)

RUBOCOP_BINARY: Final[str] = "rubocop"
RUBOCOP_FORMAT_FLAGS: Final[str] = "--format json"


class RubocopLocation(BaseModel):
    """Position block of a RuboCop offense."""

    start_line: int = Field(..., ge=1)


class RubocopOffense(BaseModel):
    """Single offense entry inside a RuboCop file record."""

    severity: str
    message: str
    location: RubocopLocation
    cop_name: str | None = None
    corrected: bool = False


class RubocopFile(BaseModel):
    """Per-file record of a RuboCop JSON report."""

    path: str
    offenses: list[RubocopOffense]


class RubocopReport(BaseModel):
    """Top-level RuboCop JSON report. Metadata and summary blocks are ignored."""

    files: list[RubocopFile]

    def findings(self) -> list[Finding]:
        """Flatten the report into findings in file then offense order."""
        return [
            Finding(
                path=entry.path,
                severity=offense.severity,
                message=offense.message,
                start_line=offense.location.start_line,
                end_line=offense.location.start_line,
                cop_name=offense.cop_name,
                corrected=offense.corrected,
            )
            for entry in self.files
            for offense in entry.offenses
        ]


def build_rubocop_command(context: RunContext) -> str:
    """Return the shell command line used to run RuboCop.

    The operator-supplied argument and file fragments are appended verbatim,
    without quoting or escaping; the CI operator controls both values. Any
    hardening of the command line belongs here.

    Args:
        context: Run context carrying ``rubocop_args`` and ``lint_files``.

    Returns:
        str: ``rubocop --format json <args> <files>``.
    """

    return f"{RUBOCOP_BINARY} {RUBOCOP_FORMAT_FLAGS} {context.rubocop_args} {context.lint_files}"


def parse_rubocop_output(stdout: str) -> list[Finding]:
    """Decode RuboCop JSON ``stdout`` into findings.

    Args:
        stdout: Captured standard output of the linter.

    Returns:
        list[Finding]: Findings in report order.

    Raises:
        LinterOutputError: When ``stdout`` is not JSON or lacks the report shape.
    """

    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise LinterOutputError(f"RuboCop output is not valid JSON: {exc}") from exc
    try:
        report = RubocopReport.model_validate(payload)
    except ValidationError as exc:
        raise LinterOutputError(f"RuboCop output has an unexpected shape: {exc}") from exc
    return report.findings()


def run_rubocop(context: RunContext, *, logger: CLILogger | None = None) -> list[Finding]:
    """Run RuboCop inside the workspace and return its findings.

    Args:
        context: Run context describing the workspace and linter arguments.
        logger: Optional CLI logger announcing the command line.

    Returns:
        list[Finding]: Parsed findings.

    Raises:
        LinterNotFoundError: When ``rubocop`` is not on ``PATH``.
        LinterOutputError: When the linter output cannot be parsed.
    """

    ensure_executable(RUBOCOP_BINARY)
    command = build_rubocop_command(context)
    if logger is not None:
        logger.info(f"Running rubocop: {command}")
    LOGGER.debug("running command=%s cwd=%s", command, context.workspace)
    completed = run_shell_command(command, cwd=context.workspace)
    LOGGER.debug("rubocop exited returncode=%s", completed.returncode)
    return parse_rubocop_output(completed.stdout or "")


__all__ = [
    "RUBOCOP_BINARY",
    "RubocopFile",
    "RubocopLocation",
    "RubocopOffense",
    "RubocopReport",
    "build_rubocop_command",
    "parse_rubocop_output",
    "run_rubocop",
]
