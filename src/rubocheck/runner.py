# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Linear pipeline: run the linter, map findings, optionally publish."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .annotations import build_run_result
from .checks import CheckRunPublisher
from .config import RunContext
from .errors import RubocheckError
from .linter import run_rubocop
from .logging import CLILogger
from .models import Finding, RunResult
from .severity import Conclusion

LOGGER = logging.getLogger(__name__)

LinterRunner = Callable[[RunContext], Sequence[Finding]]


def run_pipeline(
    context: RunContext,
    *,
    publisher: CheckRunPublisher | None = None,
    logger: CLILogger | None = None,
    linter: LinterRunner | None = None,
) -> RunResult:
    """Execute one lint run for ``context``.

    When ``publisher`` is given, an in-progress check run is created first and
    completed with the result afterwards. If the run aborts after the check run
    was created, it is completed as ``failure`` without output before the
    error propagates.

    Args:
        context: Immutable run context.
        publisher: Optional check-run publisher.
        logger: Optional CLI logger for progress output.
        linter: Callable producing findings; defaults to running RuboCop.

    Returns:
        RunResult: Mapped annotations and conclusion.
    """

    check_id = publisher.start() if publisher is not None else None
    if logger is not None and check_id is not None:
        logger.debug(f"check_run={check_id} status=in_progress")
    try:
        findings = linter(context) if linter is not None else run_rubocop(context, logger=logger)
        result = build_run_result(findings, check_name=context.check_name)
    except RubocheckError:
        if publisher is not None and check_id is not None:
            LOGGER.debug("closing check run id=%s after aborted run", check_id)
            publisher.complete(check_id, Conclusion.FAILURE, None)
        raise

    if publisher is not None and check_id is not None:
        publisher.complete(check_id, result.conclusion, result.output)
    return result


__all__ = ["LinterRunner", "run_pipeline"]
