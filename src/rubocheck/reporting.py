# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console reporting of run results."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .console import get_report_console
from .errors import ExitCode
from .models import RunResult


def report_result(result: RunResult, *, console: Console | None = None) -> ExitCode:
    """Print offenses for a failed run and return the matching exit code.

    Successful runs print nothing. Failed runs print the summary followed by
    one ``path:Lstart-Lend:message`` line per annotation, in report order,
    including warning-level annotations.

    Args:
        result: Mapped result of the run.
        console: Destination console; defaults to a plain shared console.

    Returns:
        ExitCode: ``OFFENSES`` for a failed run, otherwise ``SUCCESS``.
    """

    if not result.failed:
        return ExitCode.SUCCESS

    target = console or get_report_console()
    _print_plain(target, result.summary)
    for annotation in result.annotations:
        _print_plain(target, annotation.render_line())
    return ExitCode.OFFENSES


def _print_plain(console: Console, line: str) -> None:
    console.print(Text(line), soft_wrap=True, highlight=False, markup=False)


__all__ = ["report_result"]
