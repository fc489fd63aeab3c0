# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate linter findings into check-run annotations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .models import Annotation, CheckOutput, Finding, RunResult
from .severity import AnnotationLevel, Conclusion, annotation_level_for

DEFAULT_CHECK_NAME: Final[str] = "Rubocop"


def format_summary(count: int) -> str:
    """Return the summary line used for both the console and the check run."""

    return f"{count} offense(s) found"


def build_annotation(finding: Finding) -> Annotation:
    """Return the :class:`Annotation` describing ``finding``.

    Args:
        finding: Offense parsed from linter output.

    Returns:
        Annotation: Annotation whose range collapses to the finding's start line.

    Raises:
        UnhandledSeverityError: When the finding severity has no annotation level.
    """

    return Annotation(
        path=finding.path,
        start_line=finding.start_line,
        end_line=finding.start_line,
        annotation_level=annotation_level_for(finding.severity),
        message=finding.message,
    )


def build_run_result(findings: Iterable[Finding], *, check_name: str = DEFAULT_CHECK_NAME) -> RunResult:
    """Map ``findings`` to annotations and derive the overall conclusion.

    A single failure-level annotation fails the whole run; later warning-level
    annotations never revert it.

    Args:
        findings: Offenses in linter output order.
        check_name: Title attached to the check-run output.

    Returns:
        RunResult: Annotations, summary and conclusion for the run.
    """

    annotations: list[Annotation] = []
    conclusion = Conclusion.SUCCESS
    for finding in findings:
        annotation = build_annotation(finding)
        annotations.append(annotation)
        if annotation.annotation_level is AnnotationLevel.FAILURE:
            conclusion = Conclusion.FAILURE

    output = CheckOutput(
        title=check_name,
        summary=format_summary(len(annotations)),
        annotations=tuple(annotations),
    )
    return RunResult(output=output, conclusion=conclusion, offense_count=len(annotations))


__all__ = ["DEFAULT_CHECK_NAME", "build_annotation", "build_run_result", "format_summary"]
