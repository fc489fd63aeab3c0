# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from .errors import UnhandledSeverityError


class Severity(str, Enum):
    """RuboCop offense severities."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class AnnotationLevel(str, Enum):
    """Annotation levels understood by the check-run API."""

    WARNING = "warning"
    FAILURE = "failure"


class Conclusion(str, Enum):
    """Overall verdict for a run."""

    SUCCESS = "success"
    FAILURE = "failure"


SEVERITY_LEVELS: Final[Mapping[str, AnnotationLevel]] = MappingProxyType(
    {
        Severity.REFACTOR.value: AnnotationLevel.FAILURE,
        Severity.CONVENTION.value: AnnotationLevel.FAILURE,
        Severity.WARNING.value: AnnotationLevel.WARNING,
        Severity.ERROR.value: AnnotationLevel.FAILURE,
        Severity.FATAL.value: AnnotationLevel.FAILURE,
    },
)


def annotation_level_for(severity: str | Severity) -> AnnotationLevel:
    """Map a RuboCop severity label to its annotation level.

    Args:
        severity: Severity label as emitted by the linter.

    Returns:
        AnnotationLevel: Level taken from :data:`SEVERITY_LEVELS`.

    Raises:
        UnhandledSeverityError: When ``severity`` is absent from the table.
    """

    label = severity.value if isinstance(severity, Severity) else severity
    try:
        return SEVERITY_LEVELS[label]
    except KeyError as exc:
        raise UnhandledSeverityError(label) from exc


__all__ = [
    "SEVERITY_LEVELS",
    "AnnotationLevel",
    "Conclusion",
    "Severity",
    "annotation_level_for",
]
