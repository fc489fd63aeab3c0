# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the rubocheck package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .severity import AnnotationLevel, Conclusion


class Finding(BaseModel):
    """Single offense reported by the linter for one file and line."""

    model_config = ConfigDict(frozen=True)

    path: str
    severity: str
    message: str
    start_line: int = Field(..., ge=1)
    end_line: int = Field(..., ge=1)
    cop_name: str | None = None
    corrected: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_end_line(cls, data: Any) -> Any:
        """Collapse the range to ``start_line`` when no end line is given."""
        if isinstance(data, dict) and data.get("end_line") is None:
            return {**data, "end_line": data.get("start_line")}
        return data


class Annotation(BaseModel):
    """Publishable form of a :class:`Finding`."""

    model_config = ConfigDict(frozen=True)

    path: str
    start_line: int
    end_line: int
    annotation_level: AnnotationLevel
    message: str

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready annotation body for the check-run API."""
        return self.model_dump(mode="json")

    def render_line(self) -> str:
        """Return the console form ``path:Lstart-Lend:message``."""
        return f"{self.path}:L{self.start_line}-L{self.end_line}:{self.message}"


class CheckOutput(BaseModel):
    """Title, summary and annotations attached to a completed check run."""

    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    annotations: tuple[Annotation, ...] = Field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready ``output`` object for the check-run API."""
        return {
            "title": self.title,
            "summary": self.summary,
            "annotations": [annotation.to_payload() for annotation in self.annotations],
        }


class RunResult(BaseModel):
    """Aggregate result of mapping every finding of a run."""

    model_config = ConfigDict(frozen=True)

    output: CheckOutput
    conclusion: Conclusion
    offense_count: int = Field(0, ge=0)

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        """Expose the annotations carried by :attr:`output`."""
        return self.output.annotations

    @property
    def summary(self) -> str:
        """Expose the summary line carried by :attr:`output`."""
        return self.output.summary

    def has_failures(self) -> bool:
        """Return ``True`` when the conclusion is ``failure``."""
        return self.conclusion is Conclusion.FAILURE

    @property
    def failed(self) -> bool:
        """Expose :meth:`has_failures` as an attribute-style accessor."""
        return self.has_failures()


__all__ = ["Annotation", "CheckOutput", "Finding", "RunResult"]
