# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import SecretStr

from rubocheck.config import RunContext


@pytest.fixture
def event_file(tmp_path: Path) -> Path:
    """Write a minimal GitHub event payload and return its path."""
    path = tmp_path / "event.json"
    payload = {"repository": {"name": "widgets", "owner": {"login": "acme"}}}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return an empty workspace directory."""
    path = tmp_path / "workspace"
    path.mkdir()
    return path


@pytest.fixture
def github_env(event_file: Path, workspace: Path) -> dict[str, str]:
    """Return a complete environment mapping for intake."""
    return {
        "GITHUB_SHA": "deadbeef",
        "GITHUB_EVENT_PATH": str(event_file),
        "GITHUB_TOKEN": "s3cret",
        "GITHUB_WORKSPACE": str(workspace),
        "RUBOCOP_ARGS": "--parallel",
        "RUBOCOP_LINT_FILES": "app lib",
    }


@pytest.fixture
def run_context(workspace: Path) -> RunContext:
    """Return a run context for the ``acme/widgets`` repository."""
    return RunContext(
        owner="acme",
        repo="widgets",
        sha="deadbeef",
        token=SecretStr("s3cret"),
        workspace=workspace,
        rubocop_args="--parallel",
        lint_files="app lib",
    )


@pytest.fixture
def rubocop_report() -> Callable[..., str]:
    """Return a builder producing RuboCop JSON output from ``(path, [(severity, message, line)])`` pairs."""

    def _build(*files: tuple[str, list[tuple[str, str, int]]]) -> str:
        return json.dumps(
            {
                "metadata": {"rubocop_version": "1.60.0"},
                "files": [
                    {
                        "path": path,
                        "offenses": [
                            {
                                "severity": severity,
                                "message": message,
                                "cop_name": "Lint/Example",
                                "corrected": False,
                                "location": {"start_line": line, "start_column": 1, "last_line": line},
                            }
                            for severity, message, line in offenses
                        ],
                    }
                    for path, offenses in files
                ],
                "summary": {"offense_count": sum(len(offenses) for _, offenses in files)},
            },
        )

    return _build
