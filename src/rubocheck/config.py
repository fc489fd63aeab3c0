# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run configuration assembled from the CI environment and event file."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, SecretStr

from .annotations import DEFAULT_CHECK_NAME
from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

SHA_ENV: Final[str] = "GITHUB_SHA"
EVENT_PATH_ENV: Final[str] = "GITHUB_EVENT_PATH"
TOKEN_ENV: Final[str] = "GITHUB_TOKEN"
WORKSPACE_ENV: Final[str] = "GITHUB_WORKSPACE"
RUBOCOP_ARGS_ENV: Final[str] = "RUBOCOP_ARGS"
LINT_FILES_ENV: Final[str] = "RUBOCOP_LINT_FILES"

# Values that must be present and non-blank.
_REQUIRED_VALUES: Final[tuple[str, ...]] = (SHA_ENV, EVENT_PATH_ENV, TOKEN_ENV, WORKSPACE_ENV)
# Values that must be present but may be empty strings.
_REQUIRED_FRAGMENTS: Final[tuple[str, ...]] = (RUBOCOP_ARGS_ENV, LINT_FILES_ENV)


class RunContext(BaseModel):
    """Immutable values identifying the commit, repository and linter call."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str
    sha: str
    token: SecretStr
    workspace: Path
    rubocop_args: str = ""
    lint_files: str = ""
    check_name: str = DEFAULT_CHECK_NAME


def load_run_context(env: Mapping[str, str] | None = None) -> RunContext:
    """Build a :class:`RunContext` from ``env`` and the GitHub event file.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.

    Returns:
        RunContext: Fully populated context for the run.

    Raises:
        ConfigError: When a variable is missing, the workspace is not a
            directory, or the event file is missing, unreadable, not JSON, or
            lacks the repository owner and name.
    """

    environment = os.environ if env is None else env
    missing = [name for name in _REQUIRED_VALUES if not (environment.get(name) or "").strip()]
    missing.extend(name for name in _REQUIRED_FRAGMENTS if environment.get(name) is None)
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    workspace = Path(environment[WORKSPACE_ENV])
    if not workspace.is_dir():
        raise ConfigError(f"{WORKSPACE_ENV} is not a directory: {workspace}")

    event = load_event(Path(environment[EVENT_PATH_ENV]))
    owner = _lookup_str(event, ("repository", "owner", "login"))
    repo = _lookup_str(event, ("repository", "name"))
    LOGGER.debug("resolved repository owner=%s repo=%s", owner, repo)

    return RunContext(
        owner=owner,
        repo=repo,
        sha=environment[SHA_ENV].strip(),
        token=SecretStr(environment[TOKEN_ENV].strip()),
        workspace=workspace,
        rubocop_args=environment[RUBOCOP_ARGS_ENV],
        lint_files=environment[LINT_FILES_ENV],
    )


def load_event(path: Path) -> Mapping[str, Any]:
    """Read and decode the event-description JSON file at ``path``."""

    if not path.is_file():
        raise ConfigError(f"Event file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read event file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Event file {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Event file {path} must contain a JSON object")
    return payload


def _lookup_str(payload: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    current: Any = payload
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            raise ConfigError(f"Event file is missing '{'.'.join(keys)}'")
        current = current[key]
    if not isinstance(current, str) or not current:
        raise ConfigError(f"Event file value '{'.'.join(keys)}' must be a non-empty string")
    return current


__all__ = [
    "EVENT_PATH_ENV",
    "LINT_FILES_ENV",
    "RUBOCOP_ARGS_ENV",
    "SHA_ENV",
    "TOKEN_ENV",
    "WORKSPACE_ENV",
    "ConfigError",
    "RunContext",
    "load_event",
    "load_run_context",
]
