# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Subprocess helpers for running the linter inside the workspace."""

from __future__ import annotations

import os
import shutil

# Bandit: subprocess usage is intentional; the linter is an external collaborator.
import subprocess  # nosec B404
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import LinterError, LinterNotFoundError

if TYPE_CHECKING:
    from subprocess import CompletedProcess as _CompletedProcess  # nosec B404


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Change the process working directory to ``path`` for the block.

    The previous directory is restored on exit, including when the block raises.

    Args:
        path: Directory to enter.

    Yields:
        Path: The directory that was entered.
    """

    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


def ensure_executable(name: str) -> str:
    """Return the resolved path of ``name`` or raise when it is not on ``PATH``."""

    resolved = shutil.which(name)
    if resolved is None:
        msg = f"Executable '{name}' was not found on PATH"
        raise LinterNotFoundError(msg)
    return resolved


def run_shell_command(command: str, *, cwd: Path) -> _CompletedProcess[str]:
    """Run ``command`` through the shell from ``cwd`` and capture stdout.

    Stderr is left attached to the parent process so linter diagnostics stay
    visible in the CI log. The exit status is returned untouched and no
    timeout applies.

    Args:
        command: Complete shell command line.
        cwd: Directory to run the command from.

    Returns:
        CompletedProcess[str]: Completed process with ``stdout`` populated.

    Raises:
        LinterError: When ``cwd`` cannot be entered or the shell cannot start.
    """

    try:
        with working_directory(cwd):
            # Bandit: the command line is assembled from operator-controlled CI inputs.
            return subprocess.run(  # nosec B602
                command,
                shell=True,
                check=False,
                stdout=subprocess.PIPE,
                text=True,
            )
    except OSError as exc:
        raise LinterError(f"Unable to run '{command}' in {cwd}: {exc}") from exc


__all__ = ["ensure_executable", "run_shell_command", "working_directory"]
