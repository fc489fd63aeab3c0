# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line entry point wiring intake, the pipeline and reporting."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from .checks import CheckRunPublisher
from .config import load_run_context
from .errors import RubocheckError
from .logging import CLILogger, build_cli_logger
from .reporting import report_result
from .runner import run_pipeline

PUBLISH_OPTION = Annotated[
    bool,
    typer.Option(
        "--publish/--no-publish",
        envvar="RUBOCHECK_PUBLISH",
        help="Create and complete a GitHub check run carrying the annotations.",
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]
DEBUG_OPTION = Annotated[
    bool,
    typer.Option("--debug", help="Emit debug diagnostics to stderr."),
]

app = typer.Typer(
    help="Run RuboCop and report its offenses to GitHub checks.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _configure_logging(logger: CLILogger) -> None:
    """Route module loggers to the CLI console when debug output is enabled."""

    if not logger.debug_enabled:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=logger.console, show_path=False)],
        force=True,
    )


@app.command()
def run(
    publish: PUBLISH_OPTION = False,
    emoji: EMOJI_OPTION = True,
    debug: DEBUG_OPTION = False,
) -> None:
    """Lint the workspace and exit non-zero when blocking offenses exist."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    _configure_logging(logger)
    try:
        context = load_run_context()
        publisher = CheckRunPublisher(context) if publish else None
        result = run_pipeline(context, publisher=publisher, logger=logger)
    except RubocheckError as exc:
        logger.fail(exc.message)
        raise typer.Exit(code=int(exc.exit_code)) from exc

    logger.debug(f"conclusion={result.conclusion.value} offenses={result.offense_count}")
    raise typer.Exit(code=int(report_result(result)))


def main() -> None:
    """Entry point for the ``rubocheck`` console script."""

    app()


__all__ = ["app", "main"]
