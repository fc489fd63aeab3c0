# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support.

Log lines go to stderr so stdout carries only the offense report.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(console: Console, msg: str, *, style: str | None) -> None:
    """Render ``msg`` on ``console`` with ``style`` applied.

    Args:
        console: Destination console; it decides whether colour is emitted.
        msg: Message text to print.
        style: Rich style name applied to the whole line.
    """

    text = Text(msg)
    if style:
        text.stylize(style)
    console.print(text)


def info(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit an informational message."""

    _print_line(console, f"{emoji('ℹ️ ', use_emoji)}{msg}", style="cyan")


def fail(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit an error message."""

    _print_line(console, f"{emoji('❌ ', use_emoji)}{msg}", style="red")


@dataclass(slots=True)
class CLILogger:
    """Adapter around the logging helpers bound to one console."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        info(self.console, message, use_emoji=self.use_emoji)

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        fail(self.console, message, use_emoji=self.use_emoji)

    def debug(self, message: str) -> None:
        """Emit ``message`` prefixed with ``[debug]`` when debug output is enabled."""

        if self.debug_enabled:
            text = Text("[debug] ", style="bold cyan")
            text.append(message, style="dim")
            self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False, no_color: bool = False) -> CLILogger:
    """Return a :class:`CLILogger` bound to a dedicated stderr console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance for one CLI invocation.
    """

    console = Console(stderr=True, no_color=no_color, highlight=False, soft_wrap=True)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug)


__all__ = ["CLILogger", "build_cli_logger", "emoji", "fail", "info"]
