# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console shared by the offense report."""

from __future__ import annotations

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=1)
def get_report_console() -> Console:
    """Return the stdout console used for report lines.

    The console never colours, highlights, wraps or renders emoji, so CI log
    parsers see each line exactly as formatted.
    """

    return Console(color_system=None, emoji=False, highlight=False, soft_wrap=True)


__all__ = ["get_report_console"]
