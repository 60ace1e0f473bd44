# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""User-facing rendering of panic diagnostics."""

from __future__ import annotations

import sys
from functools import cache

from rich.console import Console
from rich.text import Text

from .config import DEFAULT_REPORT_CONFIG, PanicReportConfig
from .panic import BoolPanic


@cache
def panic_console(color: bool, emoji: bool) -> Console:
    """Return the shared console used for panic lines with these settings.

    The console writes to whatever ``sys.stdout`` is at print time.
    """

    return Console(color_system="auto" if color else None, no_color=not color, emoji=emoji, soft_wrap=True)


def format_panic(exc: BoolPanic, config: PanicReportConfig = DEFAULT_REPORT_CONFIG) -> str:
    """Return the plain-text line describing ``exc``.

    The caller's message appears verbatim after the configured prefix.
    """

    glyph = "❌ " if config.use_emoji else ""
    return f"{glyph}{config.prefix}: {exc.message}"


def render_panic(
    exc: BoolPanic,
    config: PanicReportConfig = DEFAULT_REPORT_CONFIG,
    *,
    console: Console | None = None,
) -> None:
    """Print ``exc`` as an error line.

    Args:
        exc: Panic caught at a unit boundary.
        config: Presentation settings. ``use_color=None`` colours only on a terminal.
        console: Optional console replacing :func:`panic_console`.
    """

    color = sys.stdout.isatty() if config.use_color is None else config.use_color
    target = console or panic_console(color, config.use_emoji)
    text = Text(format_panic(exc, config))
    if color:
        text.stylize("bold red")
    target.print(text)


__all__ = ["format_panic", "panic_console", "render_panic"]
