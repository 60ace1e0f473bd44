# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Execution-unit boundaries that stop a :class:`~boolinator.panic.BoolPanic`."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from rich.console import Console

from .config import DEFAULT_REPORT_CONFIG, PanicReportConfig
from .panic import BoolPanic
from .reporting import render_panic
from .result import Err, Ok, Result

LOGGER = logging.getLogger(__name__)


def catch_panic[**P, T](func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, BoolPanic]:
    """Run ``func`` as one execution unit.

    Only :class:`BoolPanic` is stopped here; any other exception propagates.

    Args:
        func: Unit of work to run.
        *args: Positional arguments forwarded to ``func``.
        **kwargs: Keyword arguments forwarded to ``func``.

    Returns:
        Result[T, BoolPanic]: ``Ok`` with the return value, or ``Err`` with the panic.
    """

    try:
        return Ok(func(*args, **kwargs))
    except BoolPanic as exc:
        return Err(exc)


@contextmanager
def panic_boundary(
    config: PanicReportConfig = DEFAULT_REPORT_CONFIG,
    *,
    console: Console | None = None,
) -> Iterator[None]:
    """Terminate only the enclosed block when it panics.

    The panic is logged, rendered when ``config.report`` is set, and then
    suppressed so execution resumes after the ``with`` statement.

    Args:
        config: Presentation settings for the rendered diagnostic.
        console: Optional console replacing the shared panic console.
    """

    try:
        yield
    except BoolPanic as exc:
        LOGGER.warning("unit terminated by panic: %s", exc.message)
        if config.report:
            render_panic(exc, config, console=console)


__all__ = ["catch_panic", "panic_boundary"]
