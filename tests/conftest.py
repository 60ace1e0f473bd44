# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from io import StringIO

import pytest
from rich.console import Console


@dataclass(slots=True)
class CallCounter:
    """Zero-argument callable factory recording how often each product ran."""

    calls: list[str] = field(default_factory=list)

    def returning[T](self, label: str, value: T) -> Callable[[], T]:
        """Return a deferred computation that records ``label`` when invoked."""

        def _produce() -> T:
            self.calls.append(label)
            return value

        return _produce


@pytest.fixture
def counter() -> CallCounter:
    """Return a fresh call counter."""
    return CallCounter()


@pytest.fixture
def buffer_console() -> tuple[Console, StringIO]:
    """Return a plain Rich console writing into an in-memory buffer."""
    stream = StringIO()
    return Console(file=stream, color_system=None, force_terminal=False, width=200), stream
