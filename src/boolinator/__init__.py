# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Option and Result style combinators for ``bool`` values."""

from __future__ import annotations

from importlib import metadata

from .boundary import catch_panic, panic_boundary
from .config import PanicReportConfig
from .core import (
    Boolinator,
    and_option,
    and_option_from,
    as_option,
    as_result,
    as_result_from,
    as_some,
    as_some_from,
    expect,
)
from .option import NOTHING, Nothing, Option, Some, from_optional
from .panic import BoolPanic, panic
from .result import Err, Ok, Result

try:
    __version__ = metadata.version("boolinator")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "NOTHING",
    "BoolPanic",
    "Boolinator",
    "Err",
    "Nothing",
    "Ok",
    "Option",
    "PanicReportConfig",
    "Result",
    "Some",
    "__version__",
    "and_option",
    "and_option_from",
    "as_option",
    "as_result",
    "as_result_from",
    "as_some",
    "as_some_from",
    "catch_panic",
    "expect",
    "from_optional",
    "panic",
    "panic_boundary",
]
