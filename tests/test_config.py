# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Tests for panic report configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from boolinator.config import DEFAULT_REPORT_CONFIG, PanicReportConfig


def test_defaults() -> None:
    assert DEFAULT_REPORT_CONFIG.report is True
    assert DEFAULT_REPORT_CONFIG.use_color is None
    assert DEFAULT_REPORT_CONFIG.use_emoji is True
    assert DEFAULT_REPORT_CONFIG.prefix == "panicked"


def test_from_mapping_coerces_literals() -> None:
    config = PanicReportConfig.from_mapping({"report": "no", "use_color": "on", "use_emoji": "0", "prefix": "abort"})
    assert config.report is False
    assert config.use_color is True
    assert config.use_emoji is False
    assert config.prefix == "abort"


def test_from_mapping_keeps_unset_colour() -> None:
    assert PanicReportConfig.from_mapping({"use_color": None}).use_color is None


def test_from_mapping_rejects_unknown_bool_text() -> None:
    with pytest.raises(ValidationError, match="report"):
        PanicReportConfig.from_mapping({"report": "maybe"})
    with pytest.raises(ValidationError, match="use_emoji"):
        PanicReportConfig.from_mapping({"use_emoji": "flase"})


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValidationError, match="colour"):
        PanicReportConfig.from_mapping({"colour": True})


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_REPORT_CONFIG.report = False  # type: ignore[misc]


def test_prefix_must_not_be_empty() -> None:
    with pytest.raises(ValidationError):
        PanicReportConfig(prefix="")
