# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Configuration for rendering panics caught at a unit boundary."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field


class PanicReportConfig(BaseModel):
    """Control how :func:`boolinator.boundary.panic_boundary` reports a panic."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    report: bool = True
    use_color: bool | None = None
    use_emoji: bool = True
    prefix: str = Field(default="panicked", min_length=1)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> PanicReportConfig:
        """Build a config from loosely typed settings.

        Boolean fields accept pydantic's literal spellings such as ``"yes"`` or
        ``"off"``; any other string is rejected.

        Args:
            data: Raw settings keyed by field name.

        Returns:
            PanicReportConfig: Validated configuration.

        Raises:
            pydantic.ValidationError: If a key is unknown or a value is invalid.
        """

        return cls.model_validate(dict(data))


DEFAULT_REPORT_CONFIG: Final[PanicReportConfig] = PanicReportConfig()


__all__ = ["DEFAULT_REPORT_CONFIG", "PanicReportConfig"]
