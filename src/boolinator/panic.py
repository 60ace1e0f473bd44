# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Fatal termination signal raised when a flag assertion fails."""

from __future__ import annotations

import logging
from typing import NoReturn

LOGGER = logging.getLogger(__name__)


class BoolPanic(BaseException):
    """Abort the current execution unit with a diagnostic message.

    Derives from :class:`BaseException` so ``except Exception`` handlers in the
    caller do not intercept it. Only an explicit unit boundary such as
    :func:`boolinator.boundary.catch_panic` stops it.
    """

    def __init__(self, message: str) -> None:
        """Store ``message`` verbatim as the surfaced diagnostic.

        Args:
            message: Caller supplied diagnostic text, possibly empty.
        """

        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def panic(message: str) -> NoReturn:
    """Raise :class:`BoolPanic` carrying ``message``.

    Args:
        message: Diagnostic text surfaced to the unit boundary.

    Raises:
        BoolPanic: Always.
    """

    LOGGER.debug("panicking: %s", message)
    raise BoolPanic(message)


__all__ = ["BoolPanic", "panic"]
