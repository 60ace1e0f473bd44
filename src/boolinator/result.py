# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Result container holding either a success or a failure payload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NoReturn, final

from .option import NOTHING, Nothing, Some
from .panic import panic


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success state wrapping ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the success payload."""

        return self.value

    def unwrap_err(self) -> NoReturn:
        """Abort the current unit because this result is a success."""

        panic(f"called `unwrap_err()` on an `Ok` value: {self.value!r}")

    def expect(self, message: str) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def ok(self) -> Some[T]:
        """Return the success payload as a present option."""

        return Some(self.value)

    def err(self) -> Nothing:
        return NOTHING

    def __bool__(self) -> bool:
        return True


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failure state wrapping ``error``."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Abort the current unit because this result is a failure."""

        panic(f"called `unwrap()` on an `Err` value: {self.error!r}")

    def unwrap_err(self) -> E:
        """Return the failure payload."""

        return self.error

    def expect(self, message: str) -> NoReturn:
        """Abort the current unit with ``message``."""

        panic(message)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def ok(self) -> Nothing:
        return NOTHING

    def err(self) -> Some[E]:
        """Return the failure payload as a present option."""

        return Some(self.error)

    def __bool__(self) -> bool:
        return False


type Result[T, E] = Ok[T] | Err[E]


__all__ = ["Err", "Ok", "Result"]
