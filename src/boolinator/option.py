# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Optional container holding zero or one payload value."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Final, NoReturn, final

from .panic import panic


@final
@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present optional value wrapping ``value``.

    ``Some(None)`` is a valid, non-empty option.
    """

    value: T

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped payload."""

        return self.value

    def expect(self, message: str) -> T:
        """Return the wrapped payload; ``message`` is only used when empty."""

        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_or_else(self, func: Callable[[], T]) -> T:
        return self.value

    def to_optional(self) -> T | None:
        """Return the payload as a plain ``T | None`` value."""

        return self.value

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self.value


@final
@dataclass(frozen=True, slots=True)
class Nothing:
    """Empty optional value. Use the :data:`NOTHING` singleton."""

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Abort the current unit because there is no payload."""

        panic("called `unwrap()` on an empty option")

    def expect(self, message: str) -> NoReturn:
        """Abort the current unit with ``message``."""

        panic(message)

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, func: Callable[[], T]) -> T:
        """Return ``func()``; the callable runs only on this empty branch."""

        return func()

    def to_optional(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[NoReturn]:
        return iter(())

    def __repr__(self) -> str:
        return "NOTHING"

    def __reduce__(self) -> str:
        # copy and pickle resolve to the module-level singleton
        return "NOTHING"


NOTHING: Final[Nothing] = Nothing()

type Option[T] = Some[T] | Nothing


def from_optional[T](value: T | None) -> Option[T]:
    """Lift a plain ``T | None`` value into an :data:`Option`.

    Args:
        value: Payload or ``None``.

    Returns:
        Option[T]: ``NOTHING`` for ``None``, otherwise ``Some(value)``.
    """

    return NOTHING if value is None else Some(value)


__all__ = ["NOTHING", "Nothing", "Option", "Some", "from_optional"]
