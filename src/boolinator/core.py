# SPDX-License-Identifier: MIT
# Copyright (c) 2025 The boolinator authors
"""Combinators lifting a ``bool`` into :mod:`~boolinator.option` and :mod:`~boolinator.result` values.

Each operation exists both as a free function taking the flag first and as a
method on the :class:`Boolinator` wrapper::

    as_some(True, "body")            # Some(value='body')
    Boolinator(False).as_some("body")  # NOTHING

Deferred (``*_from``) variants invoke their callables at most once, and only
on the branch whose payload is returned.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, final

from pydantic import TypeAdapter, ValidationError

from .option import NOTHING, Option, Some
from .panic import panic
from .result import Err, Ok, Result

_FLAG_LITERAL: Final[TypeAdapter[bool]] = TypeAdapter(bool)


def _require_bool(flag: object) -> bool:
    """Return ``flag`` unchanged or raise ``TypeError`` for non-bool input."""

    if not isinstance(flag, bool):
        raise TypeError(f"expected a bool flag, got {type(flag).__name__}")
    return flag


def as_option(flag: bool) -> Option[tuple[()]]:
    """Return ``Some(())`` when ``flag`` is true, ``NOTHING`` otherwise."""

    return Some(()) if _require_bool(flag) else NOTHING


def as_some[T](flag: bool, value: T) -> Option[T]:
    """Return ``Some(value)`` when ``flag`` is true, ``NOTHING`` otherwise."""

    return Some(value) if _require_bool(flag) else NOTHING


def as_some_from[T](flag: bool, func: Callable[[], T]) -> Option[T]:
    """Return ``Some(func())`` when ``flag`` is true, ``NOTHING`` otherwise.

    ``func`` is not called when ``flag`` is false.
    """

    return Some(func()) if _require_bool(flag) else NOTHING


def and_option[T](flag: bool, option: Option[T]) -> Option[T]:
    """Return ``option`` unchanged when ``flag`` is true, ``NOTHING`` otherwise."""

    return option if _require_bool(flag) else NOTHING


def and_option_from[T](flag: bool, func: Callable[[], Option[T]]) -> Option[T]:
    """Return ``func()`` when ``flag`` is true, ``NOTHING`` otherwise.

    ``func`` is not called when ``flag`` is false.
    """

    return func() if _require_bool(flag) else NOTHING


def as_result[T, E](flag: bool, ok: T, err: E) -> Result[T, E]:
    """Return ``Ok(ok)`` when ``flag`` is true, ``Err(err)`` otherwise."""

    return Ok(ok) if _require_bool(flag) else Err(err)


def as_result_from[T, E](flag: bool, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
    """Return ``Ok(ok())`` when ``flag`` is true, ``Err(err())`` otherwise.

    Exactly one of the two callables is invoked.
    """

    return Ok(ok()) if _require_bool(flag) else Err(err())


def expect(flag: bool, message: str) -> None:
    """Abort the current unit with ``message`` when ``flag`` is false.

    Args:
        flag: Condition that must hold.
        message: Diagnostic surfaced verbatim on failure.

    Raises:
        BoolPanic: If ``flag`` is false.
    """

    if not _require_bool(flag):
        panic(message)


@final
@dataclass(frozen=True, slots=True)
class Boolinator:
    """Wrap a ``bool`` so the combinators read as method calls.

    Attributes:
        flag: Wrapped boolean value.
    """

    flag: bool

    def __post_init__(self) -> None:
        _require_bool(self.flag)

    @classmethod
    def from_literal(cls, text: str) -> Boolinator:
        """Build a wrapper from a literal such as ``"yes"`` or ``"off"``.

        Accepts pydantic's boolean spellings (``1/0``, ``true/false``, ``t/f``,
        ``yes/no``, ``y/n``, ``on/off``) in any case, ignoring surrounding whitespace.

        Args:
            text: Boolean literal.

        Returns:
            Boolinator: Wrapper around the parsed flag.

        Raises:
            ValueError: If ``text`` is not a boolean literal.
        """

        if not isinstance(text, str):
            raise TypeError(f"expected a str literal, got {type(text).__name__}")
        try:
            return cls(_FLAG_LITERAL.validate_python(text.strip()))
        except ValidationError as exc:
            raise ValueError(f"not a boolean literal: {text!r}") from exc

    def as_option(self) -> Option[tuple[()]]:
        return as_option(self.flag)

    def as_some[T](self, value: T) -> Option[T]:
        return as_some(self.flag, value)

    def as_some_from[T](self, func: Callable[[], T]) -> Option[T]:
        return as_some_from(self.flag, func)

    def and_option[T](self, option: Option[T]) -> Option[T]:
        return and_option(self.flag, option)

    def and_option_from[T](self, func: Callable[[], Option[T]]) -> Option[T]:
        return and_option_from(self.flag, func)

    def as_result[T, E](self, ok: T, err: E) -> Result[T, E]:
        return as_result(self.flag, ok, err)

    def as_result_from[T, E](self, ok: Callable[[], T], err: Callable[[], E]) -> Result[T, E]:
        return as_result_from(self.flag, ok, err)

    def expect(self, message: str) -> None:
        expect(self.flag, message)

    def __bool__(self) -> bool:
        return self.flag

    def __invert__(self) -> Boolinator:
        return Boolinator(not self.flag)


__all__ = [
    "Boolinator",
    "and_option",
    "and_option_from",
    "as_option",
    "as_result",
    "as_result_from",
    "as_some",
    "as_some_from",
    "expect",
]
