# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Carry application errors across module boundaries as values."""

from __future__ import annotations

import functools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, ParamSpec, TypeVar

from .base import ApplicationError
from .record import ErrorKind, ErrorRecord

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    error: ApplicationError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def record(self) -> ErrorRecord:
        return self.error.to_record()

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Success[T] | Failure


def capture(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Success[T] | Failure:
    """Call ``func`` and turn a raised :class:`ApplicationError` into a ``Failure``.

    Any other exception propagates unchanged.
    """

    try:
        return Success(func(*args, **kwargs))
    except ApplicationError as exc:
        return Failure(exc)


def guarded(func: Callable[P, T]) -> Callable[P, Success[T] | Failure]:
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Success[T] | Failure:
        return capture(func, *args, **kwargs)

    return wrapper


__all__ = ["Failure", "Result", "Success", "capture", "guarded"]
