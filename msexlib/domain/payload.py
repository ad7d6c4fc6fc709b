# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Structured error details attached to every application error."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Any, Protocol, runtime_checkable

_FIXED_FIELDS = frozenset({"description", "error_code"})


class ErrorCode(Protocol):
    @property
    def code(self) -> str: ...

    @property
    def description(self) -> str: ...


class ErrorPayload(Protocol):
    """Contract for payloads owned by callers or by other services."""

    native_error_text: str | None

    @property
    def description(self) -> str: ...

    @property
    def error_code(self) -> ErrorCode: ...


@runtime_checkable
class Freezable(Protocol):
    def freeze(self) -> None: ...


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


@dataclass(slots=True, frozen=True)
class ApplicationErrorCode:
    code: str
    description: str

    def __str__(self) -> str:
        return self.code


@dataclass(slots=True)
class ApplicationErrorPayload:
    """Payload built in two stages: populate, then freeze.

    ``description`` and ``error_code`` never change after ``__init__``.
    ``native_error_text`` stays writable until :meth:`freeze` is called,
    which :class:`~msexlib.shared.errors.ApplicationError` does once its
    root-cause backfill has run.
    """

    error_code: ApplicationErrorCode
    description: str
    native_error_text: str | None = None
    _frozen: bool = field(default=False, init=False, repr=False, compare=False)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        if name in _FIXED_FIELDS and hasattr(self, name):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        object.__setattr__(self, name, value)

    @classmethod
    def of(
        cls,
        code: str,
        description: str,
        *,
        native_error_text: str | None = None,
    ) -> ApplicationErrorPayload:
        return cls(
            error_code=ApplicationErrorCode(code=code, description=description),
            description=description,
            native_error_text=native_error_text,
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def fill_native_error_text(self, text: str) -> bool:
        """Set the native text unless one is already present."""

        if self._frozen:
            raise FrozenInstanceError("cannot assign to field 'native_error_text'")
        if not is_blank(self.native_error_text):
            return False
        self.native_error_text = text
        return True

    def freeze(self) -> None:
        object.__setattr__(self, "_frozen", True)

    def __getstate__(self) -> tuple[Any, ...]:
        return (self.error_code, self.description, self.native_error_text, self._frozen)

    def __setstate__(self, state: tuple[Any, ...]) -> None:
        for name, value in zip(
            ("error_code", "description", "native_error_text", "_frozen"), state, strict=True
        ):
            object.__setattr__(self, name, value)


__all__ = [
    "ApplicationErrorCode",
    "ApplicationErrorPayload",
    "ErrorCode",
    "ErrorPayload",
    "Freezable",
    "is_blank",
]
