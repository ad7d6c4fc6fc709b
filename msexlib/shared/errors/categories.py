# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Semantic categories of :class:`ApplicationError`.

The subclasses add no fields and no validation. They exist so that a
boundary layer can tell failures apart, for example answering
``BusinessError`` with a 4xx body and paging on ``SystemError``.
"""

from __future__ import annotations

from typing import ClassVar

from .base import ApplicationError
from .record import ErrorKind


class BusinessError(ApplicationError):
    """Business rule violation, domain validation failure or workflow error.

    Typical statuses: 400, 409, 412, 422.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.BUSINESS


class SecurityError(ApplicationError):
    """Authentication, authorization or other access-control failure.

    Typical statuses: 401, 403, 429.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.SECURITY


class SystemError(ApplicationError):  # noqa: A001
    """Infrastructure or dependency failure outside the caller's control.

    Typical statuses: 500, 502, 503, 504.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.SYSTEM


ERROR_TYPES: dict[ErrorKind, type[ApplicationError]] = {
    ErrorKind.APPLICATION: ApplicationError,
    ErrorKind.BUSINESS: BusinessError,
    ErrorKind.SECURITY: SecurityError,
    ErrorKind.SYSTEM: SystemError,
}


def error_type_for(kind: ErrorKind | str) -> type[ApplicationError]:
    return ERROR_TYPES[ErrorKind(kind)]


__all__ = ["BusinessError", "ERROR_TYPES", "SecurityError", "SystemError", "error_type_for"]
