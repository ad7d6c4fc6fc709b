# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Value types shared by every error this package defines."""

from .exceptions import InvalidArgumentError, InvalidConstructionArgument
from .payload import (
    ApplicationErrorCode,
    ApplicationErrorPayload,
    ErrorCode,
    ErrorPayload,
    Freezable,
)
from .status import DomainStatus

__all__ = [
    "ApplicationErrorCode",
    "ApplicationErrorPayload",
    "DomainStatus",
    "ErrorCode",
    "ErrorPayload",
    "Freezable",
    "InvalidArgumentError",
    "InvalidConstructionArgument",
]
