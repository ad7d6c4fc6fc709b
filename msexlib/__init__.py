# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Standard exception vocabulary for microservices."""

from .domain import (
    ApplicationErrorCode,
    ApplicationErrorPayload,
    DomainStatus,
    ErrorCode,
    ErrorPayload,
    InvalidArgumentError,
    InvalidConstructionArgument,
)
from .shared.config import LibConfig, load_config
from .shared.errors import (
    ApplicationError,
    BusinessError,
    ErrorKind,
    ErrorRecord,
    Failure,
    Result,
    SecurityError,
    Success,
    SystemError,
    capture,
    guarded,
)
from .shared.http_status import is_error_status

__version__ = "1.0.0"

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "ApplicationErrorPayload",
    "BusinessError",
    "DomainStatus",
    "ErrorCode",
    "ErrorKind",
    "ErrorPayload",
    "ErrorRecord",
    "Failure",
    "InvalidArgumentError",
    "InvalidConstructionArgument",
    "LibConfig",
    "Result",
    "SecurityError",
    "Success",
    "SystemError",
    "capture",
    "guarded",
    "is_error_status",
    "load_config",
]
