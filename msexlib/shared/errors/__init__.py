from .base import ApplicationError
from .categories import ERROR_TYPES, BusinessError, SecurityError, SystemError, error_type_for
from .record import ErrorKind, ErrorRecord
from .result import Failure, Result, Success, capture, guarded
from .root_cause import (
    backfill_native_error_text,
    find_root_cause,
    iter_cause_chain,
    root_cause_message,
)

__all__ = [
    "ApplicationError",
    "BusinessError",
    "ERROR_TYPES",
    "ErrorKind",
    "ErrorRecord",
    "Failure",
    "Result",
    "SecurityError",
    "Success",
    "SystemError",
    "backfill_native_error_text",
    "capture",
    "error_type_for",
    "find_root_cause",
    "guarded",
    "iter_cause_chain",
    "root_cause_message",
]
