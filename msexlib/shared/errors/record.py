# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from msexlib.domain.status import DomainStatus


class ErrorKind(str, Enum):
    APPLICATION = "application"
    BUSINESS = "business"
    SECURITY = "security"
    SYSTEM = "system"


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorRecord:
    """Immutable snapshot of an application error.

    Records compare by value, so two errors raised with the same arguments
    produce equal records even though the exceptions themselves are distinct.
    The ``kind`` field keeps categories apart.
    """

    kind: ErrorKind
    http_status: int
    domain_status: DomainStatus
    message: str
    code: str
    description: str
    native_error_text: str | None = None

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.code} ({self.http_status}) {self.message}"


__all__ = ["ErrorKind", "ErrorRecord"]
