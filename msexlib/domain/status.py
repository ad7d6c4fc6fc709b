# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum


class DomainStatus(str, Enum):
    """Outcome category of an operation, shared across services."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"
    PARTIAL = "PARTIAL"
    UNPROCESSED = "UNPROCESSED"

    @property
    def is_success(self) -> bool:
        return self is DomainStatus.SUCCESS
