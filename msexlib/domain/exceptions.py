# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when an error is constructed from arguments it cannot carry."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field

    @property
    def reason(self) -> str:
        return self.args[0]

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}" if self.field else self.reason


InvalidConstructionArgument = InvalidArgumentError
