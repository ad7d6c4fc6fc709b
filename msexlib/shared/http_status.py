# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

MIN_ERROR_STATUS = 400
MAX_ERROR_STATUS = 599


def is_error_status(value: object) -> bool:
    """Return whether ``value`` is a client (4xx) or server (5xx) status code."""

    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_ERROR_STATUS <= int(value) <= MAX_ERROR_STATUS


def coerce_http_status(value: int) -> HTTPStatus | int:
    """Prefer the ``HTTPStatus`` member; keep unassigned codes as plain ints."""

    if isinstance(value, HTTPStatus):
        return value
    try:
        return HTTPStatus(int(value))
    except ValueError:
        return int(value)


__all__ = [
    "MAX_ERROR_STATUS",
    "MIN_ERROR_STATUS",
    "coerce_http_status",
    "is_error_status",
]
