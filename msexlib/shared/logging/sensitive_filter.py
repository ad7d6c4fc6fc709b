# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
from typing import Any

# Root-cause messages come from drivers and clients and may echo credentials.
SENSITIVE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (
        re.compile(r"((?:api[_-]?key|secret[_-]?key|token)\s*[:=]\s*['\"]?)([\w\-.]{20,})", re.I),
        r"\1***REDACTED***",
    ),
    (re.compile(r"(bearer\s+)([\w\-.]{20,})", re.I), r"\1***REDACTED***"),
    (re.compile(r"((?:password|passwd|pwd)\s*[:=]\s*['\"]?)([^'\"\s]{6,})", re.I), r"\1***REDACTED***"),
    (
        re.compile(r"(postgres(?:ql)?|mysql|mongodb|redis|amqp)://([^:/@\s]+):([^@\s]+)@"),
        r"\1://\2:***REDACTED***@",
    ),
    (re.compile(r"(authorization\s*:\s*['\"]?)([^'\"]{10,})", re.I), r"\1***REDACTED***"),
]


def sanitize_message(message: str) -> str:
    for pattern, replacement in SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_record(record: dict[str, Any]) -> bool:
    if "message" in record:
        record["message"] = sanitize_message(record["message"])
    return True


def redact_record(record: dict[str, Any]) -> None:
    record["message"] = sanitize_message(record["message"])
