# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Walk exception chains to recover the underlying technical failure."""

from __future__ import annotations

from collections.abc import Iterator

from msexlib.domain.payload import ErrorPayload, is_blank
from msexlib.shared.config import UNKNOWN_ROOT_CAUSE_TEXT


def _next_in_chain(error: BaseException) -> BaseException | None:
    if error.__cause__ is not None:
        return error.__cause__
    if error.__suppress_context__:
        return None
    return error.__context__


def iter_cause_chain(error: BaseException | None) -> Iterator[BaseException]:
    """Yield ``error`` and every exception it wraps, outermost first."""

    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = _next_in_chain(current)


def find_root_cause(error: BaseException | None) -> BaseException | None:
    root = None
    for root in iter_cause_chain(error):
        pass
    return root


def root_cause_message(error: BaseException | None) -> str | None:
    """Return the deepest non-blank message in the chain, if any."""

    message = None
    for link in iter_cause_chain(error):
        text = str(link)
        if not is_blank(text):
            message = text
    return message


def backfill_native_error_text(
    payload: ErrorPayload,
    cause: BaseException | None,
    *,
    default: str = UNKNOWN_ROOT_CAUSE_TEXT,
) -> bool:
    """Copy the root-cause message into an unset ``native_error_text``.

    Returns ``True`` when the payload was written. A payload that already
    carries text or is frozen, or an error without a cause, is left alone.
    """

    if cause is None or getattr(payload, "frozen", False):
        return False
    if not is_blank(payload.native_error_text):
        return False
    payload.native_error_text = root_cause_message(cause) or default
    return True


__all__ = [
    "backfill_native_error_text",
    "find_root_cause",
    "iter_cause_chain",
    "root_cause_message",
]
