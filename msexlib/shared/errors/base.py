# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Base application error shared by every service."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, ClassVar

from msexlib.domain.exceptions import InvalidArgumentError
from msexlib.domain.payload import ErrorPayload, Freezable
from msexlib.domain.status import DomainStatus
from msexlib.shared.config import load_config
from msexlib.shared.http_status import coerce_http_status, is_error_status
from msexlib.shared.logging import logger

from .record import ErrorKind, ErrorRecord
from .root_cause import backfill_native_error_text


def _validate_http_status(value: Any) -> HTTPStatus | int:
    if not is_error_status(value):
        logger.warning(f"Rejected non-error HTTP status {value!r}")
        raise InvalidArgumentError(
            f"HTTP status must be an error status, got: {value}", field="http_status"
        )
    return coerce_http_status(value)


def _validate_message(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        logger.warning("Rejected blank exception message")
        raise InvalidArgumentError("Exception message must not be blank", field="message")
    return value


def _validate_domain_status(value: Any) -> DomainStatus:
    try:
        status = DomainStatus(value)
    except ValueError:
        raise InvalidArgumentError(
            f"Unknown domain status: {value!r}", field="domain_status"
        ) from None
    if status.is_success:
        logger.warning(f"{status.name} is not valid for an exception")
        raise InvalidArgumentError(
            f"Exception status cannot be SUCCESS, got: {status.name}", field="domain_status"
        )
    return status


def _validate_cause(value: Any) -> BaseException | None:
    if value is not None and not isinstance(value, BaseException):
        raise InvalidArgumentError(
            f"Exception cause must be an exception, got: {type(value).__name__}", field="cause"
        )
    return value


def _rebuild(cls: type[ApplicationError], *args: Any) -> ApplicationError:
    return cls(*args, backfill=False)


class ApplicationError(Exception):
    """Error carrying an HTTP status, a domain status and structured details.

    The constructor rejects anything that cannot describe a failure: the HTTP
    status must be 4xx or 5xx, the domain status must not be ``SUCCESS`` and
    the message must not be blank. Violations raise
    :class:`~msexlib.domain.InvalidArgumentError` and no instance is created.

    When ``cause`` is given and the payload has no native error text yet, the
    deepest message in the cause chain is copied into it. ``backfill`` turns
    that on or off per call; ``None`` defers to ``LibConfig``. Payloads that
    support ``freeze()`` are frozen afterwards.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.APPLICATION

    def __init__(
        self,
        http_status: HTTPStatus | int,
        domain_status: DomainStatus,
        payload: ErrorPayload,
        message: str,
        cause: BaseException | None = None,
        *,
        backfill: bool | None = None,
    ) -> None:
        resolved_http_status = _validate_http_status(http_status)
        resolved_message = _validate_message(message)
        resolved_domain_status = _validate_domain_status(domain_status)
        resolved_cause = _validate_cause(cause)

        super().__init__(resolved_message)
        self.http_status = resolved_http_status
        self.domain_status = resolved_domain_status
        self.payload = payload
        self.message = resolved_message
        self._cause = resolved_cause
        self.__cause__ = resolved_cause

        config = load_config()
        enabled = config.backfill_native_error_text if backfill is None else backfill
        if enabled and backfill_native_error_text(
            payload, cause, default=config.unknown_root_cause_text
        ):
            logger.debug(
                f"Native error text for {type(self).__name__} taken from "
                f"{type(cause).__name__}: {payload.native_error_text}"
            )
        if isinstance(payload, Freezable):
            payload.freeze()

    @property
    def cause(self) -> BaseException | None:
        return self._cause

    @property
    def native_error_text(self) -> str | None:
        return self.payload.native_error_text

    def to_record(self) -> ErrorRecord:
        return ErrorRecord(
            kind=self.kind,
            http_status=int(self.http_status),
            domain_status=self.domain_status,
            message=self.message,
            code=self.payload.error_code.code,
            description=self.payload.description,
            native_error_text=self.payload.native_error_text,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            _rebuild,
            (
                type(self),
                self.http_status,
                self.domain_status,
                self.payload,
                self.message,
                self._cause,
            ),
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"http_status={int(self.http_status)}, "
            f"domain_status={self.domain_status.name}, "
            f"message={self.message!r}, "
            f"native_error_text={self.payload.native_error_text!r})"
        )


__all__ = ["ApplicationError", "ErrorKind"]
