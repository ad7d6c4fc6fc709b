"""Structured logging utilities."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger as _logger

from msexlib.shared.config import load_config

from .sensitive_filter import redact_record, sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_PACKAGE = "msexlib"

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.opt(depth=6, exception=record.exc_info).log(
            level,
            record.getMessage(),
            correlation_id=_CORRELATION_ID.get(),
        )


class ContextualLogger:
    """Proxy for loguru that injects correlation ids via ContextVar."""

    def __getattr__(self, name: str) -> Any:  # pragma: no cover
        bound = _logger.bind(correlation_id=_CORRELATION_ID.get()).patch(redact_record)
        return getattr(bound, name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(level: str | None = None) -> list[int]:
    """Install sinks and start emitting records from this package.

    Until this runs, records logged by ``msexlib`` are dropped. Returns the ids
    of the handlers that were added.
    """

    config = load_config()
    level = (level or config.log_level).upper()

    _logger.remove()
    _logger.configure(extra={"correlation_id": "-"})
    handler_ids = [
        _logger.add(
            sys.stderr,
            level=level,
            format=_FMT,
            filter=sanitize_record,
            colorize=True,
            backtrace=False,
            diagnose=False,
        )
    ]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_id = _logger.add(
            config.log_file,
            level=level,
            format=_FMT,
            filter=sanitize_record,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=True,
            encoding="utf-8",
        )
        handler_ids.append(handler_id)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    _logger.enable(_PACKAGE)
    return handler_ids


_logger.disable(_PACKAGE)

logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
