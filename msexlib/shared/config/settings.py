# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

UNKNOWN_ROOT_CAUSE_TEXT = "Unknown root cause error"


class LibConfig(BaseSettings):
    backfill_native_error_text: bool = Field(True, alias="MSEXLIB_BACKFILL_NATIVE_ERROR_TEXT")
    unknown_root_cause_text: str = Field(
        UNKNOWN_ROOT_CAUSE_TEXT, alias="MSEXLIB_UNKNOWN_ROOT_CAUSE_TEXT"
    )
    log_level: str = Field("INFO", alias="MSEXLIB_LOG_LEVEL")
    log_file: Path | None = Field(None, alias="MSEXLIB_LOG_FILE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("backfill_native_error_text", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("unknown_root_cause_text")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("unknown root cause text must not be blank")
        return value

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def load_config() -> LibConfig:
    return LibConfig()  # type: ignore[call-arg]


__all__ = ["LibConfig", "UNKNOWN_ROOT_CAUSE_TEXT", "load_config"]
