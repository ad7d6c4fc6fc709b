from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from msexlib import LibConfig, load_config


def test_defaults() -> None:
    config = load_config()

    assert config.backfill_native_error_text is True
    assert config.unknown_root_cause_text == "Unknown root cause error"
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_load_config_is_cached() -> None:
    assert load_config() is load_config()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), ("YES", True), ("0", False), ("false", False), ("off", False)],
)
def test_backfill_flag_parsing(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("MSEXLIB_BACKFILL_NATIVE_ERROR_TEXT", raw)

    assert LibConfig().backfill_native_error_text is expected  # type: ignore[call-arg]


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MSEXLIB_LOG_LEVEL", " debug ")
    monkeypatch.setenv("MSEXLIB_LOG_FILE", str(tmp_path / "errors.log"))

    config = load_config()

    assert config.log_level == "DEBUG"
    assert config.log_file == tmp_path / "errors.log"


def test_blank_sentinel_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MSEXLIB_UNKNOWN_ROOT_CAUSE_TEXT", "  ")

    with pytest.raises(ValidationError):
        LibConfig()  # type: ignore[call-arg]
