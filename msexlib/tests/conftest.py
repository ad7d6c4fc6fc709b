from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from msexlib.shared.config import load_config


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in list(os.environ):
        if name.startswith("MSEXLIB_"):
            monkeypatch.delenv(name, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()
