# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .settings import UNKNOWN_ROOT_CAUSE_TEXT, LibConfig, load_config

__all__ = ["LibConfig", "UNKNOWN_ROOT_CAUSE_TEXT", "load_config"]
