# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.
"""Configuration module for hashwrap."""

from ._common import DOT_ENV_PATH, ENV_PREFIX
from .settings import HashSettings

__all__ = ["DOT_ENV_PATH", "ENV_PREFIX", "HashSettings"]
