# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Hashers and their helpers."""

from .blowfish import (
    DEFAULT_WORK_FACTOR,
    HAS_BCRYPT,
    MAX_WORK_FACTOR,
    MIN_WORK_FACTOR,
    BlowfishHasher,
)
from .compare import compare
from .descriptor import HashDescriptor
from .protocol import Hasher, HashOptions
from .salt import canonical_salt, derive_salt, is_valid_salt

__all__ = [
    "BlowfishHasher",
    "DEFAULT_WORK_FACTOR",
    "HAS_BCRYPT",
    "HashDescriptor",
    "HashOptions",
    "Hasher",
    "MAX_WORK_FACTOR",
    "MIN_WORK_FACTOR",
    "canonical_salt",
    "compare",
    "derive_salt",
    "is_valid_salt",
]
