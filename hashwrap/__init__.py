# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Blowfish hashing of any data, with constant time verification."""

from ._version import __version__
from .errors import (
    HasherUnavailableError,
    HashwrapError,
    InvalidWorkFactorError,
    SerializationError,
)
from .hash import Hash
from .hashing import (
    BlowfishHasher,
    Hasher,
    HashDescriptor,
    HashOptions,
    compare,
    derive_salt,
)

__all__ = [
    "__version__",
    "BlowfishHasher",
    "Hash",
    "HashDescriptor",
    "HashOptions",
    "Hasher",
    "HasherUnavailableError",
    "HashwrapError",
    "InvalidWorkFactorError",
    "SerializationError",
    "compare",
    "derive_salt",
]
