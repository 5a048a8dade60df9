# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Exceptions raised by hashwrap."""


class HashwrapError(Exception):
    """Base class for hashwrap errors."""


class HasherUnavailableError(HashwrapError, RuntimeError):
    """The hashing primitive is not available on this installation."""


class InvalidWorkFactorError(HashwrapError, ValueError):
    """The requested work factor is outside the supported range."""


class SerializationError(HashwrapError, TypeError):
    """The input cannot be turned into a canonical string."""


__all__ = [
    "HashwrapError",
    "HasherUnavailableError",
    "InvalidWorkFactorError",
    "SerializationError",
]
