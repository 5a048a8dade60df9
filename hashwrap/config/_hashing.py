# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.
"""Hashing related configuration.

Environment variables (with prefix HASHWRAP_)
---------------------------------------------
WORK_FACTOR (int) # default: 15
SECRET (str) # default: None
PEPPER (str) # default: None

Command line arguments (no prefix)
----------------------------------
--work-factor (int)
--secret (str)
--pepper (str)
"""

from typing import Optional

from ..hashing.blowfish import DEFAULT_WORK_FACTOR
from ._common import get_value


def get_work_factor() -> int:
    """Get the Blowfish work factor.

    Returns
    -------
    int
        The work factor
    """
    return get_value("--work-factor", "WORK_FACTOR", int, DEFAULT_WORK_FACTOR)


def get_secret() -> Optional[str]:
    """Get the application secret (default salt).

    Returns
    -------
    Optional[str]
        The secret, None if not set
    """
    return get_value("--secret", "SECRET", str, None)


def get_pepper() -> Optional[str]:
    """Get the pepper appended to hashed data.

    Returns
    -------
    Optional[str]
        The pepper, None if not set
    """
    return get_value("--pepper", "PEPPER", str, None)
