# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Blowfish salt normalization.

Blowfish accepts exactly 22 characters from ``./0-9A-Za-z`` as a salt.
Anything else is mapped to 22 supported characters through an MD5 digest,
so any string can be used as a (stable) salt.
"""

import hashlib
import re

SALT_LENGTH = 22
BCRYPT_ALPHABET = (
    "./ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)

_SALT_RE = re.compile(r"^[./0-9A-Za-z]{22}$")


def is_valid_salt(value: str) -> bool:
    """Check if a string can be used verbatim as a Blowfish salt.

    Parameters
    ----------
    value : str
        The string to check.

    Returns
    -------
    bool
        True if the string is 22 characters from the bcrypt alphabet.
    """
    return _SALT_RE.fullmatch(value) is not None


def derive_salt(raw_salt: str) -> str:
    """Get a valid Blowfish salt for a raw salt string.

    Parameters
    ----------
    raw_salt : str
        The raw salt.

    Returns
    -------
    str
        The salt itself if already valid, else the first 22 characters
        of its MD5 hex digest.
    """
    if is_valid_salt(raw_salt):
        return raw_salt
    digest = hashlib.md5(  # nosemgrep # nosec
        raw_salt.encode("utf-8"), usedforsecurity=False
    ).hexdigest()
    return digest[:SALT_LENGTH]


def canonical_salt(salt: str) -> str:
    """Clear the padding bits of a salt's last character.

    22 characters encode 132 bits of which bcrypt keeps 128, so the
    last character only contributes its two high bits.

    Parameters
    ----------
    salt : str
        A valid 22 character salt.

    Returns
    -------
    str
        The salt as the primitive reports it back.

    Raises
    ------
    ValueError
        If the salt is not valid.
    """
    if not is_valid_salt(salt):
        raise ValueError(f"Not a valid Blowfish salt: {salt!r}")
    last = BCRYPT_ALPHABET.index(salt[-1]) & 0x30
    return salt[:-1] + BCRYPT_ALPHABET[last]


__all__ = [
    "BCRYPT_ALPHABET",
    "SALT_LENGTH",
    "canonical_salt",
    "derive_salt",
    "is_valid_salt",
]
