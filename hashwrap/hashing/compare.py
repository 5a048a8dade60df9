# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Timing safe string comparison."""

import hmac


def compare(string_a: str, string_b: str) -> bool:
    """Compare two strings in constant time.

    The running time does not depend on where the strings first differ.

    Parameters
    ----------
    string_a : str
        The first string.
    string_b : str
        The second string.

    Returns
    -------
    bool
        True if the strings are equal.
    """
    return hmac.compare_digest(
        string_a.encode("utf-8"), string_b.encode("utf-8")
    )


__all__ = ["compare"]
