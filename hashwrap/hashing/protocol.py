# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

# pylint: disable=unnecessary-ellipsis

"""Hasher protocol."""

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

HashOptions = Optional[Mapping[str, Any]]
"""Per call hasher options (for example ``{"salt": "..."}``)."""


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for hashing implementations."""

    def hash(self, plain: str, options: HashOptions = None) -> str:
        """Hash a plain string.

        Parameters
        ----------
        plain : str
            The plain string
        options : HashOptions, optional
            Hasher specific options
        """
        ...

    def verify(
        self, plain: str, stored: str, options: HashOptions = None
    ) -> bool:
        """Verify a plain string against a stored hash.

        Parameters
        ----------
        plain : str
            The plain string
        stored : str
            The stored hash
        options : HashOptions, optional
            Hasher specific options
        """
        ...


__all__ = ["Hasher", "HashOptions"]
