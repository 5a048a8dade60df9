# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Hash facade: hash and verify any data with a configured hasher."""

from typing import Any, Dict, Optional

from .hashing.compare import compare as _compare
from .hashing.protocol import Hasher, HashOptions
from .serializer import to_data_string


class Hash:
    """Hash any data with a wrapped hasher.

    The hasher is held by reference, so tuning it through
    :meth:`get_hasher` affects every later call.

    Parameters
    ----------
    hasher : Hasher
        The hasher to use.
    secret : Optional[str], optional
        Application secret, used as the default ``salt`` option.
    pepper : Optional[str], optional
        Secret appended to every serialized input.
    """

    def __init__(
        self,
        hasher: Hasher,
        secret: Optional[str] = None,
        *,
        pepper: Optional[str] = None,
    ) -> None:
        self._hasher = hasher
        self._secret = secret
        self._pepper = pepper or ""

    def __repr__(self) -> str:
        """Get the representation without exposing secrets."""
        return f"{self.__class__.__name__}(hasher={self._hasher!r})"

    @property
    def hasher(self) -> Hasher:
        """The wrapped hasher."""
        return self._hasher

    def get_hasher(self) -> Hasher:
        """Get the wrapped hasher.

        Returns
        -------
        Hasher
            The hasher instance (not a copy).
        """
        return self._hasher

    def serialize(self, data: Any) -> str:
        """Get the string that is hashed for some data.

        Parameters
        ----------
        data : Any
            Scalars, sequences, mappings or objects.

        Returns
        -------
        str
            The canonical string with the pepper appended.
        """
        return to_data_string(data) + self._pepper

    def hash(self, data: Any, options: HashOptions = None) -> str:
        """Hash data.

        Parameters
        ----------
        data : Any
            The data to hash.
        options : HashOptions, optional
            Hasher options, these override the defaults.

        Returns
        -------
        str
            The encoded hash.
        """
        return self._hasher.hash(
            self.serialize(data), self._hash_options(options)
        )

    def verify(
        self, data: Any, stored: str, options: HashOptions = None
    ) -> bool:
        """Verify data against a stored hash.

        Parameters
        ----------
        data : Any
            The data to check.
        stored : str
            The stored hash.
        options : HashOptions, optional
            Hasher options, these override the defaults.

        Returns
        -------
        bool
            True if the data matches the hash.
        """
        return self._hasher.verify(
            self.serialize(data), stored, self._hash_options(options)
        )

    @staticmethod
    def compare(string_a: str, string_b: str) -> bool:
        """Compare two strings in constant time.

        Parameters
        ----------
        string_a : str
            The first string.
        string_b : str
            The second string.

        Returns
        -------
        bool
            True if equal.
        """
        return _compare(string_a, string_b)

    def _hash_options(self, options: HashOptions) -> Dict[str, Any]:
        merged: Dict[str, Any] = {}
        if self._secret is not None:
            merged["salt"] = self._secret
        merged.update(options or {})
        return merged


__all__ = ["Hash"]
