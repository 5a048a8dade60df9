# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

# pylint: disable=invalid-name
# pyright: reportConstantRedefinition=false
"""Blowfish (bcrypt) hasher."""

import logging
from typing import Optional

from ..errors import HasherUnavailableError, InvalidWorkFactorError
from .compare import compare
from .descriptor import DEFAULT_PREFIX, HashDescriptor
from .protocol import HashOptions
from .salt import canonical_salt, derive_salt

HAS_BCRYPT = False
try:
    import bcrypt

    HAS_BCRYPT = True
except ImportError:  # pragma: no cover
    bcrypt = None  # type: ignore

LOG = logging.getLogger(__name__)

MIN_WORK_FACTOR = 4
MAX_WORK_FACTOR = 31
DEFAULT_WORK_FACTOR = 15
MAX_INPUT_BYTES = 72


class BlowfishHasher:
    """Generate and verify Blowfish crypt hashes."""

    def __init__(self, work_factor: Optional[int] = None) -> None:
        """Initialize the hasher.

        Parameters
        ----------
        work_factor : Optional[int], optional
            Override the default work factor (15).

        Raises
        ------
        HasherUnavailableError
            If Blowfish hashing is not available on this installation.
        """
        if not HAS_BCRYPT:
            raise HasherUnavailableError(
                "Blowfish hashing not available on this installation"
            )
        self._work_factor = DEFAULT_WORK_FACTOR
        if work_factor is not None:
            self.set_work_factor(work_factor)

    def __repr__(self) -> str:
        """Get the representation of the hasher."""
        return f"{self.__class__.__name__}(work_factor={self._work_factor})"

    @property
    def work_factor(self) -> int:
        """The work factor used for new hashes."""
        return self._work_factor

    @work_factor.setter
    def work_factor(self, value: int) -> None:
        self.set_work_factor(value)

    def get_work_factor(self) -> int:
        """Get the Blowfish work factor.

        Returns
        -------
        int
            The work factor
        """
        return self._work_factor

    def set_work_factor(self, work_factor: int) -> "BlowfishHasher":
        """Set the Blowfish work factor.

        Parameters
        ----------
        work_factor : int
            The new work factor, 2^work_factor rounds.

        Returns
        -------
        BlowfishHasher
            The hasher itself.

        Raises
        ------
        InvalidWorkFactorError
            If the work factor is not in [4, 31].
        """
        if (
            isinstance(work_factor, bool)
            or not isinstance(work_factor, int)
            or work_factor < MIN_WORK_FACTOR
            or work_factor > MAX_WORK_FACTOR
        ):
            raise InvalidWorkFactorError(
                "Work factor needs to be greater than 3 and smaller than 32, "
                f"got: {work_factor!r}"
            )
        self._work_factor = work_factor
        LOG.debug("Blowfish work factor set to %d", work_factor)
        return self

    def hash(self, plain: str, options: HashOptions = None) -> str:
        """Hash a string.

        Parameters
        ----------
        plain : str
            The string to hash.
        options : HashOptions, optional
            Use ``{"salt": "..."}`` for a fixed salt. Without one,
            a random salt is generated.

        Returns
        -------
        str
            The encoded hash.
        """
        salt = (options or {}).get("salt")
        if salt is not None:
            setting = self._setting_for(str(salt))
        else:
            setting = self._random_setting()
        return self._crypt(plain, setting)

    def verify(
        self, plain: str, stored: str, options: HashOptions = None
    ) -> bool:
        """Verify a string against a stored hash.

        The stored hash's algorithm, work factor and salt are reused,
        so ``options`` are not needed.

        Parameters
        ----------
        plain : str
            The string to check.
        stored : str
            The stored hash.
        options : HashOptions, optional
            Unused.

        Returns
        -------
        bool
            True if the string matches the hash.
        """
        if HashDescriptor.parse(stored) is None:
            LOG.debug("Not a valid Blowfish hash, cannot verify")
            return False
        try:
            computed = self._crypt(plain, stored)
        except ValueError as error:
            LOG.warning("Could not verify Blowfish hash: %s", error)
            return False
        return compare(computed, stored)

    def needs_rehash(self, stored: str) -> bool:
        """Check if a stored hash should be regenerated.

        Parameters
        ----------
        stored : str
            The stored hash.

        Returns
        -------
        bool
            True if the hash is not a valid Blowfish hash or was made
            with a different work factor.
        """
        descriptor = HashDescriptor.parse(stored)
        if descriptor is None:
            return True
        return descriptor.work_factor != self._work_factor

    def _setting_for(self, salt: str) -> str:
        """Build ``$2y$<NN>$<salt>$`` for a user supplied salt."""
        return HashDescriptor.setting(
            self._work_factor, canonical_salt(derive_salt(salt))
        )

    def _random_setting(self) -> str:
        # gensalt only emits 2a/2b, the digest is the same for 2y
        generated = bcrypt.gensalt(rounds=self._work_factor, prefix=b"2b")
        return f"${DEFAULT_PREFIX}$" + generated.decode("ascii")[4:]

    @staticmethod
    def _crypt(plain: str, setting: str) -> str:
        # the primitive only uses the first 72 bytes
        password = plain.encode("utf-8")[:MAX_INPUT_BYTES]
        hashed = bcrypt.hashpw(password, setting.encode("ascii"))
        return hashed.decode("ascii")


__all__ = [
    "BlowfishHasher",
    "DEFAULT_WORK_FACTOR",
    "HAS_BCRYPT",
    "MAX_WORK_FACTOR",
    "MIN_WORK_FACTOR",
]
