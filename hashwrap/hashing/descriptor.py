# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 hashwrap contributors.

"""Blowfish hash string parsing."""

import re
from dataclasses import dataclass

DEFAULT_PREFIX = "2y"

_DESCRIPTOR_RE = re.compile(
    r"^\$(2[abxy])\$([0-9]{2})\$([./0-9A-Za-z]{22})([./0-9A-Za-z]{31})$"
)


@dataclass(frozen=True)
class HashDescriptor:
    """The parts of a ``$2y$NN$<salt><digest>`` hash string."""

    prefix: str
    work_factor: int
    salt: str
    digest: str

    @classmethod
    def parse(cls, value: str) -> "HashDescriptor | None":
        """Parse a Blowfish hash string.

        Parameters
        ----------
        value : str
            The encoded hash.

        Returns
        -------
        HashDescriptor | None
            The parsed descriptor, None if the string is not a
            well-formed Blowfish hash.
        """
        if not isinstance(value, str):
            return None
        m = _DESCRIPTOR_RE.fullmatch(value)
        if not m:
            return None
        return cls(
            prefix=m.group(1),
            work_factor=int(m.group(2)),
            salt=m.group(3),
            digest=m.group(4),
        )

    @staticmethod
    def setting(
        work_factor: int, salt: str, prefix: str = DEFAULT_PREFIX
    ) -> str:
        """Build the parameter string passed to the primitive.

        Parameters
        ----------
        work_factor : int
            The work factor.
        salt : str
            A valid 22 character salt.
        prefix : str, optional
            The algorithm identifier, by default "2y".

        Returns
        -------
        str
            The ``$<prefix>$<NN>$<salt>$`` setting.
        """
        return f"${prefix}${work_factor:02d}${salt}$"

    def encode(self) -> str:
        """Format the descriptor back into a hash string.

        Returns
        -------
        str
            The encoded hash.
        """
        return f"${self.prefix}${self.work_factor:02d}${self.salt}{self.digest}"


__all__ = ["DEFAULT_PREFIX", "HashDescriptor"]
