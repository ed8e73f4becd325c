# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Password hasher protocol."""

from typing import Dict, Protocol, runtime_checkable

from ..algorithms import Algorithm


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for a single algorithm's hasher."""

    @property
    def algorithm(self) -> Algorithm:
        """The algorithm this hasher encodes and verifies."""
        ...

    def salt(self) -> str:
        """Generate a new salt."""
        ...

    def encode(self, password: str, salt: str) -> str:
        """Encode a plain text password.

        Parameters
        ----------
        password : str
            The plain text password
        salt : str
            The salt
        """
        ...

    def verify(self, password: str, encoded: str) -> bool:
        """Verify a plain text password against an encoded hash.

        Parameters
        ----------
        password : str
            The plain text password
        encoded : str
            The encoded hash
        """
        ...

    def needs_rehash(self, encoded: str) -> bool:
        """Check if the encoded hash needs rehash.

        Parameters
        ----------
        encoded : str
            The encoded hash
        """
        ...

    def safe_summary(self, encoded: str) -> Dict[str, str]:
        """Describe the encoded hash with its secrets masked.

        Parameters
        ----------
        encoded : str
            The encoded hash
        """
        ...


__all__ = ["Hasher"]
