# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-try-statements
"""PBKDF2 password hasher (Django compatible)."""

import base64
import hashlib
import math
import secrets
import string
from dataclasses import dataclass
from typing import Dict, Optional

from ..algorithms import (
    DEFAULT_ITERATIONS,
    DEFAULT_SALT_ENTROPY,
    HASH_SEPARATOR,
    Algorithm,
)
from ..errors import MalformedHashError
from ._codec import EncodedHash, parse, serialize
from ._compare import constant_time_compare

SALT_CHARS = string.ascii_letters + string.digits


def get_random_string(length: int, allowed_chars: str = SALT_CHARS) -> str:
    """Generate a random string from the allowed characters.

    Parameters
    ----------
    length : int
        The length of the string.
    allowed_chars : str
        The alphabet to pick from.

    Returns
    -------
    str
        The random string.
    """
    return "".join(secrets.choice(allowed_chars) for _ in range(length))


def mask_hash(value: str, show: int = 6, char: str = "*") -> str:
    """Keep the first characters of a value and mask the rest.

    Parameters
    ----------
    value : str
        The value to mask.
    show : int
        How many characters to keep.
    char : str
        The masking character.

    Returns
    -------
    str
        The masked value.
    """
    return value[:show] + char * len(value[show:])


@dataclass(frozen=True)
class PBKDF2Hasher:
    """PBKDF2 hasher, parameterized by the underlying HMAC digest."""

    algorithm: Algorithm
    digest: str
    iterations: int = DEFAULT_ITERATIONS
    salt_entropy: int = DEFAULT_SALT_ENTROPY

    @property
    def digest_size(self) -> int:
        """Length of the derived key, the digest size of the hash function.

        Returns
        -------
        int
            The derived key length in bytes.
        """
        return hashlib.new(self.digest).digest_size

    def salt(self) -> str:
        """Generate a salt with at least ``salt_entropy`` bits.

        Returns
        -------
        str
            The salt.
        """
        length = math.ceil(self.salt_entropy / math.log2(len(SALT_CHARS)))
        return get_random_string(length)

    def encode(
        self, password: str, salt: str, iterations: Optional[int] = None
    ) -> str:
        """Encode a password.

        Parameters
        ----------
        password : str
            The plain password.
        salt : str
            The salt, must not contain the separator.
        iterations : Optional[int]
            The iteration count, defaults to the hasher's one.

        Returns
        -------
        str
            The encoded hash.

        Raises
        ------
        ValueError
            If the salt contains the separator or iterations is below 1.
        """
        if iterations is None:
            iterations = self.iterations
        if HASH_SEPARATOR in salt:
            raise ValueError(f"salt must not contain {HASH_SEPARATOR!r}")
        if iterations < 1:
            raise ValueError("iterations must be a positive integer")
        key = hashlib.pbkdf2_hmac(
            self.digest,
            password.encode("utf-8"),
            salt.encode("utf-8"),
            iterations,
            dklen=self.digest_size,
        )
        return serialize(
            EncodedHash(
                algorithm=self.algorithm.value,
                parameters=(str(iterations),),
                salt=salt,
                digest=base64.b64encode(key).decode("ascii"),
            )
        )

    def _decode(self, encoded: str) -> Optional[EncodedHash]:
        try:
            decoded = parse(encoded)
        except MalformedHashError:
            return None
        if decoded.algorithm != self.algorithm.value:
            return None
        return decoded

    def verify(self, password: str, encoded: str) -> bool:
        """Verify a password against an encoded hash.

        Parameters
        ----------
        password : str
            The plain password.
        encoded : str
            The stored encoded hash.

        Returns
        -------
        bool
            True if the password matches, False otherwise
            (including any malformed input).
        """
        decoded = self._decode(encoded)
        if decoded is None:
            return False
        iterations = decoded.iterations
        if iterations < 1:
            return False
        try:
            recomputed = self.encode(password, decoded.salt, iterations)
            return constant_time_compare(recomputed, encoded)
        except (ValueError, OverflowError):
            # surrogates or an iteration count out of range
            return False

    def needs_rehash(self, encoded: str) -> bool:
        """Check if the encoded hash should be re-encoded.

        Parameters
        ----------
        encoded : str
            The stored encoded hash.

        Returns
        -------
        bool
            True if the hash is not ours, uses other iterations
            or has a weak salt.
        """
        decoded = self._decode(encoded)
        if decoded is None:
            return True
        salt_bits = len(decoded.salt) * math.log2(len(SALT_CHARS))
        return decoded.iterations != self.iterations or (
            salt_bits < self.salt_entropy
        )

    def safe_summary(self, encoded: str) -> Dict[str, str]:
        """Describe an encoded hash without revealing it.

        Parameters
        ----------
        encoded : str
            The encoded hash.

        Returns
        -------
        Dict[str, str]
            The algorithm, iterations, masked salt and masked hash.

        Raises
        ------
        MalformedHashError
            If the hash cannot be parsed or is not ours.
        """
        decoded = self._decode(encoded)
        if decoded is None:
            raise MalformedHashError(f"not a {self.algorithm.value} hash")
        return {
            "algorithm": decoded.algorithm,
            "iterations": str(decoded.iterations),
            "salt": mask_hash(decoded.salt),
            "hash": mask_hash(decoded.digest),
        }


def pbkdf2_sha256_hasher(
    iterations: int = DEFAULT_ITERATIONS,
    salt_entropy: int = DEFAULT_SALT_ENTROPY,
) -> PBKDF2Hasher:
    """Create the PBKDF2-SHA256 hasher.

    Parameters
    ----------
    iterations : int
        The default iteration count.
    salt_entropy : int
        The minimum salt entropy in bits.

    Returns
    -------
    PBKDF2Hasher
        The hasher.
    """
    return PBKDF2Hasher(
        algorithm=Algorithm.PBKDF2_SHA256,
        digest="sha256",
        iterations=iterations,
        salt_entropy=salt_entropy,
    )


def pbkdf2_sha1_hasher(
    iterations: int = DEFAULT_ITERATIONS,
    salt_entropy: int = DEFAULT_SALT_ENTROPY,
) -> PBKDF2Hasher:
    """Create the PBKDF2-SHA1 hasher.

    Parameters
    ----------
    iterations : int
        The default iteration count.
    salt_entropy : int
        The minimum salt entropy in bits.

    Returns
    -------
    PBKDF2Hasher
        The hasher.
    """
    return PBKDF2Hasher(
        algorithm=Algorithm.PBKDF2_SHA1,
        digest="sha1",
        iterations=iterations,
        salt_entropy=salt_entropy,
    )


__all__ = [
    "PBKDF2Hasher",
    "get_random_string",
    "mask_hash",
    "pbkdf2_sha1_hasher",
    "pbkdf2_sha256_hasher",
]
