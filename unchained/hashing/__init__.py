# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing and verification."""

from typing import Optional, Union

from ..algorithms import Algorithm
from ._codec import (
    EncodedHash,
    algorithm_of,
    parse,
    serialize,
)
from ._compare import constant_time_compare
from ._pbkdf2_hasher import (
    PBKDF2Hasher,
    pbkdf2_sha1_hasher,
    pbkdf2_sha256_hasher,
)
from .dispatcher import (
    PasswordHasherDispatcher,
    VerificationOutcome,
    VerificationResult,
)
from .protocol import Hasher
from .registry import HasherRegistry, default_registry

password_hasher = PasswordHasherDispatcher()

_PBKDF2_SHA256 = pbkdf2_sha256_hasher()
_PBKDF2_SHA1 = pbkdf2_sha1_hasher()


def encode_pbkdf2_sha256(password: str, salt: str, iterations: int) -> str:
    """Encode a password with PBKDF2-SHA256.

    Parameters
    ----------
    password : str
        The plain password.
    salt : str
        The salt.
    iterations : int
        The iteration count.

    Returns
    -------
    str
        The encoded hash.
    """
    return _PBKDF2_SHA256.encode(password, salt, iterations)


def verify_pbkdf2_sha256(password: str, encoded: str) -> bool:
    """Verify a password against a PBKDF2-SHA256 hash.

    Parameters
    ----------
    password : str
        The plain password.
    encoded : str
        The encoded hash.

    Returns
    -------
    bool
        True if the password matches.
    """
    return _PBKDF2_SHA256.verify(password, encoded)


def encode_pbkdf2_sha1(password: str, salt: str, iterations: int) -> str:
    """Encode a password with PBKDF2-SHA1.

    Parameters
    ----------
    password : str
        The plain password.
    salt : str
        The salt.
    iterations : int
        The iteration count.

    Returns
    -------
    str
        The encoded hash.
    """
    return _PBKDF2_SHA1.encode(password, salt, iterations)


def verify_pbkdf2_sha1(password: str, encoded: str) -> bool:
    """Verify a password against a PBKDF2-SHA1 hash.

    Parameters
    ----------
    password : str
        The plain password.
    encoded : str
        The encoded hash.

    Returns
    -------
    bool
        True if the password matches.
    """
    return _PBKDF2_SHA1.verify(password, encoded)


def is_password_usable(encoded: Optional[str]) -> bool:
    """Check if an encoded hash may ever match, see the dispatcher.

    Parameters
    ----------
    encoded : Optional[str]
        The encoded hash.

    Returns
    -------
    bool
        Whether the hash is usable.
    """
    return password_hasher.is_password_usable(encoded)


def check_password(password: Optional[str], encoded: Optional[str]) -> bool:
    """Check a password against any implemented format, see the dispatcher.

    Parameters
    ----------
    password : Optional[str]
        The plain password.
    encoded : Optional[str]
        The encoded hash.

    Returns
    -------
    bool
        Whether the password matches.
    """
    return password_hasher.check_password(password, encoded)


def verify_outcome(password: str, encoded: Optional[str]) -> VerificationResult:
    """Check a password without raising, see the dispatcher.

    Parameters
    ----------
    password : str
        The plain password.
    encoded : Optional[str]
        The encoded hash.

    Returns
    -------
    VerificationResult
        The outcome.
    """
    return password_hasher.verify_outcome(password, encoded)


def identify_hasher(encoded: str) -> Hasher:
    """Get the hasher of an encoded hash, see the dispatcher.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    Hasher
        The hasher.
    """
    return password_hasher.identify_hasher(encoded)


def make_password(
    password: Optional[str],
    salt: Optional[str] = None,
    algorithm: Optional[Union[Algorithm, str]] = None,
) -> str:
    """Encode a password for storage, see the dispatcher.

    Parameters
    ----------
    password : Optional[str]
        The plain password, None for an unusable one.
    salt : Optional[str]
        The salt.
    algorithm : Optional[Union[Algorithm, str]]
        The algorithm.

    Returns
    -------
    str
        The encoded hash.
    """
    return password_hasher.make_password(password, salt, algorithm)


def needs_rehash(
    encoded: Optional[str],
    algorithm: Optional[Union[Algorithm, str]] = None,
) -> bool:
    """Check if an encoded hash should be upgraded, see the dispatcher.

    Parameters
    ----------
    encoded : Optional[str]
        The encoded hash.
    algorithm : Optional[Union[Algorithm, str]]
        The preferred algorithm.

    Returns
    -------
    bool
        Whether the hash should be upgraded.
    """
    return password_hasher.needs_rehash(encoded, algorithm)


__all__ = [
    "EncodedHash",
    "Hasher",
    "HasherRegistry",
    "PBKDF2Hasher",
    "PasswordHasherDispatcher",
    "VerificationOutcome",
    "VerificationResult",
    "algorithm_of",
    "check_password",
    "constant_time_compare",
    "default_registry",
    "encode_pbkdf2_sha1",
    "encode_pbkdf2_sha256",
    "identify_hasher",
    "is_password_usable",
    "make_password",
    "needs_rehash",
    "parse",
    "password_hasher",
    "pbkdf2_sha1_hasher",
    "pbkdf2_sha256_hasher",
    "serialize",
    "verify_outcome",
    "verify_pbkdf2_sha1",
    "verify_pbkdf2_sha256",
]
