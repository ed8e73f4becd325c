# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Recognized password hash algorithms."""

import enum
from typing import Optional

UNUSABLE_PASSWORD_PREFIX = "!"
UNUSABLE_PASSWORD_SUFFIX_LENGTH = 40
HASH_SEPARATOR = "$"
DEFAULT_ITERATIONS = 1_000_000
DEFAULT_SALT_ENTROPY = 128


class Algorithm(str, enum.Enum):
    """Algorithm tags as written in front of an encoded hash."""

    PBKDF2_SHA256 = "pbkdf2_sha256"
    PBKDF2_SHA1 = "pbkdf2_sha1"
    ARGON2 = "argon2"
    BCRYPT = "bcrypt"
    BCRYPT_SHA256 = "bcrypt_sha256"
    CRYPT = "crypt"
    MD5 = "md5"
    SHA1 = "sha1"
    UNSALTED_MD5 = "unsalted_md5"
    UNSALTED_SHA1 = "unsalted_sha1"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["Algorithm"]:
        """Get the algorithm for a tag.

        Parameters
        ----------
        tag : str
            The tag (text before the first separator).

        Returns
        -------
        Optional[Algorithm]
            The algorithm or None if the tag is not recognized.
        """
        try:
            return cls(tag)
        except ValueError:
            return None


RECOGNIZED_ALGORITHMS = frozenset(algorithm.value for algorithm in Algorithm)

__all__ = [
    "Algorithm",
    "DEFAULT_ITERATIONS",
    "DEFAULT_SALT_ENTROPY",
    "HASH_SEPARATOR",
    "RECOGNIZED_ALGORITHMS",
    "UNUSABLE_PASSWORD_PREFIX",
    "UNUSABLE_PASSWORD_SUFFIX_LENGTH",
]
