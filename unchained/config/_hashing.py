# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Password hashing related configuration.

Environment variables (with prefix UNCHAINED_)
----------------------------------------------
DEFAULT_ALGORITHM (str) # default: pbkdf2_sha256
PBKDF2_SHA256_ITERATIONS (int) # default: 1000000
PBKDF2_SHA1_ITERATIONS (int) # default: 1000000
SALT_ENTROPY (int) # default: 128

Command line arguments (no prefix)
----------------------------------
--default-algorithm (str)
--pbkdf2-sha256-iterations (int)
--pbkdf2-sha1-iterations (int)
--salt-entropy (int)
"""

from ..algorithms import DEFAULT_ITERATIONS, DEFAULT_SALT_ENTROPY, Algorithm
from ._common import get_value


def get_default_algorithm() -> str:
    """Get the algorithm used for new hashes.

    Returns
    -------
    str
        The algorithm tag
    """
    return get_value(
        "--default-algorithm",
        "DEFAULT_ALGORITHM",
        str,
        Algorithm.PBKDF2_SHA256.value,
    )


def get_pbkdf2_sha256_iterations() -> int:
    """Get the PBKDF2-SHA256 iteration count.

    Returns
    -------
    int
        The iteration count
    """
    return get_value(
        "--pbkdf2-sha256-iterations",
        "PBKDF2_SHA256_ITERATIONS",
        int,
        DEFAULT_ITERATIONS,
    )


def get_pbkdf2_sha1_iterations() -> int:
    """Get the PBKDF2-SHA1 iteration count.

    Returns
    -------
    int
        The iteration count
    """
    return get_value(
        "--pbkdf2-sha1-iterations",
        "PBKDF2_SHA1_ITERATIONS",
        int,
        DEFAULT_ITERATIONS,
    )


def get_salt_entropy() -> int:
    """Get the minimum salt entropy in bits.

    Returns
    -------
    int
        The salt entropy
    """
    return get_value(
        "--salt-entropy", "SALT_ENTROPY", int, DEFAULT_SALT_ENTROPY
    )
