# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Django compatible password hashing and verification."""

from ._version import __version__
from .algorithms import RECOGNIZED_ALGORITHMS, Algorithm
from .errors import (
    HasherNotImplementedError,
    InvalidHasherError,
    MalformedHashError,
    UnchainedError,
)
from .hashing import (
    EncodedHash,
    Hasher,
    VerificationOutcome,
    VerificationResult,
    check_password,
    encode_pbkdf2_sha1,
    encode_pbkdf2_sha256,
    identify_hasher,
    is_password_usable,
    make_password,
    needs_rehash,
    password_hasher,
    verify_outcome,
    verify_pbkdf2_sha1,
    verify_pbkdf2_sha256,
)

__all__ = [
    "__version__",
    "Algorithm",
    "EncodedHash",
    "Hasher",
    "HasherNotImplementedError",
    "InvalidHasherError",
    "MalformedHashError",
    "RECOGNIZED_ALGORITHMS",
    "UnchainedError",
    "VerificationOutcome",
    "VerificationResult",
    "check_password",
    "encode_pbkdf2_sha1",
    "encode_pbkdf2_sha256",
    "identify_hasher",
    "is_password_usable",
    "make_password",
    "needs_rehash",
    "password_hasher",
    "verify_outcome",
    "verify_pbkdf2_sha1",
    "verify_pbkdf2_sha256",
]
