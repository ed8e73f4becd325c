# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Errors raised while handling encoded password hashes."""


class UnchainedError(ValueError):
    """Base error for encoded password hashes."""


class MalformedHashError(UnchainedError):
    """The encoded hash does not follow its algorithm's layout."""


class _AlgorithmError(UnchainedError):
    """An error about the algorithm of an encoded hash."""

    message = "unsupported hasher"

    def __init__(self, algorithm: str) -> None:
        super().__init__(f"{self.message}: {algorithm}")
        self.algorithm = algorithm


class HasherNotImplementedError(_AlgorithmError):
    """The algorithm is recognized but has no registered hasher."""

    message = "hasher not implemented"


class InvalidHasherError(_AlgorithmError):
    """The algorithm is not recognized at all."""

    message = "invalid hasher"


__all__ = [
    "UnchainedError",
    "MalformedHashError",
    "HasherNotImplementedError",
    "InvalidHasherError",
]
