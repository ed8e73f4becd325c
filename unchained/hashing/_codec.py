# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Parse and serialize ``algorithm$param...$salt$digest`` strings."""

import re
from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from ..algorithms import HASH_SEPARATOR, Algorithm
from ..errors import MalformedHashError

_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Layout:
    """Field layout of an algorithm family."""

    field_count: int
    numeric_parameters: FrozenSet[int] = frozenset()


# algorithm, iterations, salt, digest
_PBKDF2_LAYOUT = Layout(field_count=4, numeric_parameters=frozenset({0}))

LAYOUTS: Dict[str, Layout] = {
    Algorithm.PBKDF2_SHA256.value: _PBKDF2_LAYOUT,
    Algorithm.PBKDF2_SHA1.value: _PBKDF2_LAYOUT,
}


@dataclass(frozen=True)
class EncodedHash:
    """The fields of an encoded password hash."""

    algorithm: str
    parameters: Tuple[str, ...]
    salt: str
    digest: str

    @property
    def iterations(self) -> int:
        """The iteration count (first parameter).

        Returns
        -------
        int
            The iteration count.

        Raises
        ------
        MalformedHashError
            If there is no numeric first parameter.
        """
        if not self.parameters or not _DIGITS_RE.fullmatch(self.parameters[0]):
            raise MalformedHashError("missing iteration count")
        return int(self.parameters[0])


def algorithm_of(encoded: str) -> str:
    """Get the algorithm tag of an encoded hash.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    str
        The text before the first separator.
    """
    return encoded.split(HASH_SEPARATOR, 1)[0]


def parse(encoded: str) -> EncodedHash:
    """Split an encoded hash into its fields.

    Parameters
    ----------
    encoded : str
        The encoded hash.

    Returns
    -------
    EncodedHash
        The parsed fields.

    Raises
    ------
    MalformedHashError
        If the algorithm has no known layout, the field count
        does not match it, or a numeric field is not a number.
    """
    fields = encoded.split(HASH_SEPARATOR)
    layout = LAYOUTS.get(fields[0])
    if layout is None:
        raise MalformedHashError(f"no layout for {fields[0]!r}")
    if len(fields) != layout.field_count:
        raise MalformedHashError(
            f"expected {layout.field_count} fields, got {len(fields)}"
        )
    parameters = tuple(fields[1:-2])
    for index in layout.numeric_parameters:
        if not _DIGITS_RE.fullmatch(parameters[index]):
            raise MalformedHashError(f"parameter {index} is not numeric")
    return EncodedHash(
        algorithm=fields[0],
        parameters=parameters,
        salt=fields[-2],
        digest=fields[-1],
    )


def serialize(encoded_hash: EncodedHash) -> str:
    """Join the fields of an encoded hash.

    Parameters
    ----------
    encoded_hash : EncodedHash
        The fields.

    Returns
    -------
    str
        The encoded hash string.
    """
    return HASH_SEPARATOR.join(
        (
            encoded_hash.algorithm,
            *encoded_hash.parameters,
            encoded_hash.salt,
            encoded_hash.digest,
        )
    )


__all__ = [
    "EncodedHash",
    "LAYOUTS",
    "Layout",
    "algorithm_of",
    "parse",
    "serialize",
]
