# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Registry of the implemented hashers, keyed by algorithm."""

import logging
from typing import Dict, FrozenSet, Iterator, Optional, Union

from ..algorithms import Algorithm
from ..config import Settings
from ._pbkdf2_hasher import pbkdf2_sha1_hasher, pbkdf2_sha256_hasher
from .protocol import Hasher

LOG = logging.getLogger(__name__)


class HasherRegistry:
    """Implemented hashers, a subset of the recognized algorithms."""

    def __init__(self) -> None:
        self._hashers: Dict[str, Hasher] = {}

    def register(self, hasher: Hasher) -> None:
        """Register (or replace) the hasher of an algorithm.

        Parameters
        ----------
        hasher : Hasher
            The hasher to register.

        Raises
        ------
        ValueError
            If the hasher's algorithm is not a recognized one.
        """
        try:
            tag = Algorithm(hasher.algorithm).value
        except ValueError as exc:
            raise ValueError(
                f"Unrecognized algorithm: {hasher.algorithm}"
            ) from exc
        LOG.debug("Registering hasher for %s", tag)
        self._hashers[tag] = hasher

    def get(self, algorithm: Union[Algorithm, str]) -> Optional[Hasher]:
        """Get the hasher of an algorithm.

        Parameters
        ----------
        algorithm : Union[Algorithm, str]
            The algorithm or its tag.

        Returns
        -------
        Optional[Hasher]
            The hasher, None if the algorithm is not implemented.
        """
        if isinstance(algorithm, Algorithm):
            algorithm = algorithm.value
        return self._hashers.get(algorithm)

    @property
    def implemented(self) -> FrozenSet[str]:
        """The tags of the implemented algorithms.

        Returns
        -------
        FrozenSet[str]
            The implemented algorithm tags.
        """
        return frozenset(self._hashers)

    def __contains__(self, algorithm: object) -> bool:
        if isinstance(algorithm, Algorithm):
            algorithm = algorithm.value
        return algorithm in self._hashers

    def __iter__(self) -> Iterator[Hasher]:
        return iter(self._hashers.values())

    def __len__(self) -> int:
        return len(self._hashers)


def default_registry(settings: Settings) -> HasherRegistry:
    """Build the registry with the PBKDF2 hashers.

    Parameters
    ----------
    settings : Settings
        The settings to take iteration counts and salt entropy from.

    Returns
    -------
    HasherRegistry
        The populated registry.
    """
    registry = HasherRegistry()
    registry.register(
        pbkdf2_sha256_hasher(
            iterations=settings.pbkdf2_sha256_iterations,
            salt_entropy=settings.salt_entropy,
        )
    )
    registry.register(
        pbkdf2_sha1_hasher(
            iterations=settings.pbkdf2_sha1_iterations,
            salt_entropy=settings.salt_entropy,
        )
    )
    return registry


__all__ = ["HasherRegistry", "default_registry"]
