# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=too-many-try-statements
"""Password hasher dispatcher, routing encoded hashes by algorithm tag."""

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Union

from ..algorithms import (
    RECOGNIZED_ALGORITHMS,
    UNUSABLE_PASSWORD_PREFIX,
    UNUSABLE_PASSWORD_SUFFIX_LENGTH,
    Algorithm,
)
from ..config import Settings
from ..errors import (
    HasherNotImplementedError,
    InvalidHasherError,
    MalformedHashError,
)
from ._codec import LAYOUTS, algorithm_of, parse
from ._pbkdf2_hasher import get_random_string
from .protocol import Hasher
from .registry import HasherRegistry, default_registry

LOG = logging.getLogger(__name__)


class VerificationOutcome(enum.Enum):
    """What happened when a password was checked."""

    MATCH = "MATCH"
    NO_MATCH = "NO_MATCH"
    UNSUPPORTED = "UNSUPPORTED"
    MALFORMED = "MALFORMED"
    UNUSABLE = "UNUSABLE"


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of a check together with the algorithm it concerned."""

    outcome: VerificationOutcome
    algorithm: str

    @property
    def matched(self) -> bool:
        """Whether the password matched.

        Returns
        -------
        bool
            True only for a match.
        """
        return self.outcome is VerificationOutcome.MATCH


class PasswordHasherDispatcher:
    """Dispatcher that verifies any implemented format by its tag."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        registry: Optional[HasherRegistry] = None,
    ) -> None:
        """Initialize the dispatcher.

        Parameters
        ----------
        settings : Optional[Settings]
            The settings, loaded from the environment if not given.
        registry : Optional[HasherRegistry]
            The hashers to dispatch to, built from the settings if not given.
        """
        self._settings = settings or Settings.load()
        self._registry = (
            registry
            if registry is not None
            else default_registry(self._settings)
        )

    @property
    def registry(self) -> HasherRegistry:
        """The registered hashers.

        Returns
        -------
        HasherRegistry
            The registry.
        """
        return self._registry

    def is_password_usable(self, encoded: Optional[str]) -> bool:
        """Check if an encoded hash may ever match a password.

        Parameters
        ----------
        encoded : Optional[str]
            The stored encoded hash.

        Returns
        -------
        bool
            False for the unusable sentinel and for unrecognized
            algorithms, True otherwise.
        """
        if encoded is None or encoded.startswith(UNUSABLE_PASSWORD_PREFIX):
            return False
        return algorithm_of(encoded) in RECOGNIZED_ALGORITHMS

    def get_hasher(self, algorithm: Union[Algorithm, str]) -> Hasher:
        """Get the hasher of an algorithm.

        Parameters
        ----------
        algorithm : Union[Algorithm, str]
            The algorithm or its tag.

        Returns
        -------
        Hasher
            The registered hasher.

        Raises
        ------
        HasherNotImplementedError
            If the algorithm is recognized but has no hasher.
        InvalidHasherError
            If the algorithm is not recognized.
        """
        tag = (
            algorithm.value if isinstance(algorithm, Algorithm) else algorithm
        )
        hasher = self._registry.get(tag)
        if hasher is not None:
            return hasher
        if tag in RECOGNIZED_ALGORITHMS:
            LOG.warning("Hasher not implemented: %s", tag)
            raise HasherNotImplementedError(tag)
        LOG.warning("Invalid hasher: %s", tag)
        raise InvalidHasherError(tag)

    def identify_hasher(self, encoded: str) -> Hasher:
        """Get the hasher that can verify an encoded hash.

        Parameters
        ----------
        encoded : str
            The encoded hash.

        Returns
        -------
        Hasher
            The registered hasher.
        """
        return self.get_hasher(algorithm_of(encoded))

    def check_password(
        self, password: Optional[str], encoded: Optional[str]
    ) -> bool:
        """Check a password against any implemented format.

        Parameters
        ----------
        password : Optional[str]
            The plain password.
        encoded : Optional[str]
            The stored encoded hash.

        Returns
        -------
        bool
            True if the password matches, False otherwise.
            An unusable hash never matches.

        Raises
        ------
        HasherNotImplementedError
            If the algorithm is recognized but has no hasher.
        InvalidHasherError
            If the algorithm is not recognized.
        """
        if not encoded or encoded.startswith(UNUSABLE_PASSWORD_PREFIX):
            return False
        if password is None:
            return False
        hasher = self.identify_hasher(encoded)
        LOG.debug("Verifying with %s", hasher.algorithm.value)
        return hasher.verify(password, encoded)

    def verify_outcome(
        self, password: str, encoded: Optional[str]
    ) -> VerificationResult:
        """Check a password and tell apart why it did not match.

        Parameters
        ----------
        password : str
            The plain password.
        encoded : Optional[str]
            The stored encoded hash.

        Returns
        -------
        VerificationResult
            The outcome and the algorithm tag.
        """
        if not encoded or encoded.startswith(UNUSABLE_PASSWORD_PREFIX):
            return VerificationResult(VerificationOutcome.UNUSABLE, "")
        algorithm = algorithm_of(encoded)
        try:
            hasher = self.get_hasher(algorithm)
        except HasherNotImplementedError:
            return VerificationResult(
                VerificationOutcome.UNSUPPORTED, algorithm
            )
        except InvalidHasherError:
            return VerificationResult(VerificationOutcome.MALFORMED, algorithm)
        if algorithm in LAYOUTS:
            try:
                parse(encoded)
            except MalformedHashError:
                return VerificationResult(
                    VerificationOutcome.MALFORMED, algorithm
                )
        if hasher.verify(password, encoded):
            return VerificationResult(VerificationOutcome.MATCH, algorithm)
        return VerificationResult(VerificationOutcome.NO_MATCH, algorithm)

    def make_password(
        self,
        password: Optional[str],
        salt: Optional[str] = None,
        algorithm: Optional[Union[Algorithm, str]] = None,
    ) -> str:
        """Encode a password for storage.

        Parameters
        ----------
        password : Optional[str]
            The plain password, None for an unusable password.
        salt : Optional[str]
            The salt, generated if not given.
        algorithm : Optional[Union[Algorithm, str]]
            The algorithm, the configured default if not given.

        Returns
        -------
        str
            The encoded hash.

        Raises
        ------
        TypeError
            If the password is not a string.
        """
        if password is None:
            return UNUSABLE_PASSWORD_PREFIX + get_random_string(
                UNUSABLE_PASSWORD_SUFFIX_LENGTH
            )
        if not isinstance(password, str):
            raise TypeError(
                "Password must be a string or None, "
                f"not {type(password).__qualname__}"
            )
        hasher = self.get_hasher(algorithm or self._settings.default_algorithm)
        return hasher.encode(password, salt or hasher.salt())

    def needs_rehash(
        self,
        encoded: Optional[str],
        algorithm: Optional[Union[Algorithm, str]] = None,
    ) -> bool:
        """Check if an encoded hash should be upgraded.

        Parameters
        ----------
        encoded : Optional[str]
            The stored encoded hash.
        algorithm : Optional[Union[Algorithm, str]]
            The preferred algorithm, the configured default if not given.

        Returns
        -------
        bool
            True if the hash is not of the preferred algorithm
            or the preferred hasher wants new parameters.
        """
        preferred = self.get_hasher(
            algorithm or self._settings.default_algorithm
        )
        if not encoded or encoded.startswith(UNUSABLE_PASSWORD_PREFIX):
            return True
        if algorithm_of(encoded) != preferred.algorithm.value:
            return True
        return preferred.needs_rehash(encoded)


__all__ = [
    "PasswordHasherDispatcher",
    "VerificationOutcome",
    "VerificationResult",
]
