# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Unchained settings module."""

import logging
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import LogLevel, get_log_level
from ..algorithms import Algorithm
from ._common import DOT_ENV_PATH, ENV_PREFIX
from ._hashing import (
    get_default_algorithm,
    get_pbkdf2_sha1_iterations,
    get_pbkdf2_sha256_iterations,
    get_salt_entropy,
)

LOG = logging.getLogger(__name__)

IMPLEMENTED_DEFAULTS = (Algorithm.PBKDF2_SHA256, Algorithm.PBKDF2_SHA1)


class Settings(BaseSettings):
    """Settings class."""

    default_algorithm: Annotated[Algorithm, Field(validate_default=True)] = (
        get_default_algorithm()  # type: ignore[assignment]
    )
    pbkdf2_sha256_iterations: Annotated[int, Field(ge=1)] = (
        get_pbkdf2_sha256_iterations()
    )
    pbkdf2_sha1_iterations: Annotated[int, Field(ge=1)] = (
        get_pbkdf2_sha1_iterations()
    )
    salt_entropy: Annotated[int, Field(ge=0, le=1024)] = get_salt_entropy()
    log_level: str = get_log_level()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        cli_parse_args=False,  # we use typer
    )

    @classmethod
    def load(cls) -> "Settings":
        """Load the settings.

        Returns
        -------
        Settings
            The settings instance
        """
        if DOT_ENV_PATH.exists():
            load_dotenv(DOT_ENV_PATH, override=False)
        instance = cls()
        LOG.debug("Default algorithm: %s", instance.default_algorithm.value)
        return instance

    @field_validator("default_algorithm", mode="after")
    @classmethod
    def validate_default_algorithm(
        cls, value: Algorithm, info: ValidationInfo
    ) -> Algorithm:
        """Only allow algorithms that can encode new hashes.

        Parameters
        ----------
        value : Algorithm
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Algorithm
            The algorithm

        Raises
        ------
        ValueError
            If the algorithm is not implemented
        """
        if value not in IMPLEMENTED_DEFAULTS:
            raise ValueError(
                f"Cannot use {value.value} as the default algorithm"
            )
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the log level.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Any
            The log level, INFO if not a known one
        """
        if isinstance(value, LogLevel):
            return value.value
        if isinstance(value, str):
            value = value.upper()
            if value in LogLevel.__members__:
                return value
            LOG.warning("Unknown log level %s, using INFO", value)
            return LogLevel.INFO.value
        return value  # pragma: no cover
