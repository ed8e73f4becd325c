# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc
"""Shared fixtures for tests."""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.constants import TEST_ITERATIONS
from unchained.config import ENV_PREFIX, Settings
from unchained.hashing import PasswordHasherDispatcher

HERE = Path(__file__).parent


@pytest.fixture(autouse=True, name="clear_env")
def clear_env_and_args() -> Generator[None, None, None]:
    """Clear unchained environment variables and command-line arguments."""
    saved = {
        key: value
        for key, value in os.environ.items()
        if key.startswith(ENV_PREFIX)
    }
    for key in saved:
        os.environ.pop(key, None)
    original_argv = sys.argv[:]
    sys.argv = [str(HERE / "conftest.py")]
    yield
    sys.argv = original_argv
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            os.environ.pop(key, None)
    os.environ.update(saved)


@pytest.fixture(name="settings")
def settings_fixture() -> Settings:
    """Settings with a low iteration count."""
    return Settings(
        pbkdf2_sha256_iterations=TEST_ITERATIONS,
        pbkdf2_sha1_iterations=TEST_ITERATIONS,
    )


@pytest.fixture(name="dispatcher")
def dispatcher_fixture(settings: Settings) -> PasswordHasherDispatcher:
    """A dispatcher using the test settings."""
    return PasswordHasherDispatcher(settings)
