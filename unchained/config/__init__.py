# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Configuration module for unchained."""

from ._common import ENV_PREFIX
from .settings import Settings

__all__ = [
    "Settings",
    "ENV_PREFIX",
]
