# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Constant-time comparison of secret derived values."""

import hmac
from typing import Union


def _to_bytes(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def constant_time_compare(
    val1: Union[str, bytes], val2: Union[str, bytes]
) -> bool:
    """Compare two values without leaking where they differ.

    Parameters
    ----------
    val1 : Union[str, bytes]
        The first value.
    val2 : Union[str, bytes]
        The second value.

    Returns
    -------
    bool
        True if both values are equal, False otherwise.
    """
    return hmac.compare_digest(_to_bytes(val1), _to_bytes(val2))


__all__ = ["constant_time_compare"]
