"""
Process-wide device identity sent with every authentication request.
"""

from __future__ import annotations

import secrets
from functools import lru_cache

DEVICE_TOKEN_BYTES = 32


def generate_device_token() -> str:
    """Return a fresh random token rendered as 64 lowercase hex characters."""

    return secrets.token_hex(DEVICE_TOKEN_BYTES)


@lru_cache(maxsize=1)
def get_device_token() -> str:
    """Return the device token for this process, generating it on first use."""

    return generate_device_token()
