"""
Domain specific exception hierarchy for the vine_client package.
"""

from __future__ import annotations


class VineClientError(Exception):
    """Base exception for all library errors."""


class ConfigurationError(VineClientError):
    """Raised when required configuration or credentials are missing."""


class InvalidArgumentError(VineClientError, ValueError):
    """Raised before any network call when a required argument is missing."""


class AuthenticationRequiredError(VineClientError):
    """Raised when a protected operation is called without a session token."""

    def __init__(
        self,
        message: str = (
            "You must authenticate as a valid Vine user (call connect) "
            "before accessing other API methods"
        ),
    ) -> None:
        super().__init__(message)


class VineConnectionError(VineClientError):
    """Raised when the authentication endpoint reports a failure."""

    def __init__(self, message: str, *, code: int = 0) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class TransportTimeout(VineClientError, TimeoutError):
    """Raised by the transport when the remote end did not answer in time."""
