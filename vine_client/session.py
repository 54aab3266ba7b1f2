"""
Authentication state of one client and the ``users/authenticate`` flow.
"""

from __future__ import annotations

import logging
import re

from vine_client.clients.http_client import Transport
from vine_client.config import DEFAULT_SETTINGS, ClientSettings
from vine_client.device import get_device_token
from vine_client.envelope import parse_body
from vine_client.exceptions import InvalidArgumentError, VineConnectionError
from vine_client.models import AuthenticationResponse

logger = logging.getLogger(__name__)

AUTHENTICATE_ENDPOINT = "users/authenticate"

_LEADING_INT = re.compile(r"\s*([-+]?\d+)")


def parse_error_code(value: object) -> int:
    """Parse the numeric prefix of an error code, returning 0 when there is none."""

    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0


class Session:
    """Holds the session token issued by the API or supplied by the caller."""

    def __init__(
        self,
        transport: Transport,
        settings: ClientSettings = DEFAULT_SETTINGS,
        *,
        token: str | None = None,
    ) -> None:
        self._transport = transport
        self._settings = settings
        self._token = token
        self.username: str | None = None
        self.user_id: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return bool(self._token)

    def connect(
        self,
        *,
        api_key: str | None = None,
        email: str | None = None,
        password: str | None = None,
        skip_error: bool = False,
    ) -> str | None:
        """
        Store a pre-issued key, or exchange email and password for a session key.

        Raises:
            InvalidArgumentError: unless exactly one of ``api_key`` or
                ``email``/``password`` is supplied.
            VineConnectionError: when the API rejects the credentials and
                ``skip_error`` is false.
        """

        has_password = email is not None and password is not None
        if (api_key is None) == (not has_password):
            raise InvalidArgumentError("You must specify both email and password, or api_key")
        if api_key is not None and not api_key:
            raise InvalidArgumentError("api_key must be a non-empty session key")

        if api_key is not None:
            self._token = api_key
            logger.info("Session connected with a pre-issued key")
            return self._token

        response = self._transport.post(
            self._settings.url_for(AUTHENTICATE_ENDPOINT),
            data={
                "username": email,
                "password": password,
                "deviceToken": get_device_token(),
            },
            headers={"User-Agent": self._settings.user_agent},
        )
        result = AuthenticationResponse.from_api(parse_body(response))

        if result.success and result.key:
            self._token = result.key
            logger.info("Session connected with email and password")
            return self._token

        message = result.error or "Authentication response did not include a session key"
        if skip_error:
            logger.warning("Authentication failed, continuing unauthenticated: %s", message)
            return None
        raise VineConnectionError(message, code=parse_error_code(result.code))
