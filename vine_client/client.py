"""
High level client for the Vine timelines, search, profile and social graph endpoints.
"""

from __future__ import annotations

import logging
import re
from typing import Any
from urllib.parse import quote

from vine_client.clients.http_client import HttpTransport, Transport
from vine_client.config import DEFAULT_SETTINGS, ClientSettings
from vine_client.envelope import Envelope, normalize_response
from vine_client.exceptions import (
    AuthenticationRequiredError,
    InvalidArgumentError,
    TransportTimeout,
)
from vine_client.models import Record, failure
from vine_client.request_builder import RequestBuilder
from vine_client.session import Session

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"[-+]?[0-9]+")


def is_numeric_id(value: Any) -> bool:
    """True for integers and for strings made only of an optional sign and digits."""

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and _NUMERIC.fullmatch(value) is not None


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _require(value: Any, what: str) -> None:
    if value is None or value is False or value == "":
        raise InvalidArgumentError(f"You must specify a {what}")


class VineClient:
    """Facade issuing one signed request per public operation.

    Read operations never raise for API-level failures or timeouts; they
    return a record whose ``success`` is false and ``error`` is true.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        settings: ClientSettings = DEFAULT_SETTINGS,
        *,
        token: str | None = None,
    ) -> None:
        self._settings = settings
        self._owned_transport: HttpTransport | None = None
        if transport is None:
            transport = self._owned_transport = HttpTransport(timeout=settings.timeout)
        self._transport = transport
        self._builder = RequestBuilder(settings)
        self.session = Session(self._transport, settings, token=token)

    def close(self) -> None:
        """Release the HTTP session when this client created its own transport."""

        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> "VineClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -- session ---------------------------------------------------------

    def connect(
        self,
        *,
        api_key: str | None = None,
        email: str | None = None,
        password: str | None = None,
        skip_error: bool = False,
    ) -> str | None:
        return self.session.connect(
            api_key=api_key, email=email, password=password, skip_error=skip_error
        )

    @property
    def token(self) -> str | None:
        return self.session.token

    @property
    def username(self) -> str | None:
        return self.session.username

    @property
    def user_id(self) -> str | None:
        return self.session.user_id

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    # -- timelines -------------------------------------------------------

    def search(self, tag: str, **options: Any) -> Envelope:
        _require(tag, "tag")
        return self._get(f"timelines/tags/{_segment(tag)}", options)

    def popular(self, **options: Any) -> Envelope:
        return self._get("timelines/popular", options)

    def promoted(self, **options: Any) -> Envelope:
        return self._get("timelines/promoted", options)

    def timeline(self, **options: Any) -> Envelope:
        self._require_authentication()
        return self._get("timelines/graph", options)

    def likes(self, **options: Any) -> Envelope:
        self._require_authentication()
        return self.user_likes("me", **options)

    # -- users -----------------------------------------------------------

    def following(self, uid: str | int, **options: Any) -> Envelope:
        self._require_authentication()
        _require(uid, "user id")
        return self._get(f"users/{_segment(uid)}/following", options)

    def followers(self, uid: str | int, **options: Any) -> Envelope:
        self._require_authentication()
        _require(uid, "user id")
        return self._get(f"users/{_segment(uid)}/followers", options)

    def user_profile(self, uid: str | int) -> Envelope:
        _require(uid, "user id")
        if is_numeric_id(uid):
            return self._get(f"users/profiles/{_segment(uid)}")
        return self._get(f"users/profiles/vanity/{_segment(uid)}")

    def user_timeline(self, uid: str | int, **options: Any) -> Envelope:
        _require(uid, "user id")
        return self._get(f"timelines/users/{_segment(uid)}", options)

    def user_likes(self, uid: str | int, **options: Any) -> Envelope:
        _require(uid, "user id")
        return self._get(f"timelines/users/{_segment(uid)}/likes", options)

    # -- posts -----------------------------------------------------------

    def single_post(self, pid: str | int) -> Record:
        _require(pid, "post id")
        if is_numeric_id(pid):
            result = self._get(f"timelines/posts/{_segment(pid)}")
        else:
            result = self._get(f"timelines/posts/s/{_segment(pid)}")

        if isinstance(result, Record):
            return result
        if not result:
            return failure("Post not found")
        first = result[0]
        return first if isinstance(first, Record) else failure()

    def search_posts(self, q: str, **options: Any) -> Envelope:
        _require(q, "search query")
        return self._get(f"posts/search/{_segment(q)}", options)

    # -- one-shot helpers ------------------------------------------------

    @classmethod
    def fetch_popular(cls, **options: Any) -> Envelope:
        with cls() as client:
            return client.popular(**options)

    @classmethod
    def fetch_user_profile(cls, uid: str | int) -> Envelope:
        with cls() as client:
            return client.user_profile(uid)

    @classmethod
    def fetch_single_post(cls, pid: str | int) -> Record:
        with cls() as client:
            return client.single_post(pid)

    # -- internals -------------------------------------------------------

    def _require_authentication(self) -> None:
        if not self.session.is_authenticated:
            raise AuthenticationRequiredError()

    def _get(self, endpoint: str, options: dict[str, Any] | None = None) -> Envelope:
        request = self._builder.build(endpoint, options, token=self.session.token)
        logger.debug(
            "GET %s query=%s", request.url, sorted(request.params) if request.params else []
        )
        try:
            response = self._transport.get(
                request.url, headers=request.headers, params=request.params
            )
        except TransportTimeout:
            logger.warning("Timed out fetching %s", endpoint)
            return failure()
        result = normalize_response(response)
        logger.debug("GET %s success=%s", endpoint, result.success)
        return result
