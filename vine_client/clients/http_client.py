"""
Thin wrapper around requests.Session to present a consistent transport interface.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

import requests

from vine_client.exceptions import TransportTimeout

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Protocol subset consumed by the session and the client facade."""

    def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        ...

    def post(
        self,
        url: str,
        *,
        data: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> requests.Response:
        ...


class HttpTransport:
    """Wrapper that converts requests timeouts into domain exceptions."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def get(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        params: Mapping[str, Any] | None = None,
    ) -> requests.Response:
        kwargs: dict[str, Any] = {"headers": dict(headers), "timeout": self._timeout}
        if params is not None:
            kwargs["params"] = dict(params)
        return self._invoke("GET", url, **kwargs)

    def post(
        self,
        url: str,
        *,
        data: Mapping[str, Any],
        headers: Mapping[str, str],
    ) -> requests.Response:
        return self._invoke(
            "POST", url, data=dict(data), headers=dict(headers), timeout=self._timeout
        )

    def close(self) -> None:
        self._session.close()

    def _invoke(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._session.request(method, url, **kwargs)
        except requests.Timeout as exc:
            raise TransportTimeout(f"{method} {url} timed out.") from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response
