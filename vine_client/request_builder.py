"""
Composition of headers, session credentials and query parameters for GET calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from vine_client.config import DEFAULT_SETTINGS, ClientSettings


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """Everything the transport needs to issue one read call."""

    url: str
    headers: dict[str, str]
    params: dict[str, Any] | None = field(default=None)


class RequestBuilder:
    """Builds outbound read requests from shared settings and the session token."""

    def __init__(self, settings: ClientSettings = DEFAULT_SETTINGS) -> None:
        self._settings = settings

    def base_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._settings.user_agent,
            "Accept": "*/*",
            "Accept-Language": self._settings.accept_language,
        }

    def headers(self, token: str | None = None) -> dict[str, str]:
        headers = self.base_headers()
        if token:
            headers[self._settings.session_header] = token
        return headers

    def query(self, options: Mapping[str, Any] | None) -> dict[str, Any]:
        """Copy caller options, adding the default page size when only a page is given."""

        query = dict(options or {})
        if "page" in query and "size" not in query:
            query["size"] = self._settings.page_size
        return query

    def build(
        self,
        endpoint: str,
        options: Mapping[str, Any] | None = None,
        *,
        token: str | None = None,
    ) -> PreparedRequest:
        query = self.query(options)
        return PreparedRequest(
            url=self._settings.url_for(endpoint),
            headers=self.headers(token),
            params=query or None,
        )
