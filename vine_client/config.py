"""
Configuration management utilities for vine_client.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from dotenv import dotenv_values

from vine_client.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.vineapp.com/"
DEFAULT_USER_AGENT = "iphone/1.3.1 (iPhone; iOS 6.1.3; Scale/2.00) (Redvine)"
DEFAULT_ACCEPT_LANGUAGE = "en;q=1, fr;q=0.9, de;q=0.8, ja;q=0.7, nl;q=0.6, it;q=0.5"
SESSION_HEADER = "vine-session-id"

ENV_VAR_MAP = {
    "email": "VINE_EMAIL",
    "password": "VINE_PASSWORD",
    "api_key": "VINE_API_KEY",
}


@dataclass(frozen=True, slots=True)
class ClientSettings:
    """Immutable settings shared by every component of a client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    accept_language: str = DEFAULT_ACCEPT_LANGUAGE
    session_header: str = SESSION_HEADER
    page_size: int = 20
    timeout: float = 30.0

    def url_for(self, endpoint: str) -> str:
        return self.base_url + endpoint.lstrip("/")


DEFAULT_SETTINGS = ClientSettings()


@dataclass(slots=True)
class VineCredentials:
    """Either a pre-issued session key or an email/password pair."""

    email: str | None = None
    password: str | None = None
    api_key: str | None = None

    def is_empty(self) -> bool:
        return all(value in (None, "") for value in (self.email, self.password, self.api_key))

    @classmethod
    def from_mapping(cls, data: Mapping[str, str | None]) -> "VineCredentials":
        return cls(
            email=data.get("email"),
            password=data.get("password"),
            api_key=data.get("api_key"),
        )


class ConfigManager:
    """Loads credentials from the environment, a .env file or disk."""

    def __init__(
        self,
        credential_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
        dotenv_path: Path | None = None,
    ) -> None:
        self._credential_path = credential_path or Path("credentials/vine_config.json")
        self._env = os.environ if env is None else env
        self._dotenv_path = dotenv_path or Path(".env")

    def load_credentials(
        self,
        priority: Sequence[str] = ("env", "dotenv", "file"),
    ) -> VineCredentials:
        """
        Load credentials according to the requested priority order.

        Raises:
            ConfigurationError: when no credentials are available.
        """

        for source in priority:
            if source == "env":
                credentials = self._load_from_mapping(self._env)
            elif source == "dotenv":
                credentials = self._load_from_dotenv()
            elif source == "file":
                credentials = self._load_from_file()
            else:
                raise ValueError(f"Unknown credential source '{source}'.")

            if credentials and not credentials.is_empty():
                return credentials

        raise ConfigurationError("Vine credentials are not configured.")

    @staticmethod
    def _load_from_mapping(source: Mapping[str, str | None]) -> VineCredentials | None:
        values = {field: source.get(env_name) for field, env_name in ENV_VAR_MAP.items()}
        credentials = VineCredentials.from_mapping(values)
        return credentials if not credentials.is_empty() else None

    def _load_from_dotenv(self) -> VineCredentials | None:
        if not self._dotenv_path.exists():
            return None
        return self._load_from_mapping(dotenv_values(self._dotenv_path))

    def _load_from_file(self) -> VineCredentials | None:
        if not self._credential_path.exists():
            return None

        with self._credential_path.open("r", encoding="utf-8") as fp:
            data = json.load(fp)

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"Credential file {self._credential_path} did not contain a mapping."
            )

        credentials = VineCredentials.from_mapping(data)
        return credentials if not credentials.is_empty() else None
