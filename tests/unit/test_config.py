from __future__ import annotations

import json
from pathlib import Path

import pytest

from vine_client.config import DEFAULT_SETTINGS, ClientSettings, ConfigManager
from vine_client.exceptions import ConfigurationError


def test_load_credentials_prefers_environment(tmp_path: Path) -> None:
    env = {
        "VINE_EMAIL": "env@example.com",
        "VINE_PASSWORD": "env-password",
    }
    credential_path = tmp_path / "vine.json"
    credential_path.write_text(
        json.dumps({"email": "file@example.com", "password": "file-password"}),
        encoding="utf-8",
    )

    manager = ConfigManager(credential_path=credential_path, env=env, dotenv_path=tmp_path / ".env")
    credentials = manager.load_credentials()

    assert credentials.email == "env@example.com"
    assert credentials.password == "env-password"


def test_load_credentials_from_file_when_env_empty(tmp_path: Path) -> None:
    credential_path = tmp_path / "vine.json"
    credential_path.write_text(json.dumps({"api_key": "file-key"}), encoding="utf-8")

    manager = ConfigManager(credential_path=credential_path, env={}, dotenv_path=tmp_path / ".env")
    credentials = manager.load_credentials(priority=("file",))

    assert credentials.api_key == "file-key"
    assert credentials.email is None


def test_load_credentials_from_dotenv(tmp_path: Path) -> None:
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(
        """
VINE_EMAIL=dotenv@example.com
VINE_PASSWORD=dotenv-password
VINE_API_KEY=dotenv-key
""".strip()
    )

    manager = ConfigManager(credential_path=tmp_path / "credentials.json", env={}, dotenv_path=dotenv_file)
    credentials = manager.load_credentials(priority=("dotenv",))

    assert credentials.email == "dotenv@example.com"
    assert credentials.api_key == "dotenv-key"


def test_load_credentials_raises_when_missing(tmp_path: Path) -> None:
    manager = ConfigManager(credential_path=tmp_path / "vine.json", env={}, dotenv_path=tmp_path / ".env")

    with pytest.raises(ConfigurationError):
        manager.load_credentials()


def test_load_credentials_rejects_unknown_source(tmp_path: Path) -> None:
    manager = ConfigManager(credential_path=tmp_path / "vine.json", env={})

    with pytest.raises(ValueError):
        manager.load_credentials(priority=("keyring",))


def test_load_credentials_rejects_non_mapping_file(tmp_path: Path) -> None:
    credential_path = tmp_path / "vine.json"
    credential_path.write_text(json.dumps(["not", "a", "mapping"]), encoding="utf-8")
    manager = ConfigManager(credential_path=credential_path, env={})

    with pytest.raises(ConfigurationError):
        manager.load_credentials(priority=("file",))


def test_client_settings_defaults() -> None:
    assert DEFAULT_SETTINGS.base_url == "https://api.vineapp.com/"
    assert DEFAULT_SETTINGS.page_size == 20
    assert DEFAULT_SETTINGS.url_for("/timelines/popular") == "https://api.vineapp.com/timelines/popular"


def test_client_settings_are_immutable() -> None:
    settings = ClientSettings()

    with pytest.raises(AttributeError):
        settings.base_url = "https://elsewhere.test/"  # type: ignore[misc]


def test_load_credentials_never_writes_to_disk(tmp_path: Path) -> None:
    credential_path = tmp_path / "credentials" / "vine.json"
    manager = ConfigManager(credential_path=credential_path, env={"VINE_API_KEY": "session-key"})

    assert manager.load_credentials().api_key == "session-key"
    assert not credential_path.exists()
    assert not hasattr(manager, "save_credentials")
