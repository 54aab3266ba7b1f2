"""
Factory for creating Vine client instances with proper initialization.
"""

from __future__ import annotations

from vine_client.client import VineClient
from vine_client.clients.http_client import Transport
from vine_client.config import DEFAULT_SETTINGS, ClientSettings, ConfigManager, VineCredentials
from vine_client.exceptions import ConfigurationError


class VineClientFactory:
    """Factory for creating connected Vine API clients."""

    @staticmethod
    def create_from_config(
        config_manager: ConfigManager,
        *,
        settings: ClientSettings = DEFAULT_SETTINGS,
        transport: Transport | None = None,
    ) -> VineClient:
        """
        Create a VineClient from credentials resolved by the config manager.

        Raises:
            ConfigurationError: If credentials are missing or incomplete
            VineConnectionError: If the API rejects the email/password pair
        """
        credentials = config_manager.load_credentials()
        return VineClientFactory.create_from_credentials(
            credentials, settings=settings, transport=transport
        )

    @staticmethod
    def create_from_credentials(
        credentials: VineCredentials,
        *,
        settings: ClientSettings = DEFAULT_SETTINGS,
        transport: Transport | None = None,
    ) -> VineClient:
        """
        Create a VineClient and connect it with the given credentials.

        A pre-issued API key takes precedence over an email/password pair.

        Raises:
            ConfigurationError: If neither an API key nor both email and
                password are available
        """
        client = VineClient(transport, settings)

        if credentials.api_key:
            client.connect(api_key=credentials.api_key)
            return client

        if not credentials.email or not credentials.password:
            raise ConfigurationError("Either an API key or both email and password are required")

        client.connect(email=credentials.email, password=credentials.password)
        return client
