"""
Client library for the Vine short-video API.
"""

from vine_client.client import VineClient
from vine_client.config import ClientSettings, ConfigManager, VineCredentials
from vine_client.exceptions import (
    AuthenticationRequiredError,
    ConfigurationError,
    InvalidArgumentError,
    TransportTimeout,
    VineClientError,
    VineConnectionError,
)
from vine_client.factory import VineClientFactory
from vine_client.models import Record, RecordList

__all__ = [
    "AuthenticationRequiredError",
    "ClientSettings",
    "ConfigManager",
    "ConfigurationError",
    "InvalidArgumentError",
    "Record",
    "RecordList",
    "TransportTimeout",
    "VineClient",
    "VineClientError",
    "VineClientFactory",
    "VineConnectionError",
    "VineCredentials",
]
