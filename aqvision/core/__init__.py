"""Upstream clients, credential resolution and the shared error types."""

from .credentials import CredentialSet
from .errors import GatewayError, InternalFault, InvalidInput, UpstreamError
from .llm_client import GeminiClient
from .openaq_client import OpenAQClient
from .weather_api import AirNowClient, OpenWeatherClient

__all__ = [
    "CredentialSet",
    "GatewayError",
    "InternalFault",
    "InvalidInput",
    "UpstreamError",
    "GeminiClient",
    "OpenAQClient",
    "AirNowClient",
    "OpenWeatherClient",
]
