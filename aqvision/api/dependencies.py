"""FastAPI dependencies handing the startup-built clients to the routers."""

from dataclasses import dataclass
from fastapi import Request
import httpx

from aqvision.config import Settings
from aqvision.core import credentials as keys
from aqvision.core.credentials import CredentialSet
from aqvision.core.llm_client import GeminiClient
from aqvision.core.openaq_client import OpenAQClient
from aqvision.core.weather_api import AirNowClient, OpenWeatherClient


@dataclass(frozen=True)
class Upstreams:
    """All provider clients, sharing one httpx client and one credential set."""

    credentials: CredentialSet
    openaq: OpenAQClient
    openweather: OpenWeatherClient
    airnow: AirNowClient
    gemini: GeminiClient
    maps_script_url: str


def build_upstreams(
    settings: Settings, credentials: CredentialSet, http: httpx.AsyncClient
) -> Upstreams:
    return Upstreams(
        credentials=credentials,
        openaq=OpenAQClient(http, settings.openaq_base_url, debug=settings.debug),
        openweather=OpenWeatherClient(
            http,
            settings.openweather_base_url,
            credentials.value(keys.OPENWEATHER),
            debug=settings.debug,
        ),
        airnow=AirNowClient(
            http,
            settings.airnow_base_url,
            credentials.value(keys.AIRNOW),
            debug=settings.debug,
        ),
        gemini=GeminiClient(
            http,
            settings.gemini_base_url,
            settings.gemini_model,
            credentials.value(keys.GEMINI),
            debug=settings.debug,
        ),
        maps_script_url=settings.maps_script_url,
    )


def get_upstreams(request: Request) -> Upstreams:
    return request.app.state.upstreams


def get_openaq_client(request: Request) -> OpenAQClient:
    return get_upstreams(request).openaq


def get_openweather_client(request: Request) -> OpenWeatherClient:
    return get_upstreams(request).openweather


def get_airnow_client(request: Request) -> AirNowClient:
    return get_upstreams(request).airnow


def get_gemini_client(request: Request) -> GeminiClient:
    return get_upstreams(request).gemini
