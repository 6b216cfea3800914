"""Clients for current weather (OpenWeather) and US air-quality observations (AirNow)."""

import httpx
from typing import Any, Optional
from aqvision.core.errors import InvalidInput
from aqvision.core.upstream import UpstreamClient, UpstreamRequest

AIRNOW_DISTANCE_MILES = 25


def require_coordinates(lat: Optional[str], lon: Optional[str]) -> None:
    """Both coordinates must be present; their content is passed through as-is."""
    if not lat or not lon:
        raise InvalidInput("lat,lon required")


class OpenWeatherClient(UpstreamClient):
    """Current conditions from OpenWeather, returned unmodified."""

    provider = "OpenWeather"

    def __init__(
        self, http: httpx.AsyncClient, base_url: str, api_key: str, debug: bool = False
    ):
        super().__init__(http, debug=debug)
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    def build_request(self, lat: str, lon: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=f"{self.base_url}/weather",
            params={
                "lat": lat,
                "lon": lon,
                "units": "metric",
                "appid": self.api_key,
            },
        )

    async def get_current_weather(self, lat: str, lon: str) -> Any:
        return await self.fetch_json(self.build_request(lat, lon))


class AirNowClient(UpstreamClient):
    """Current AirNow observations near a point (US coverage)."""

    provider = "AirNow"

    def __init__(
        self, http: httpx.AsyncClient, base_url: str, api_key: str, debug: bool = False
    ):
        super().__init__(http, debug=debug)
        self.base_url = base_url
        self.api_key = api_key

    def build_request(self, lat: str, lon: str) -> UpstreamRequest:
        return UpstreamRequest(
            url=self.base_url,
            params={
                "format": "application/json",
                "latitude": lat,
                "longitude": lon,
                "distance": str(AIRNOW_DISTANCE_MILES),
                "API_KEY": self.api_key,
            },
        )

    async def get_observations(self, lat: str, lon: str) -> Any:
        return await self.fetch_json(self.build_request(lat, lon))
