"""Proxy endpoints for air quality and weather data."""

import logging
from typing import Optional
from fastapi import APIRouter, Depends

from aqvision.api.dependencies import (
    get_airnow_client,
    get_openaq_client,
    get_openweather_client,
)
from aqvision.core.errors import GatewayError, InternalFault
from aqvision.core.openaq_client import OpenAQClient, parse_geo_query
from aqvision.core.weather_api import AirNowClient, OpenWeatherClient, require_coordinates
from aqvision.models.air_quality import AggregatedReading

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["environment"])


@router.get("/openaq", response_model=AggregatedReading)
async def openaq_pm25(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    radius: Optional[str] = None,
    days: Optional[str] = None,
    client: OpenAQClient = Depends(get_openaq_client),
):
    """Mean PM2.5 around a point over the last `days` days."""
    try:
        query = parse_geo_query(lat, lon, radius, days)
        return await client.get_pm25(query)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"openaq error: {e}", exc_info=True)
        raise InternalFault(str(e))


@router.get("/openweather")
async def openweather_current(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    client: OpenWeatherClient = Depends(get_openweather_client),
):
    """Current weather, passed through from OpenWeather."""
    try:
        require_coordinates(lat, lon)
        return await client.get_current_weather(lat, lon)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"openweather error: {e}", exc_info=True)
        raise InternalFault(str(e))


@router.get("/airnow")
async def airnow_observations(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    client: AirNowClient = Depends(get_airnow_client),
):
    """Current AirNow observations near a point (works for US coordinates)."""
    try:
        require_coordinates(lat, lon)
        return await client.get_observations(lat, lon)
    except GatewayError:
        raise
    except Exception as e:
        logger.error(f"airnow error: {e}", exc_info=True)
        raise InternalFault(str(e))
