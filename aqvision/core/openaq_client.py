"""Client for OpenAQ PM2.5 measurements and their aggregation."""

import math
import re
import httpx
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional
from aqvision.core.errors import InvalidInput
from aqvision.core.upstream import UpstreamClient, UpstreamRequest
from aqvision.models.air_quality import AggregatedReading, GeoQuery, Observation
import logging

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_METERS = 5000
DEFAULT_LOOKBACK_DAYS = 1
RESULT_LIMIT = 1000


def _parse_coordinate(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_int(raw: Optional[str], default: int) -> int:
    """Parses the leading integer of an optional parameter ("3.5" and "7d" give 3 and 7)."""
    if raw is None:
        return default
    match = re.match(r"\s*([+-]?\d+)", raw)
    return int(match.group(1)) if match else default


def parse_geo_query(
    lat: Optional[str],
    lon: Optional[str],
    radius: Optional[str] = None,
    days: Optional[str] = None,
) -> GeoQuery:
    """Builds a GeoQuery from raw query-string values."""
    latitude = _parse_coordinate(lat)
    longitude = _parse_coordinate(lon)
    if latitude is None or longitude is None:
        raise InvalidInput("lat,lon required")

    radius_meters = _parse_int(radius, DEFAULT_RADIUS_METERS)
    if radius_meters < 0:
        radius_meters = DEFAULT_RADIUS_METERS

    return GeoQuery(
        latitude=latitude,
        longitude=longitude,
        radius_meters=radius_meters,
        lookback_days=max(1, _parse_int(days, DEFAULT_LOOKBACK_DAYS)),
    )


def _format_coordinate(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


def _isoformat_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_number(value: Any) -> Optional[float]:
    """Coerces an observation value to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, str):
            number = float(value.strip())
        elif isinstance(value, (int, float)):
            number = float(value)
        else:
            return None
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def _observation_date(raw_date: Any) -> Optional[str]:
    if not isinstance(raw_date, dict):
        return None
    return raw_date.get("local") or raw_date.get("utc") or None


def aggregate_measurements(payload: Any) -> AggregatedReading:
    """
    Flattens OpenAQ measurement results and averages the numeric PM2.5 values.
    Unparsable and non-finite values are left out of the mean without failing.
    """
    payload = payload if isinstance(payload, dict) else {}
    results = payload.get("results") or []

    observations: List[Observation] = []
    for item in results:
        if not isinstance(item, dict):
            continue
        observations.append(
            Observation(
                value=item.get("value"),
                date=_observation_date(item.get("date")),
                unit=item.get("unit"),
                location=item.get("location"),
                country=item.get("country"),
            )
        )

    numeric = [n for n in (to_number(o.value) for o in observations) if n is not None]
    mean = None
    if numeric:
        mean = sum(numeric) / len(numeric)
        if not math.isfinite(mean):
            # finite values whose sum overflows
            mean = sum(n / len(numeric) for n in numeric)

    return AggregatedReading(
        mean=mean,
        values=numeric,
        raw=observations,
        meta=payload.get("meta"),
    )


class OpenAQClient(UpstreamClient):
    """Fetches recent PM2.5 measurements around a point."""

    provider = "OpenAQ"

    def __init__(
        self,
        http: httpx.AsyncClient,
        base_url: str,
        debug: bool = False,
        clock: Callable[[], datetime] = _utc_now,
    ):
        super().__init__(http, debug=debug)
        self.base_url = base_url
        self.clock = clock

    def build_request(self, query: GeoQuery) -> UpstreamRequest:
        now = self.clock()
        date_from = now - timedelta(days=query.lookback_days)
        params: Dict[str, str] = {
            "parameter": "pm25",
            "coordinates": f"{_format_coordinate(query.latitude)},{_format_coordinate(query.longitude)}",
            "radius": str(query.radius_meters),
            "date_from": _isoformat_utc(date_from),
            "date_to": _isoformat_utc(now),
            "limit": str(RESULT_LIMIT),
            "sort": "desc",
        }
        return UpstreamRequest(url=self.base_url, params=params)

    async def get_pm25(self, query: GeoQuery) -> AggregatedReading:
        """Single entry point: fetch and aggregate."""
        payload = await self.fetch_json(self.build_request(query))
        reading = aggregate_measurements(payload)
        logger.info(
            f"OpenAQ returned {len(reading.raw)} observations "
            f"({len(reading.values)} numeric) near {query.latitude},{query.longitude}"
        )
        return reading
