"""Pydantic models for the PM2.5 aggregation endpoint."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Any, List, Optional


class GeoQuery(BaseModel):
    """Normalized caller parameters for an OpenAQ lookup."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    radius_meters: int = Field(default=5000, ge=0)
    lookback_days: int = Field(default=1, ge=1)


class Observation(BaseModel):
    """One upstream measurement, flattened."""

    value: Any = None
    date: Optional[str] = None
    unit: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None


class AggregatedReading(BaseModel):
    """Mean PM2.5 over the numeric observations, with the raw list alongside."""

    mean: Optional[float] = None
    values: List[float] = []
    raw: List[Observation] = []
    meta: Optional[Any] = None
