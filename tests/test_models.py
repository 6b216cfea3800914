"""Simple tests for Pydantic models."""

import pytest
from pydantic import ValidationError

from aqvision.core.upstream import UpstreamRequest
from aqvision.models.air_quality import AggregatedReading, GeoQuery, Observation
from aqvision.models.credentials import Credential, CredentialSource
from aqvision.models.summary import SummaryRequest


def test_geo_query_defaults():
    """Test creating a query with only coordinates."""
    query = GeoQuery(latitude=48.85, longitude=2.35)
    assert query.radius_meters == 5000
    assert query.lookback_days == 1


@pytest.mark.parametrize("field,value", [("radius_meters", -1), ("lookback_days", 0)])
def test_geo_query_bounds(field, value):
    """Test that radius and lookback bounds are enforced."""
    with pytest.raises(ValidationError):
        GeoQuery(latitude=0.0, longitude=0.0, **{field: value})


def test_aggregated_reading_serialization():
    """Test the aggregated reading dumps to mean/values/raw/meta."""
    reading = AggregatedReading(
        mean=15.0,
        values=[10.0, 20.0],
        raw=[Observation(value="10", unit="µg/m³", location="Paris", country="FR")],
    )
    data = reading.model_dump()
    assert set(data) == {"mean", "values", "raw", "meta"}
    assert data["raw"][0]["date"] is None
    assert data["meta"] is None


def test_summary_request_accepts_camel_case():
    """Test the summary request reads systemInstruction."""
    request = SummaryRequest.model_validate(
        {"prompt": "Summarize", "systemInstruction": "Be brief"}
    )
    assert request.system_instruction == "Be brief"


def test_frozen_models():
    """Test that credentials and upstream requests cannot be mutated."""
    credential = Credential(name="x", value="", source=CredentialSource.BUILTIN_DEFAULT)
    assert credential.configured is False
    with pytest.raises(ValidationError):
        credential.value = "changed"

    request = UpstreamRequest(url="https://example.test")
    with pytest.raises(ValidationError):
        request.url = "https://other.test"
