"""
Pytest configuration and fixtures.
"""
import httpx
import pytest
from unittest.mock import AsyncMock
from datetime import datetime, timezone
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.alert import Alert, AlertSource


@pytest.fixture
def mock_backend_client():
	"""Mock backend client."""
	client = AsyncMock(spec=BackendClient)
	client.close = AsyncMock()
	return client


@pytest.fixture
def usgs_record():
	"""Sample USGS earthquake feature."""
	return {
		"id": "us7000n1ab",
		"type": "Feature",
		"properties": {
			"mag": 6.7,
			"place": "45 km SSW of Hualien City, Taiwan",
			"time": 1714564800000,  # 2024-05-01T12:00:00Z
			"title": "M 6.7 - 45 km SSW of Hualien City, Taiwan",
			"url": "https://earthquake.usgs.gov/earthquakes/eventpage/us7000n1ab"
		},
		"geometry": {
			"type": "Point",
			"coordinates": [121.56, 23.63, 34.8]
		},
		"created_at": "2024-05-01T12:05:00+00:00"
	}


@pytest.fixture
def gdacs_record():
	"""Sample GDACS alert row."""
	return {
		"event_id": 1000123,
		"event_type": "Flood Alert",
		"severity_level": 4,
		"location_name": "Quebec, Canada",
		"alert_message": "Orange flood alert for Quebec",
		"event_date": "2024-05-01T08:30:00Z",
		"latitude": 46.81,
		"longitude": -71.21,
		"created_at": "2024-05-01T09:00:00+00:00"
	}


@pytest.fixture
def firms_record():
	"""Sample NASA FIRMS detection."""
	return {
		"id": 88231,
		"latitude": -3.4653,
		"longitude": -62.2159,
		"confidence": 85,
		"acq_date": "2024-05-01",
		"acq_time": "130",
		"frp": 12.4,
		"bright_ti4": 330.1,
		"created_at": "2024-05-01T02:00:00+00:00"
	}


@pytest.fixture
def acled_record():
	"""Sample ACLED event, numeric columns as strings."""
	return {
		"event_id_cnty": "SDN12345",
		"event_type": "Battles",
		"fatalities": "0",
		"event_date": "2024-04-30",
		"latitude": "15.5007",
		"longitude": "32.5599",
		"location": "Khartoum",
		"country": "Sudan",
		"created_at": "2024-05-01T00:10:00+00:00"
	}


@pytest.fixture
def make_alert():
	"""Factory for Alert objects with sensible defaults."""
	def _make_alert(
		source_event_id: str = "evt-1",
		source: AlertSource = AlertSource.USGS,
		severity_level=1,
		start_time=None,
		event_type: str = "Earthquake",
		location_name=None,
		latitude=None,
		longitude=None,
	) -> Alert:
		return Alert(
			id=Alert.build_id(source, source_event_id),
			source_event_id=source_event_id,
			source=source,
			event_type=event_type,
			severity_level=severity_level,
			location_name=location_name,
			latitude=latitude,
			longitude=longitude,
			alert_message="test alert",
			start_time=start_time or datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
		)
	return _make_alert


@pytest.fixture
def http_status_error():
	"""Factory for httpx.HTTPStatusError with an optional JSON body."""
	def _http_status_error(status_code: int = 400, payload=None) -> httpx.HTTPStatusError:
		request = httpx.Request("POST", "http://localhost:54321/auth/v1/token")
		response = httpx.Response(status_code, json=payload if payload is not None else {}, request=request)
		return httpx.HTTPStatusError(f"HTTP {status_code}", request=request, response=response)
	return _http_status_error
