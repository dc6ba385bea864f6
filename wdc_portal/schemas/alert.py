from enum import Enum
from typing import List, Optional
from datetime import datetime, timedelta, timezone
from pydantic import Field
from wdc_portal.schemas.base import BaseSchema, CamelSchema


class AlertSource(str, Enum):
	"""Upstream feed an alert was normalized from."""
	USGS = "usgs"
	GDACS = "gdacs"
	NASA_FIRMS = "nasa_firms"
	ACLED = "acled"

	@property
	def id_prefix(self) -> str:
		"""Prefix used to build globally unique alert ids."""
		return _ID_PREFIXES[self]


_ID_PREFIXES = {
	AlertSource.USGS: "usgs",
	AlertSource.GDACS: "gdacs",
	AlertSource.NASA_FIRMS: "firms",
	AlertSource.ACLED: "acled",
}


class Alert(CamelSchema):
	# "{source prefix}-{native id}", stable across fetches.
	id: str
	# The upstream feed's own identifier.
	source_event_id: str
	source: AlertSource
	# e.g. "Earthquake", "Wildfire Warning", or the feed's own label.
	event_type: Optional[str] = None
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	# 1-5 ordinal scale shared across sources.
	severity_level: Optional[int] = None
	location_name: Optional[str] = None
	alert_message: Optional[str] = None
	start_time: Optional[datetime] = None

	@staticmethod
	def build_id(source: AlertSource, source_event_id: str) -> str:
		return f"{source.id_prefix}-{source_event_id}"


class GlobalSeverityLevel(str, Enum):
	NONE = "No Active Alerts"
	LOW = "Low Global Severity"
	MODERATE = "Moderate Global Severity"
	HIGH = "High Global Severity"


class GlobalSummary(CamelSchema):
	critical_alerts: int = 0
	locations_affected_worldwide: int = 0
	global_severity_level: GlobalSeverityLevel = GlobalSeverityLevel.NONE
	total_sources: int = 0

	@classmethod
	def empty(cls) -> "GlobalSummary":
		return cls()


class DashboardData(CamelSchema):
	global_summary: GlobalSummary = Field(default_factory=GlobalSummary.empty)
	active_alerts: List[Alert] = Field(default_factory=list)

	@classmethod
	def empty(cls) -> "DashboardData":
		return cls()


class MapMarkers(CamelSchema):
	"""Geolocated alerts split into highlighted and secondary map markers."""
	top_disasters: List[Alert] = Field(default_factory=list)
	other_disasters: List[Alert] = Field(default_factory=list)


class AggregationWindow(BaseSchema):
	"""Recency filter applied to every source fetch ("created after start")."""
	start: datetime

	@classmethod
	def last(cls, hours: int = 0, days: int = 0) -> "AggregationWindow":
		"""Window covering the given amount of time up to now."""
		now = datetime.now(timezone.utc)
		return cls(start=now - timedelta(hours=hours, days=days))
