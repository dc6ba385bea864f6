"""
Parser for GDACS multi-hazard alerts.

GDACS rows are stored with dashboard-ready columns, so normalization is a
straight field mapping apart from the severity.
"""
import math
from typing import Any, Dict, Optional
from wdc_portal.schemas.alert import Alert, AlertSource
from wdc_portal.schemas.raw_records import MultiHazardRaw
from wdc_portal.utils.datetime_utils import parse_datetime_to_utc


class GDACSAlertParser:
	"""Parser for turning GDACS alert rows into alerts."""

	MIN_SEVERITY = 1
	MAX_SEVERITY = 5
	
	@staticmethod
	def map_severity(severity: Optional[float]) -> Optional[int]:
		"""
		Bring the feed's severity onto the integer 1-5 scale.
		
		Args:
			severity: Feed severity, possibly fractional (e.g. 2.5)
		
		Returns:
			floor(severity) clamped to 1-5, or None when it is missing or not finite
		"""
		if severity is None or not math.isfinite(severity):
			return None
		level = math.floor(severity)
		return min(max(level, GDACSAlertParser.MIN_SEVERITY), GDACSAlertParser.MAX_SEVERITY)
	
	@staticmethod
	def to_alert(record: Dict[str, Any]) -> Alert:
		raw = MultiHazardRaw.model_validate(record)
		return Alert(
			id=Alert.build_id(AlertSource.GDACS, raw.event_id),
			source_event_id=raw.event_id,
			source=AlertSource.GDACS,
			event_type=raw.event_type,
			latitude=raw.latitude,
			longitude=raw.longitude,
			severity_level=GDACSAlertParser.map_severity(raw.severity_level),
			location_name=raw.location_name,
			alert_message=raw.alert_message,
			start_time=parse_datetime_to_utc(raw.event_date),
		)
