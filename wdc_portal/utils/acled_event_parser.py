"""
Parser for ACLED conflict events.
"""
from typing import Any, Dict, Optional
from wdc_portal.schemas.alert import Alert, AlertSource
from wdc_portal.schemas.raw_records import ConflictRaw
from wdc_portal.utils.datetime_utils import parse_datetime_to_utc


class ACLEDEventParser:
	"""Parser for turning ACLED events into alerts."""
	
	@staticmethod
	def map_severity(fatalities: Optional[int]) -> int:
		"""
		Map a fatality count to severity.
		
		Args:
			fatalities: Reported fatalities, None treated as 0
		
		Returns:
			1 for no fatalities, 3 for 1-10, 5 for more than 10
		"""
		count = fatalities or 0
		if count <= 0:
			return 1
		elif count <= 10:
			return 3
		return 5
	
	@staticmethod
	def build_location_name(location: Optional[str], country: Optional[str]) -> Optional[str]:
		parts = [part for part in (location, country) if part]
		return ", ".join(parts) if parts else None
	
	@staticmethod
	def build_message(event_type: Optional[str], fatalities: Optional[int]) -> str:
		label = event_type or "Conflict event"
		count = fatalities or 0
		noun = "fatality" if count == 1 else "fatalities"
		return f"{label}: {count} {noun} reported"
	
	@staticmethod
	def to_alert(record: Dict[str, Any]) -> Alert:
		raw = ConflictRaw.model_validate(record)
		return Alert(
			id=Alert.build_id(AlertSource.ACLED, raw.event_id_cnty),
			source_event_id=raw.event_id_cnty,
			source=AlertSource.ACLED,
			event_type=raw.event_type,
			latitude=raw.latitude,
			longitude=raw.longitude,
			severity_level=ACLEDEventParser.map_severity(raw.fatalities),
			location_name=ACLEDEventParser.build_location_name(raw.location, raw.country),
			alert_message=ACLEDEventParser.build_message(raw.event_type, raw.fatalities),
			start_time=parse_datetime_to_utc(raw.event_date),
		)
