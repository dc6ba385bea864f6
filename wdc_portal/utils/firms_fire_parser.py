"""
Parser for NASA FIRMS active-fire detections.
"""
import math
from typing import Any, Dict, Optional
from wdc_portal.schemas.alert import Alert, AlertSource
from wdc_portal.schemas.raw_records import FireRaw
from wdc_portal.utils.datetime_utils import combine_date_and_hhmm


class FIRMSFireParser:
	"""Parser for turning FIRMS detections into wildfire alerts."""

	EVENT_TYPE = "Wildfire Warning"
	MAX_SEVERITY = 5
	
	@staticmethod
	def map_severity(confidence: Optional[float]) -> Optional[int]:
		"""
		Map a 0-100 detection confidence onto the 1-5 scale.
		
		floor(confidence / 20) + 1, so 0-19 -> 1, 20-39 -> 2, ..., 80-100 -> 5.
		
		Args:
			confidence: Detection confidence percentage
		
		Returns:
			Severity between 1 and 5, or None when confidence is unknown
		"""
		if confidence is None:
			return None
		severity = math.floor(confidence / 20) + 1
		return min(max(severity, 1), FIRMSFireParser.MAX_SEVERITY)
	
	@staticmethod
	def build_message(confidence: Optional[float], frp: Optional[float]) -> str:
		"""
		Build the human-readable alert message.
		
		Args:
			confidence: Detection confidence percentage
			frp: Fire radiative power in MW
		
		Returns:
			Message string
		"""
		if confidence is None:
			message = "Active fire detected"
		else:
			message = f"Active fire detected with {confidence:.0f}% confidence"
		if frp is not None:
			message += f" (FRP {frp:.1f} MW)"
		return message
	
	@staticmethod
	def to_alert(record: Dict[str, Any]) -> Alert:
		raw = FireRaw.model_validate(record)
		return Alert(
			id=Alert.build_id(AlertSource.NASA_FIRMS, raw.id),
			source_event_id=raw.id,
			source=AlertSource.NASA_FIRMS,
			event_type=FIRMSFireParser.EVENT_TYPE,
			latitude=raw.latitude,
			longitude=raw.longitude,
			severity_level=FIRMSFireParser.map_severity(raw.confidence),
			location_name=None,
			alert_message=FIRMSFireParser.build_message(raw.confidence, raw.frp),
			start_time=combine_date_and_hhmm(raw.acq_date, raw.acq_time),
		)
