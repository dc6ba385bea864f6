"""
Parser for USGS earthquake GeoJSON features.
"""
import math
from typing import Any, Dict, Optional, Tuple
from wdc_portal.schemas.alert import Alert, AlertSource
from wdc_portal.schemas.raw_records import SeismicRaw
from wdc_portal.utils.datetime_utils import parse_timestamp_ms
import logging

logger = logging.getLogger(__name__)


class USGSEarthquakeParser:
	"""Parser for turning USGS earthquake features into alerts."""

	EVENT_TYPE = "Earthquake"
	
	@staticmethod
	def map_severity(magnitude: Optional[float]) -> Optional[int]:
		"""
		Map a magnitude to the severity scale by truncation.
		
		Args:
			magnitude: Richter/moment magnitude, may be negative for micro-quakes
		
		Returns:
			floor(magnitude), at least 1, or None when magnitude is unknown
		"""
		if magnitude is None:
			return None
		return max(1, math.floor(magnitude))
	
	@staticmethod
	def build_message(magnitude: Optional[float], place: Optional[str]) -> str:
		"""
		Build the human-readable alert message.
		
		Args:
			magnitude: Event magnitude
			place: USGS place description (e.g. "12 km SSW of Town, Country")
		
		Returns:
			Message like "Magnitude 6.7 earthquake - 12 km SSW of Town"
		"""
		if magnitude is None:
			message = "Earthquake of unknown magnitude"
		else:
			message = f"Magnitude {magnitude:.1f} earthquake"
		if place:
			message += f" - {place}"
		return message
	
	@staticmethod
	def parse_coordinates(raw: SeismicRaw) -> Tuple[Optional[float], Optional[float]]:
		"""
		Extract (latitude, longitude) from the feature geometry.
		
		Returns:
			Tuple of latitude and longitude, either may be None
		"""
		if raw.geometry is None or len(raw.geometry.coordinates) < 2:
			return None, None
		longitude, latitude = raw.geometry.coordinates[0], raw.geometry.coordinates[1]
		return latitude, longitude
	
	@staticmethod
	def to_alert(record: Dict[str, Any]) -> Alert:
		"""
		Normalize one USGS feature into an Alert.
		
		Args:
			record: Raw row from the earthquake table
		
		Returns:
			Alert
		
		Raises:
			pydantic.ValidationError: if the row has no usable native id
		"""
		raw = SeismicRaw.model_validate(record)
		properties = raw.properties
		latitude, longitude = USGSEarthquakeParser.parse_coordinates(raw)
		return Alert(
			id=Alert.build_id(AlertSource.USGS, raw.id),
			source_event_id=raw.id,
			source=AlertSource.USGS,
			event_type=USGSEarthquakeParser.EVENT_TYPE,
			latitude=latitude,
			longitude=longitude,
			severity_level=USGSEarthquakeParser.map_severity(properties.mag),
			location_name=properties.place,
			alert_message=USGSEarthquakeParser.build_message(properties.mag, properties.place),
			start_time=parse_timestamp_ms(properties.time),
		)
