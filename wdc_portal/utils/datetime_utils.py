"""
Datetime utility functions.
"""
from typing import Optional, Union
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


def parse_timestamp_ms(timestamp_ms: Optional[int]) -> Optional[datetime]:
	"""
	Convert milliseconds timestamp to datetime.
	
	Args:
		timestamp_ms: Timestamp in milliseconds
	
	Returns:
		datetime object in UTC, or None if timestamp is None
	"""
	if timestamp_ms is None:
		return None
	return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def parse_datetime_to_utc(dt_string: Optional[str]) -> Optional[datetime]:
	"""
	Parse a datetime string to a datetime object in UTC.
	
	Handles formats like:
	- 2025-12-09T04:45:00-08:00 (with timezone offset)
	- 2025-12-09T04:45:00Z (Zulu/UTC)
	- 2025-12-09 (date only, midnight UTC)
	
	Args:
		dt_string: ISO format datetime string or None
	
	Returns:
		datetime object in UTC timezone or None
	"""
	if dt_string is None:
		return None
	try:
		if dt_string.endswith('Z'):
			dt_string = dt_string[:-1] + '+00:00'
		
		dt = datetime.fromisoformat(dt_string)
		
		# Naive values are assumed to already be UTC
		if dt.tzinfo is not None:
			dt = dt.astimezone(timezone.utc)
		else:
			dt = dt.replace(tzinfo=timezone.utc)
		
		return dt
	except (ValueError, AttributeError) as e:
		logger.warning(f"Failed to parse datetime string '{dt_string}': {str(e)}")
		return None


def combine_date_and_hhmm(date_str: Optional[str], hhmm: Optional[Union[str, int]]) -> Optional[datetime]:
	"""
	Combine a YYYY-MM-DD date and an HHMM time-of-day into one UTC instant.
	
	The time is zero-padded to four digits first, so "130" is 01:30 and
	"5" is 00:05. Seconds are always 0. Times longer than four digits
	are rejected.
	
	Args:
		date_str: Date in YYYY-MM-DD format
		hhmm: Time of day as HHMM, possibly without leading zeros
	
	Returns:
		datetime in UTC, or None if either part is missing or invalid
	"""
	if not date_str or hhmm is None or str(hhmm).strip() == "":
		return None
	padded = str(hhmm).strip().zfill(4)
	if len(padded) != 4:
		logger.warning(f"Acquisition time '{hhmm}' is not HHMM, ignoring it")
		return None
	try:
		hour = int(padded[:2])
		minute = int(padded[2:4])
		day = datetime.fromisoformat(date_str.strip())
		return day.replace(hour=hour, minute=minute, second=0, microsecond=0, tzinfo=timezone.utc)
	except ValueError as e:
		logger.warning(f"Failed to combine acquisition date '{date_str}' and time '{hhmm}': {str(e)}")
		return None
