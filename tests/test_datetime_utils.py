"""
Unit tests for datetime_utils.
"""
from datetime import datetime, timezone
from wdc_portal.utils.datetime_utils import (
	combine_date_and_hhmm,
	parse_datetime_to_utc,
	parse_timestamp_ms,
)


class TestParseTimestampMs:
	"""Test cases for parse_timestamp_ms."""
	
	def test_parse_epoch_ms(self):
		"""Test epoch milliseconds convert to an aware UTC datetime."""
		result = parse_timestamp_ms(1714564800000)
		assert result == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
	
	def test_parse_none(self):
		"""Test None passes through."""
		assert parse_timestamp_ms(None) is None


class TestParseDatetimeToUtc:
	"""Test cases for parse_datetime_to_utc."""
	
	def test_zulu(self):
		result = parse_datetime_to_utc("2024-05-01T08:30:00Z")
		assert result == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
	
	def test_offset_is_converted_to_utc(self):
		"""Test offsets are normalized to UTC."""
		result = parse_datetime_to_utc("2024-05-01T04:30:00-04:00")
		assert result == datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc)
		assert result.tzinfo == timezone.utc
	
	def test_date_only_is_midnight_utc(self):
		result = parse_datetime_to_utc("2024-04-30")
		assert result == datetime(2024, 4, 30, tzinfo=timezone.utc)
	
	def test_invalid_string_returns_none(self):
		"""Test unparseable strings are logged and return None."""
		assert parse_datetime_to_utc("not a date") is None
	
	def test_none(self):
		assert parse_datetime_to_utc(None) is None


class TestCombineDateAndHhmm:
	"""Test cases for combine_date_and_hhmm."""
	
	def test_three_digit_time_is_zero_padded(self):
		"""Test "130" means 01:30."""
		result = combine_date_and_hhmm("2024-05-01", "130")
		assert result == datetime(2024, 5, 1, 1, 30, 0, tzinfo=timezone.utc)
	
	def test_four_digit_time(self):
		result = combine_date_and_hhmm("2024-05-01", "2359")
		assert result == datetime(2024, 5, 1, 23, 59, 0, tzinfo=timezone.utc)
	
	def test_integer_time(self):
		"""Test integer times are accepted and padded."""
		result = combine_date_and_hhmm("2024-05-01", 5)
		assert result == datetime(2024, 5, 1, 0, 5, 0, tzinfo=timezone.utc)
	
	def test_seconds_are_zero(self):
		result = combine_date_and_hhmm("2024-05-01", "0915")
		assert result.second == 0
		assert result.microsecond == 0
	
	def test_missing_parts_return_none(self):
		"""Test missing date or time yields None."""
		assert combine_date_and_hhmm(None, "0130") is None
		assert combine_date_and_hhmm("2024-05-01", None) is None
		assert combine_date_and_hhmm("2024-05-01", "") is None
	
	def test_invalid_time_returns_none(self):
		"""Test an out-of-range hour yields None instead of raising."""
		assert combine_date_and_hhmm("2024-05-01", "2599") is None
	
	def test_overlong_time_returns_none(self):
		"""Test a time with more than four digits is rejected rather than truncated."""
		assert combine_date_and_hhmm("2024-05-01", "12345") is None
		assert combine_date_and_hhmm("2024-05-01", 12345) is None
