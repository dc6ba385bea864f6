"""
Raw record shapes, one per upstream feed table.

Rows are validated against their source's model before normalization. Only the
native identifier is required; everything else may be missing and is carried
through as None.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LenientModel(BaseModel):
	"""Ignores unknown columns and reads blank strings as missing values."""
	model_config = ConfigDict(extra="ignore")

	@model_validator(mode="before")
	@classmethod
	def _blank_to_none(cls, data: Any) -> Any:
		# CSV-sourced feeds send "" for empty columns
		if isinstance(data, dict):
			return {
				key: None if isinstance(value, str) and value.strip() == "" else value
				for key, value in data.items()
			}
		return data


class RawRecord(LenientModel):
	"""Base for all raw feed rows."""

	created_at: Optional[str] = None


class SeismicProperties(LenientModel):
	mag: Optional[float] = None
	place: Optional[str] = None
	# Epoch milliseconds
	time: Optional[int] = None
	title: Optional[str] = None
	url: Optional[str] = None


class SeismicGeometry(BaseModel):
	model_config = ConfigDict(extra="ignore")

	type: Optional[str] = None
	# [longitude, latitude, depth]
	coordinates: List[Optional[float]] = Field(default_factory=list)


class SeismicRaw(RawRecord):
	"""USGS earthquake GeoJSON feature."""
	id: str
	properties: SeismicProperties = Field(default_factory=SeismicProperties)
	geometry: Optional[SeismicGeometry] = None


class MultiHazardRaw(RawRecord):
	"""GDACS multi-hazard alert, already carrying dashboard-ready fields."""
	event_id: str
	event_type: Optional[str] = None
	# Usually 1-5, sometimes a fractional alert score
	severity_level: Optional[float] = None
	location_name: Optional[str] = None
	alert_message: Optional[str] = None
	event_date: Optional[str] = None
	latitude: Optional[float] = None
	longitude: Optional[float] = None

	@field_validator("event_id", mode="before")
	@classmethod
	def _stringify_id(cls, value: Any) -> Any:
		# GDACS event ids are numeric
		if isinstance(value, int) and not isinstance(value, bool):
			return str(value)
		return value

	@field_validator("severity_level", mode="before")
	@classmethod
	def _numeric_severity(cls, value: Any) -> Any:
		if isinstance(value, str):
			try:
				return float(value)
			except ValueError:
				return None
		return value


class FireRaw(RawRecord):
	"""NASA FIRMS active-fire detection."""
	id: str
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	# 0-100
	confidence: Optional[float] = None
	# YYYY-MM-DD
	acq_date: Optional[str] = None
	# HHMM, UTC, leading zeros often dropped (e.g. "130" or 130)
	acq_time: Optional[str] = None
	frp: Optional[float] = None
	bright_ti4: Optional[float] = None

	@field_validator("id", "acq_time", mode="before")
	@classmethod
	def _stringify(cls, value: Any) -> Any:
		if isinstance(value, (int, float)) and not isinstance(value, bool):
			return str(int(value))
		return value

	@field_validator("confidence", mode="before")
	@classmethod
	def _numeric_confidence(cls, value: Any) -> Any:
		# VIIRS reports l/n/h instead of a percentage
		if isinstance(value, str):
			try:
				return float(value)
			except ValueError:
				return None
		return value


class ConflictRaw(RawRecord):
	"""ACLED conflict event. Numeric columns are often delivered as strings."""
	event_id_cnty: str
	event_type: Optional[str] = None
	fatalities: Optional[int] = None
	event_date: Optional[str] = None
	latitude: Optional[float] = None
	longitude: Optional[float] = None
	location: Optional[str] = None
	country: Optional[str] = None
