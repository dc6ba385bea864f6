from typing import List, Optional, Set, Tuple
from wdc_portal.config import settings
from wdc_portal.schemas.alert import Alert, AlertSource, GlobalSeverityLevel, GlobalSummary

# Severity at or above which an alert counts as critical
CRITICAL_SEVERITY = 4


class SummaryService:
	"""Derives the dashboard's global summary from a set of alerts."""
	
	@staticmethod
	def classify_global_severity(max_severity: int, has_alerts: bool) -> GlobalSeverityLevel:
		"""
		Map the highest severity seen to the global severity text.
		
		Args:
			max_severity: Highest severity level across all alerts (0 if none had one)
			has_alerts: Whether the collection is non-empty
		
		Returns:
			High for >= 5, Moderate for >= 3, Low otherwise, or No Active Alerts
		"""
		if not has_alerts:
			return GlobalSeverityLevel.NONE
		if max_severity >= 5:
			return GlobalSeverityLevel.HIGH
		elif max_severity >= 3:
			return GlobalSeverityLevel.MODERATE
		return GlobalSeverityLevel.LOW
	
	@staticmethod
	def location_key(alert: Alert) -> Optional[str]:
		"""
		Key identifying where an alert happened.
		
		Returns:
			The location name, else "lat,lon", else None if neither is known
		"""
		if alert.location_name:
			return alert.location_name
		if alert.latitude is not None and alert.longitude is not None:
			return f"{alert.latitude},{alert.longitude}"
		return None
	
	@staticmethod
	def compute_global_summary(alerts: List[Alert]) -> GlobalSummary:
		"""
		Compute the summary in one pass over the alerts.
		
		Critical and source counts consider each upstream event once, even if the
		window returned it several times. Locations and the maximum severity use
		every alert.
		
		Args:
			alerts: Normalized alerts
		
		Returns:
			GlobalSummary
		"""
		seen_events: Set[Tuple[AlertSource, str]] = set()
		sources: Set[AlertSource] = set()
		locations: Set[str] = set()
		critical_alerts = 0
		max_severity = 0
		
		for alert in alerts:
			event_key = (alert.source, alert.source_event_id)
			if event_key not in seen_events:
				seen_events.add(event_key)
				sources.add(alert.source)
				if alert.severity_level is not None and alert.severity_level >= CRITICAL_SEVERITY:
					critical_alerts += 1
			
			location = SummaryService.location_key(alert)
			if location is not None:
				locations.add(location)
			
			if alert.severity_level is not None and alert.severity_level > max_severity:
				max_severity = alert.severity_level
		
		total_sources = len(sources)
		if settings.legacy_total_sources is not None:
			total_sources = settings.legacy_total_sources
		
		return GlobalSummary(
			critical_alerts=critical_alerts,
			locations_affected_worldwide=len(locations),
			global_severity_level=SummaryService.classify_global_severity(max_severity, bool(alerts)),
			total_sources=total_sources,
		)
