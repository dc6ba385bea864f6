from typing import Any, Dict, List
from wdc_portal.schemas.alert import Alert
import pandas as pd

UNKNOWN_EVENT_TYPE = "Unknown"


class TrendService:
	"""Builds the per-day event-type counts charted on the dashboard."""
	
	@staticmethod
	def compute_trends(alerts: List[Alert]) -> List[Dict[str, Any]]:
		"""
		Count alerts per (calendar date, event type).
		
		Each record is {"date": "YYYY-MM-DD", <event type>: count, ...}. Event
		types with no alerts on a date are omitted rather than reported as 0.
		Records are ordered by date ascending. Alerts without a start time are
		ignored.
		
		Args:
			alerts: Normalized alerts
		
		Returns:
			List of trend records
		"""
		rows = [
			{
				"date": alert.start_time.date().isoformat(),
				"event_type": alert.event_type or UNKNOWN_EVENT_TYPE,
			}
			for alert in alerts
			if alert.start_time is not None
		]
		if not rows:
			return []
		
		counts = pd.DataFrame(rows).groupby(["date", "event_type"]).size()
		
		series: List[Dict[str, Any]] = []
		for date, group in counts.groupby(level="date"):
			record: Dict[str, Any] = {"date": date}
			for (_, event_type), count in group.items():
				record[event_type] = int(count)
			series.append(record)
		return series
