from typing import Any, Dict, List, Optional
from wdc_portal.config import settings
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.processors.alert_aggregation_processor import AlertAggregationProcessor
from wdc_portal.processors.feed_sources import FeedSource
from wdc_portal.schemas.alert import Alert, AggregationWindow, DashboardData, MapMarkers
from wdc_portal.services.trend_service import TrendService
import logging

logger = logging.getLogger(__name__)

TOP_DISASTERS_COUNT = 10
OTHER_DISASTERS_COUNT = 30


class DashboardService:
	"""Read-side facade used by the dashboard routes."""
	
	@staticmethod
	async def get_global_dashboard_data(
		client: BackendClient,
		hours: Optional[int] = None,
		sources: Optional[List[FeedSource]] = None
	) -> DashboardData:
		"""
		Alerts created within the last `hours` (default from settings) and their summary.
		"""
		window = AggregationWindow.last(hours=hours or settings.alerts_window_hours)
		return await AlertAggregationProcessor.fetch_and_aggregate(client, window, sources)
	
	@staticmethod
	async def get_trending_insights(
		client: BackendClient,
		days: Optional[int] = None,
		sources: Optional[List[FeedSource]] = None
	) -> List[Dict[str, Any]]:
		"""
		Daily event-type counts over the last `days` (default from settings).
		"""
		window = AggregationWindow.last(days=days or settings.trends_window_days)
		data = await AlertAggregationProcessor.fetch_and_aggregate(client, window, sources)
		return TrendService.compute_trends(data.active_alerts)
	
	@staticmethod
	def get_map_markers(alerts: List[Alert]) -> MapMarkers:
		"""
		Split geolocated alerts into map markers by severity.
		
		Alerts missing either coordinate are left off the map. The 10 most
		severe become top disasters and the next 30 other disasters.
		
		Args:
			alerts: Normalized alerts
		
		Returns:
			MapMarkers
		"""
		located = [
			alert for alert in alerts
			if alert.latitude is not None and alert.longitude is not None
		]
		located.sort(key=lambda alert: alert.severity_level or 0, reverse=True)
		return MapMarkers(
			top_disasters=located[:TOP_DISASTERS_COUNT],
			other_disasters=located[TOP_DISASTERS_COUNT:TOP_DISASTERS_COUNT + OTHER_DISASTERS_COUNT],
		)
