from typing import List, Optional
from datetime import datetime, timezone
from wdc_portal.config import settings
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.processors.feed_sources import FeedSource, RawRow, default_feed_sources
from wdc_portal.schemas.alert import Alert, AggregationWindow, DashboardData
from wdc_portal.services.summary_service import SummaryService
import asyncio
import logging

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class AlertAggregationProcessor:
	"""Fans out to every feed, normalizes the rows and builds the dashboard snapshot."""
	
	@staticmethod
	async def fetch_and_aggregate(
		client: BackendClient,
		window: AggregationWindow,
		sources: Optional[List[FeedSource]] = None
	) -> DashboardData:
		"""
		Fetch all feeds concurrently and aggregate them into one snapshot.
		
		A feed that fails or times out contributes nothing; the others are still
		aggregated. This never raises: an unexpected error yields an empty snapshot.
		
		Args:
			client: Backend client used by every feed's fetch
			window: Recency window applied to every feed
			sources: Feeds to query, defaults to the configured registry
		
		Returns:
			DashboardData with alerts sorted newest first and the global summary
		"""
		feed_sources = sources if sources is not None else default_feed_sources()
		try:
			batches = await asyncio.gather(*(
				AlertAggregationProcessor._fetch_source(client, source, window)
				for source in feed_sources
			))
			alerts = AlertAggregationProcessor.sort_by_start_time(
				[alert for batch in batches for alert in batch]
			)
			summary = SummaryService.compute_global_summary(alerts)
			logger.info(
				f"Aggregated {len(alerts)} alerts from {summary.total_sources} sources "
				f"({summary.critical_alerts} critical)"
			)
			return DashboardData(global_summary=summary, active_alerts=alerts)
		except Exception as e:
			logger.error(f"Unexpected error while aggregating alerts, returning empty data: {str(e)}")
			import traceback
			logger.error(traceback.format_exc())
			return DashboardData.empty()
	
	@staticmethod
	async def _fetch_source(client: BackendClient, source: FeedSource, window: AggregationWindow) -> List[Alert]:
		"""
		Fetch and normalize one feed under the configured deadline.
		
		Returns:
			Normalized alerts, or an empty list if the feed failed or timed out
		"""
		timeout = settings.source_fetch_timeout_seconds
		try:
			rows = await asyncio.wait_for(source.fetch(client, window), timeout=timeout)
		except asyncio.TimeoutError:
			logger.warning(f"Fetching {source.tag.value} timed out after {timeout}s, skipping source")
			return []
		except Exception as e:
			logger.error(f"Fetching {source.tag.value} failed, skipping source: {str(e)}")
			return []
		
		return AlertAggregationProcessor.normalize_rows(source, rows)
	
	@staticmethod
	def normalize_rows(source: FeedSource, rows: List[RawRow]) -> List[Alert]:
		"""
		Apply a feed's transform to each row. Rows that cannot be normalized are skipped.
		
		Args:
			source: Feed the rows came from
			rows: Raw rows
		
		Returns:
			List of alerts, in row order
		"""
		alerts: List[Alert] = []
		skipped = 0
		for row in rows:
			try:
				alerts.append(source.transform(row))
			except Exception as e:
				skipped += 1
				logger.warning(f"Skipping malformed {source.tag.value} record: {str(e)}")
		if skipped:
			logger.warning(f"Skipped {skipped} of {len(rows)} {source.tag.value} records")
		return alerts
	
	@staticmethod
	def sort_by_start_time(alerts: List[Alert]) -> List[Alert]:
		"""Newest first; alerts without a start time go last."""
		return sorted(
			alerts,
			key=lambda alert: (alert.start_time is not None, alert.start_time or _OLDEST),
			reverse=True
		)
