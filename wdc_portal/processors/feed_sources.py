"""
Registry of upstream hazard feeds.

Each feed is a (tag, fetch, transform) triple. Adding a source means appending
a FeedSource here; the aggregation step never changes.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List
from wdc_portal.config import settings
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.alert import Alert, AlertSource, AggregationWindow
from wdc_portal.utils.usgs_earthquake_parser import USGSEarthquakeParser
from wdc_portal.utils.gdacs_alert_parser import GDACSAlertParser
from wdc_portal.utils.firms_fire_parser import FIRMSFireParser
from wdc_portal.utils.acled_event_parser import ACLEDEventParser

RawRow = Dict[str, Any]
FetchFn = Callable[[BackendClient, AggregationWindow], Awaitable[List[RawRow]]]
TransformFn = Callable[[RawRow], Alert]


@dataclass(frozen=True)
class FeedSource:
	tag: AlertSource
	fetch: FetchFn
	transform: TransformFn


def table_fetcher(table: str) -> FetchFn:
	"""
	Build a fetch function reading one backend table within the window.
	
	Args:
		table: Feed table name
	
	Returns:
		Async callable (client, window) -> raw rows
	"""
	async def fetch(client: BackendClient, window: AggregationWindow) -> List[RawRow]:
		return await client.fetch_records_created_after(table, window.start)
	return fetch


def default_feed_sources() -> List[FeedSource]:
	"""The four hazard feeds, reading the table names from settings."""
	return [
		FeedSource(AlertSource.USGS, table_fetcher(settings.usgs_table), USGSEarthquakeParser.to_alert),
		FeedSource(AlertSource.GDACS, table_fetcher(settings.gdacs_table), GDACSAlertParser.to_alert),
		FeedSource(AlertSource.NASA_FIRMS, table_fetcher(settings.firms_table), FIRMSFireParser.to_alert),
		FeedSource(AlertSource.ACLED, table_fetcher(settings.acled_table), ACLEDEventParser.to_alert),
	]
