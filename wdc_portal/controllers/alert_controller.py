from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from wdc_portal.dependencies import get_backend_client
from wdc_portal.exceptions import handle_service_exceptions
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.alert import Alert, AlertSource
from wdc_portal.services.dashboard_service import DashboardService

router = APIRouter(prefix="/alerts", tags=["alerts"])


@router.get("", response_model=List[Alert])
@handle_service_exceptions
async def get_alerts(
	hours: Optional[int] = Query(default=None, ge=1, description="Recency window in hours"),
	source: Optional[AlertSource] = Query(default=None, description="Only alerts from this feed"),
	client: BackendClient = Depends(get_backend_client)
):
	"""
	Get all active alerts, newest first, optionally restricted to one feed.
	"""
	data = await DashboardService.get_global_dashboard_data(client, hours=hours)
	if source is None:
		return data.active_alerts
	return [alert for alert in data.active_alerts if alert.source == source]
