from fastapi import APIRouter, Depends, Query
from typing import Any, Dict, List, Optional
from wdc_portal.dependencies import get_backend_client, get_access_token
from wdc_portal.exceptions import handle_service_exceptions
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.alert import DashboardData, MapMarkers
from wdc_portal.schemas.partner import WorldSummaryResponse
from wdc_portal.services.dashboard_service import DashboardService
from wdc_portal.services.world_summary_service import WorldSummaryService
import logging

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardData)
@handle_service_exceptions
async def get_dashboard(
	hours: Optional[int] = Query(default=None, ge=1, description="Recency window in hours"),
	client: BackendClient = Depends(get_backend_client)
):
	"""
	Get the global summary and the active alerts from every feed.
	
	Always succeeds; feeds that fail are left out and a total failure returns
	an empty snapshot.
	"""
	return await DashboardService.get_global_dashboard_data(client, hours=hours)


@router.get("/trends", response_model=List[Dict[str, Any]])
@handle_service_exceptions
async def get_trends(
	days: Optional[int] = Query(default=None, ge=1, description="Window in days"),
	client: BackendClient = Depends(get_backend_client)
):
	"""
	Get per-day alert counts by event type, oldest day first.
	
	Example:
		[{"date": "2025-01-01", "Earthquake": 3, "Wildfire Warning": 12}]
	"""
	return await DashboardService.get_trending_insights(client, days=days)


@router.get("/map", response_model=MapMarkers)
@handle_service_exceptions
async def get_map_markers(
	hours: Optional[int] = Query(default=None, ge=1),
	client: BackendClient = Depends(get_backend_client)
):
	"""
	Get the geolocated alerts to plot, split into top and other disasters.
	"""
	data = await DashboardService.get_global_dashboard_data(client, hours=hours)
	return DashboardService.get_map_markers(data.active_alerts)


@router.post("/world-summary", response_model=WorldSummaryResponse)
@handle_service_exceptions
async def generate_world_summary(
	client: BackendClient = Depends(get_backend_client),
	access_token: Optional[str] = Depends(get_access_token)
):
	"""
	Generate a short AI-written summary of the current dashboard.
	"""
	data = await DashboardService.get_global_dashboard_data(client)
	message = await WorldSummaryService.generate_world_summary(client, data, access_token)
	return WorldSummaryResponse(message=message)
