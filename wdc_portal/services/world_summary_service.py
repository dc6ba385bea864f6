from typing import Optional
from wdc_portal.config import settings
from wdc_portal.exceptions import AuthenticationError, ServiceError
from wdc_portal.http_client.backend_client import BackendClient, backend_error_message
from wdc_portal.schemas.alert import DashboardData
import httpx
import logging

logger = logging.getLogger(__name__)

# Only the most recent alerts are sent to the summarizer
MAX_ALERTS_FOR_SUMMARY = 10
FALLBACK_MESSAGE = "Failed to generate a world summary. Please try again later."


class WorldSummaryService:
	"""AI-written summary of the current dashboard, produced by an edge function."""
	
	@staticmethod
	async def generate_world_summary(
		client: BackendClient,
		data: DashboardData,
		access_token: Optional[str]
	) -> str:
		"""
		Ask the summary function for a short description of the world situation.
		
		Args:
			client: Backend client
			data: Current dashboard snapshot
			access_token: Partner access token
		
		Returns:
			The generated message, or a fallback sentence if the function returned none
		
		Raises:
			AuthenticationError: if no access token was given
			ServiceError: if the function call fails
		"""
		if not access_token:
			raise AuthenticationError("Authentication token is required to generate AI summary.")
		
		payload = {
			"globalSummary": data.global_summary.to_dict(),
			"activeAlerts": [alert.to_dict() for alert in data.active_alerts[:MAX_ALERTS_FOR_SUMMARY]],
		}
		try:
			result = await client.invoke_function(settings.world_summary_function, body=payload, access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Edge function {settings.world_summary_function} failed: {str(e)}")
			raise ServiceError(backend_error_message(e, "Failed to generate AI summary from Edge Function."))
		
		message = result.get("message") if isinstance(result, dict) else None
		return message or FALLBACK_MESSAGE
