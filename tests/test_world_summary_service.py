"""
Unit tests for WorldSummaryService.
"""
import pytest
from wdc_portal.exceptions import AuthenticationError, ServiceError
from wdc_portal.schemas.alert import DashboardData, GlobalSummary
from wdc_portal.services.world_summary_service import FALLBACK_MESSAGE, WorldSummaryService


@pytest.fixture
def dashboard_data(make_alert):
	alerts = [make_alert(f"evt-{i}", severity_level=5, location_name=f"Place {i}") for i in range(15)]
	summary = GlobalSummary(
		critical_alerts=15,
		locations_affected_worldwide=15,
		global_severity_level="High Global Severity",
		total_sources=1
	)
	return DashboardData(global_summary=summary, active_alerts=alerts)


class TestGenerateWorldSummary:
	"""Test cases for WorldSummaryService.generate_world_summary."""
	
	@pytest.mark.asyncio
	async def test_sends_summary_and_top_alerts(self, mock_backend_client, dashboard_data):
		mock_backend_client.invoke_function.return_value = {"message": "Severe earthquakes dominate today."}
		
		message = await WorldSummaryService.generate_world_summary(mock_backend_client, dashboard_data, "token-1")
		
		assert message == "Severe earthquakes dominate today."
		call = mock_backend_client.invoke_function.await_args
		assert call.kwargs["access_token"] == "token-1"
		payload = call.kwargs["body"]
		assert payload["globalSummary"]["criticalAlerts"] == 15
		assert len(payload["activeAlerts"]) == 10
		assert payload["activeAlerts"][0]["sourceEventId"] == "evt-0"
	
	@pytest.mark.asyncio
	async def test_requires_token(self, mock_backend_client, dashboard_data):
		with pytest.raises(AuthenticationError):
			await WorldSummaryService.generate_world_summary(mock_backend_client, dashboard_data, None)
		
		mock_backend_client.invoke_function.assert_not_called()
	
	@pytest.mark.asyncio
	async def test_missing_message_falls_back(self, mock_backend_client, dashboard_data):
		mock_backend_client.invoke_function.return_value = {}
		
		message = await WorldSummaryService.generate_world_summary(mock_backend_client, dashboard_data, "token-1")
		
		assert message == FALLBACK_MESSAGE
	
	@pytest.mark.asyncio
	async def test_function_failure(self, mock_backend_client, dashboard_data, http_status_error):
		mock_backend_client.invoke_function.side_effect = http_status_error(500, {"error": "model overloaded"})
		
		with pytest.raises(ServiceError) as exc_info:
			await WorldSummaryService.generate_world_summary(mock_backend_client, dashboard_data, "token-1")
		
		assert exc_info.value.message == "model overloaded"
