"""
Unit tests for BackendClient, run against an in-process httpx transport.
"""
import json
import httpx
import pytest
from datetime import datetime, timezone
from wdc_portal.http_client.backend_client import BackendClient, backend_error_message


class RecordingHandler:
	"""httpx.MockTransport handler that records requests and replays queued responses."""
	
	def __init__(self, *responses: httpx.Response):
		self.responses = list(responses)
		self.requests = []
	
	def __call__(self, request: httpx.Request) -> httpx.Response:
		self.requests.append(request)
		if len(self.responses) > 1:
			return self.responses.pop(0)
		return self.responses[0]


def make_client(handler: RecordingHandler) -> BackendClient:
	return BackendClient(
		base_url="http://backend.test",
		anon_key="anon-key",
		transport=httpx.MockTransport(handler)
	)


class TestTables:
	"""Test cases for table reads."""
	
	@pytest.mark.asyncio
	async def test_fetch_records_created_after(self, usgs_record):
		handler = RecordingHandler(httpx.Response(200, json=[usgs_record]))
		
		async with make_client(handler) as client:
			rows = await client.fetch_records_created_after(
				"usgs_earthquakes", datetime(2024, 5, 1, tzinfo=timezone.utc)
			)
		
		assert rows == [usgs_record]
		request = handler.requests[0]
		assert request.url.path == "/rest/v1/usgs_earthquakes"
		assert request.url.params["select"] == "*"
		assert request.url.params["created_at"] == "gte.2024-05-01T00:00:00+00:00"
		assert request.url.params["order"] == "created_at.desc"
		assert request.headers["apikey"] == "anon-key"
		assert request.headers["authorization"] == "Bearer anon-key"
	
	@pytest.mark.asyncio
	async def test_select_single_with_access_token(self):
		handler = RecordingHandler(httpx.Response(200, json=[{"id": "user-1", "name": "Relief Org"}]))
		
		async with make_client(handler) as client:
			row = await client.select_single("user_profiles", {"id": "eq.user-1"}, access_token="token-1")
		
		assert row == {"id": "user-1", "name": "Relief Org"}
		request = handler.requests[0]
		assert request.url.params["limit"] == "1"
		assert request.headers["authorization"] == "Bearer token-1"
		assert request.headers["apikey"] == "anon-key"
	
	@pytest.mark.asyncio
	async def test_select_single_no_rows(self):
		handler = RecordingHandler(httpx.Response(200, json=[]))
		
		async with make_client(handler) as client:
			assert await client.select_single("user_profiles", {"id": "eq.nobody"}) is None
	
	@pytest.mark.asyncio
	async def test_client_error_is_not_retried(self):
		handler = RecordingHandler(httpx.Response(404, json={"message": "relation does not exist"}))
		
		client = BackendClient(base_url="http://backend.test", anon_key="anon-key", transport=httpx.MockTransport(handler))
		client.max_retries = 3
		with pytest.raises(httpx.HTTPStatusError):
			await client.select("missing_table")
		await client.close()
		
		assert len(handler.requests) == 1
	
	@pytest.mark.asyncio
	async def test_server_error_is_retried(self):
		handler = RecordingHandler(
			httpx.Response(503, json={}),
			httpx.Response(200, json=[{"id": 1}])
		)
		
		client = BackendClient(base_url="http://backend.test", anon_key="anon-key", transport=httpx.MockTransport(handler))
		client.max_retries = 2
		rows = await client.select("gdacs_alerts")
		await client.close()
		
		assert rows == [{"id": 1}]
		assert len(handler.requests) == 2


class TestAuthAndFunctions:
	"""Test cases for auth endpoints and edge functions."""
	
	@pytest.mark.asyncio
	async def test_sign_in_with_password(self):
		session = {"access_token": "token-1", "user": {"id": "user-1"}}
		handler = RecordingHandler(httpx.Response(200, json=session))
		
		async with make_client(handler) as client:
			result = await client.sign_in_with_password("partner@example.org", "pw")
		
		assert result == session
		request = handler.requests[0]
		assert request.method == "POST"
		assert request.url.path == "/auth/v1/token"
		assert request.url.params["grant_type"] == "password"
		assert json.loads(request.content) == {"email": "partner@example.org", "password": "pw"}
	
	@pytest.mark.asyncio
	async def test_sign_up_sends_metadata(self):
		handler = RecordingHandler(httpx.Response(200, json={"id": "user-2"}))
		
		async with make_client(handler) as client:
			await client.sign_up("new@example.org", "pw", data={"name": "New Org"})
		
		body = json.loads(handler.requests[0].content)
		assert handler.requests[0].url.path == "/auth/v1/signup"
		assert body["data"] == {"name": "New Org"}
	
	@pytest.mark.asyncio
	async def test_reset_password_empty_body(self):
		handler = RecordingHandler(httpx.Response(200))
		
		async with make_client(handler) as client:
			await client.reset_password_for_email("partner@example.org")
		
		assert handler.requests[0].url.path == "/auth/v1/recover"
	
	@pytest.mark.asyncio
	async def test_invoke_function_get(self):
		handler = RecordingHandler(httpx.Response(200, json=[{"id": "pro"}]))
		
		async with make_client(handler) as client:
			result = await client.invoke_function("get-plans", method="GET", access_token="token-1")
		
		assert result == [{"id": "pro"}]
		request = handler.requests[0]
		assert request.method == "GET"
		assert request.url.path == "/functions/v1/get-plans"
		assert request.headers["authorization"] == "Bearer token-1"
	
	@pytest.mark.asyncio
	async def test_invoke_function_post(self):
		handler = RecordingHandler(httpx.Response(200, json={"message": "ok"}))
		
		async with make_client(handler) as client:
			result = await client.invoke_function("create-checkout-session", body={"planId": "pro"})
		
		assert result == {"message": "ok"}
		assert json.loads(handler.requests[0].content) == {"planId": "pro"}


class TestBackendErrorMessage:
	"""Test cases for backend_error_message."""
	
	def test_prefers_error_description(self, http_status_error):
		error = http_status_error(400, {"error": "invalid_grant", "error_description": "Invalid login credentials"})
		
		assert backend_error_message(error, "default") == "Invalid login credentials"
	
	def test_msg_key(self, http_status_error):
		assert backend_error_message(http_status_error(422, {"msg": "Password too short"}), "default") == "Password too short"
	
	def test_non_json_body(self):
		request = httpx.Request("GET", "http://backend.test/")
		response = httpx.Response(502, text="Bad Gateway", request=request)
		error = httpx.HTTPStatusError("HTTP 502", request=request, response=response)
		
		assert backend_error_message(error, "default") == "default"
	
	def test_transport_error(self):
		assert backend_error_message(httpx.ConnectError("refused"), "default") == "default"
