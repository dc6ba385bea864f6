"""
Client for the hosted backend: REST tables, auth and edge functions.
"""
from typing import Any, Dict, List, Optional
from datetime import datetime
import logging
import httpx
from wdc_portal.http_client.base_client import BaseHTTPClient
from wdc_portal.config import settings

logger = logging.getLogger(__name__)


class BackendClient(BaseHTTPClient):
	"""
	Backend-as-a-service API client.
	Every request carries the project's anon key; calls made on behalf of a
	signed-in partner pass their access token instead of the anon bearer.
	"""
	
	def __init__(
		self,
		base_url: Optional[str] = None,
		anon_key: Optional[str] = None,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.anon_key = anon_key or settings.supabase_anon_key
		default_headers = {
			"apikey": self.anon_key,
			"Authorization": f"Bearer {self.anon_key}",
		}
		super().__init__(
			base_url or settings.supabase_url,
			default_headers=default_headers,
			timeout=settings.backend_timeout_seconds,
			max_retries=settings.backend_max_retries,
			transport=transport
		)
	
	@staticmethod
	def _auth_headers(access_token: Optional[str]) -> Dict[str, str]:
		if not access_token:
			return {}
		return {"Authorization": f"Bearer {access_token}"}
	
	# --- REST tables ---
	
	async def select(
		self,
		table: str,
		params: Optional[Dict[str, Any]] = None,
		access_token: Optional[str] = None
	) -> List[Dict[str, Any]]:
		"""
		Select rows from a table.
		
		Args:
			table: Table name
			params: Filter/ordering query parameters (e.g. {"id": "eq.1"})
			access_token: Partner access token for row-level security
		
		Returns:
			List of rows
		"""
		query = {"select": "*", **(params or {})}
		rows = await self.get(f"/rest/v1/{table}", params=query, headers=self._auth_headers(access_token))
		return rows if isinstance(rows, list) else []
	
	async def select_single(
		self,
		table: str,
		params: Dict[str, Any],
		access_token: Optional[str] = None
	) -> Optional[Dict[str, Any]]:
		"""
		Select at most one row from a table.
		
		Returns:
			The first matching row, or None if there is none
		"""
		rows = await self.select(table, {**params, "limit": 1}, access_token=access_token)
		return rows[0] if rows else None
	
	async def fetch_records_created_after(self, table: str, created_after: datetime) -> List[Dict[str, Any]]:
		"""
		Fetch a feed table's rows created after a timestamp, newest first.
		
		Args:
			table: Feed table name
			created_after: Lower bound on created_at (inclusive)
		
		Returns:
			List of raw rows
		"""
		params = {
			"created_at": f"gte.{created_after.isoformat()}",
			"order": "created_at.desc",
		}
		rows = await self.select(table, params)
		logger.info(f"Fetched {len(rows)} rows from {table} created after {created_after.isoformat()}")
		return rows
	
	# --- Auth ---
	
	async def sign_in_with_password(self, email: str, password: str) -> Dict[str, Any]:
		"""
		Exchange email and password for a session.
		
		Returns:
			Session payload with access_token and user
		"""
		return await self.post(
			"/auth/v1/token",
			params={"grant_type": "password"},
			json={"email": email, "password": password}
		)
	
	async def sign_up(self, email: str, password: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
		"""
		Register a new user. `data` is stored as user metadata.
		
		Returns:
			Session payload, or the bare user when email confirmation is pending
		"""
		return await self.post(
			"/auth/v1/signup",
			json={"email": email, "password": password, "data": data or {}}
		)
	
	async def reset_password_for_email(self, email: str) -> None:
		"""Send a password reset email."""
		await self.post("/auth/v1/recover", json={"email": email})
	
	async def get_user(self, access_token: str) -> Dict[str, Any]:
		"""Resolve the user owning an access token."""
		return await self.get("/auth/v1/user", headers=self._auth_headers(access_token))
	
	# --- Edge functions ---
	
	async def invoke_function(
		self,
		name: str,
		method: str = "POST",
		body: Optional[Dict[str, Any]] = None,
		access_token: Optional[str] = None
	) -> Any:
		"""
		Invoke an edge function.
		
		Args:
			name: Deployed function name
			method: GET or POST
			body: JSON body for POST
			access_token: Partner access token
		
		Returns:
			Decoded JSON response
		"""
		endpoint = f"/functions/v1/{name}"
		headers = self._auth_headers(access_token)
		if method.upper() == "GET":
			return await self.get(endpoint, headers=headers)
		return await self.post(endpoint, json=body or {}, headers=headers)


def backend_error_message(error: Exception, default: str) -> str:
	"""
	Best-effort human-readable message from a failed backend call.
	
	Auth and edge-function errors carry their message under one of a few keys.
	"""
	if isinstance(error, httpx.HTTPStatusError):
		try:
			payload = error.response.json()
		except ValueError:
			return default
		if isinstance(payload, dict):
			for key in ("error_description", "msg", "message", "error"):
				value = payload.get(key)
				if isinstance(value, str) and value:
					return value
	return default
