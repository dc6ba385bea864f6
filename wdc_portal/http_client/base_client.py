from typing import Optional, Dict, Any
import httpx
from abc import ABC

class BaseHTTPClient(ABC):
	"""
	Base HTTP client class for async API interactions.
	Extended by the concrete backend client.
	"""
	
	def __init__(
		self,
		base_url: str,
		default_headers: Optional[Dict[str, str]] = None,
		timeout: float = 30.0,
		max_retries: int = 3,
		transport: Optional[httpx.AsyncBaseTransport] = None
	):
		self.base_url = base_url.rstrip('/')
		self.default_headers = default_headers or {}
		self.timeout = timeout
		self.max_retries = max(1, max_retries)
		self.client = httpx.AsyncClient(
			base_url=self.base_url,
			headers=self.default_headers,
			timeout=self.timeout,
			transport=transport
		)
	
	async def get(
		self,
		endpoint: str,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Any:
		"""
		Perform a GET request.
		
		Args:
			endpoint: API endpoint (relative to base_url)
			params: Query parameters
			headers: Additional headers (merged with default_headers)
		
		Returns:
			Decoded JSON body (object or array), {} for an empty body
		"""
		merged_headers = {**self.default_headers, **(headers or {})}
		
		for attempt in range(self.max_retries):
			try:
				response = await self.client.get(
					endpoint,
					params=params,
					headers=merged_headers
				)
				response.raise_for_status()
				return response.json() if response.content else {}
			except httpx.HTTPStatusError as e:
				# 4xx will not get better on retry
				if attempt == self.max_retries - 1 or self._is_client_error(e.response.status_code):
					raise
			except httpx.TransportError:
				if attempt == self.max_retries - 1:
					raise
	
	async def post(
		self,
		endpoint: str,
		json: Optional[Any] = None,
		params: Optional[Dict[str, Any]] = None,
		headers: Optional[Dict[str, str]] = None
	) -> Any:
		"""
		Perform a POST request.
		
		Args:
			endpoint: API endpoint (relative to base_url)
			json: JSON body
			params: Query parameters
			headers: Additional headers (merged with default_headers)
		
		Returns:
			Decoded JSON body, {} for an empty body
		"""
		merged_headers = {**self.default_headers, **(headers or {})}
		
		for attempt in range(self.max_retries):
			try:
				response = await self.client.post(
					endpoint,
					json=json,
					params=params,
					headers=merged_headers
				)
				response.raise_for_status()
				return response.json() if response.content else {}
			except httpx.HTTPStatusError as e:
				if attempt == self.max_retries - 1 or self._is_client_error(e.response.status_code):
					raise
			except httpx.TransportError:
				if attempt == self.max_retries - 1:
					raise
	
	@staticmethod
	def _is_client_error(status_code: int) -> bool:
		return 400 <= status_code < 500
	
	async def close(self):
		"""Close the HTTP client."""
		await self.client.aclose()
	
	async def __aenter__(self):
		return self
	
	async def __aexit__(self, exc_type, exc_val, exc_tb):
		await self.close()
