"""
FastAPI dependencies shared by the routers.
"""
from typing import AsyncIterator, Optional
from fastapi import Depends, Header, HTTPException, status
from wdc_portal.http_client.backend_client import BackendClient


async def get_backend_client() -> AsyncIterator[BackendClient]:
	"""One backend client per request, closed when the response is sent."""
	client = BackendClient()
	try:
		yield client
	finally:
		await client.close()


def get_access_token(authorization: Optional[str] = Header(default=None)) -> Optional[str]:
	"""Extract the bearer token from the Authorization header, if any."""
	if not authorization:
		return None
	scheme, _, token = authorization.partition(" ")
	if scheme.lower() != "bearer" or not token.strip():
		return None
	return token.strip()


def require_access_token(token: Optional[str] = Depends(get_access_token)) -> str:
	if token is None:
		raise HTTPException(
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail="Not authorized, no token"
		)
	return token
