from typing import Any, Dict
from wdc_portal.exceptions import AuthenticationError, ServiceError
from wdc_portal.http_client.backend_client import BackendClient, backend_error_message
from wdc_portal.schemas.partner import AuthResult, LoginRequest, RegisterRequest
from wdc_portal.services.partner_service import PartnerService
import httpx
import logging

logger = logging.getLogger(__name__)


class AuthService:
	"""Login, registration and password reset, delegated to the backend's auth API."""
	
	@staticmethod
	async def login(client: BackendClient, request: LoginRequest) -> AuthResult:
		"""
		Sign a partner in with email and password.
		
		Raises:
			AuthenticationError: if the backend rejects the credentials
		"""
		try:
			session = await client.sign_in_with_password(request.email, request.password)
		except httpx.HTTPError as e:
			logger.error(f"Login failed for {request.email}: {str(e)}")
			raise AuthenticationError(backend_error_message(e, "Login failed. Please check your credentials."))
		return await AuthService._build_auth_result(client, session)
	
	@staticmethod
	async def register(client: BackendClient, request: RegisterRequest) -> AuthResult:
		"""
		Register a partner. The name is stored as user metadata.
		
		Raises:
			AuthenticationError: if the backend refuses the registration
		"""
		try:
			session = await client.sign_up(request.email, request.password, data={"name": request.name})
		except httpx.HTTPError as e:
			logger.error(f"Registration failed for {request.email}: {str(e)}")
			raise AuthenticationError(backend_error_message(
				e, "Registration failed. User might already exist or email confirmation is required."
			))
		return await AuthService._build_auth_result(client, session)
	
	@staticmethod
	async def send_password_reset(client: BackendClient, email: str) -> None:
		"""
		Raises:
			ServiceError: if the reset email could not be sent
		"""
		try:
			await client.reset_password_for_email(email)
		except httpx.HTTPError as e:
			logger.error(f"Password reset failed for {email}: {str(e)}")
			raise ServiceError(backend_error_message(e, "Failed to send password reset email."))
	
	@staticmethod
	async def _build_auth_result(client: BackendClient, session: Dict[str, Any]) -> AuthResult:
		"""
		Turn a session payload into an AuthResult, merging in the partner profile.
		
		Sign-up without auto-confirm returns the bare user and no token; the
		profile lookup is skipped in that case.
		"""
		token = session.get("access_token")
		user = session.get("user")
		if user is None:
			user = session if "id" in session else {}
		
		profile = await PartnerService.get_partner_profile(client, token) if token else None
		enriched = {**user, **profile.to_dict()} if profile else dict(user)
		return AuthResult(token=token, user=enriched)
