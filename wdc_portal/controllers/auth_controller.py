from fastapi import APIRouter, Depends, status
from wdc_portal.dependencies import get_backend_client
from wdc_portal.exceptions import handle_service_exceptions
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.partner import AuthResult, LoginRequest, PasswordResetRequest, RegisterRequest
from wdc_portal.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthResult)
@handle_service_exceptions
async def login(request: LoginRequest, client: BackendClient = Depends(get_backend_client)):
	"""
	Sign in and return the session token with the partner's enriched user record.
	"""
	return await AuthService.login(client, request)


@router.post("/register", response_model=AuthResult, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def register(request: RegisterRequest, client: BackendClient = Depends(get_backend_client)):
	"""
	Register a partner. The token is null until the email address is confirmed.
	"""
	return await AuthService.register(client, request)


@router.post("/password-reset", status_code=status.HTTP_202_ACCEPTED)
@handle_service_exceptions
async def password_reset(request: PasswordResetRequest, client: BackendClient = Depends(get_backend_client)):
	await AuthService.send_password_reset(client, request.email)
	return {"message": "If the address is registered, a password reset email has been sent."}
