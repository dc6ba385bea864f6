from fastapi import APIRouter, Depends, status
from typing import Any
from wdc_portal.dependencies import get_backend_client, require_access_token
from wdc_portal.exceptions import handle_service_exceptions, NotFoundError
from wdc_portal.http_client.backend_client import BackendClient
from wdc_portal.schemas.partner import CheckoutSessionRequest, PartnerProfile, PaymentIntentRequest
from wdc_portal.services.partner_service import PartnerService

router = APIRouter(prefix="/partner", tags=["partner"])


@router.get("/profile", response_model=PartnerProfile)
@handle_service_exceptions
async def get_profile(
	client: BackendClient = Depends(get_backend_client),
	access_token: str = Depends(require_access_token)
):
	"""
	Get the signed-in partner's profile, API key and subscriptions.
	"""
	profile = await PartnerService.get_partner_profile(client, access_token)
	if profile is None:
		raise NotFoundError("Partner profile", "current user")
	return profile


@router.get("/plans", response_model=Any)
@handle_service_exceptions
async def get_plans(
	client: BackendClient = Depends(get_backend_client),
	access_token: str = Depends(require_access_token)
):
	return await PartnerService.get_plans(client, access_token)


@router.post("/checkout-session", response_model=Any, status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_checkout_session(
	request: CheckoutSessionRequest,
	client: BackendClient = Depends(get_backend_client),
	access_token: str = Depends(require_access_token)
):
	"""
	Create a payment checkout session for the chosen plan.
	"""
	return await PartnerService.create_checkout_session(client, access_token, request)


@router.post("/payment-intent", status_code=status.HTTP_201_CREATED)
@handle_service_exceptions
async def create_payment_intent(
	request: PaymentIntentRequest,
	client: BackendClient = Depends(get_backend_client),
	access_token: str = Depends(require_access_token)
):
	"""
	Create a card payment intent and return its client secret.
	"""
	return await PartnerService.create_payment_intent(client, access_token, request)
