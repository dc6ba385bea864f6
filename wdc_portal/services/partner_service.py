from typing import Any, Dict, List, Optional
from wdc_portal.config import settings
from wdc_portal.exceptions import ServiceError, ValidationError
from wdc_portal.http_client.backend_client import BackendClient, backend_error_message
from wdc_portal.schemas.partner import CheckoutSessionRequest, PartnerProfile, PaymentIntentRequest
import httpx
import logging

logger = logging.getLogger(__name__)


class PartnerService:
	"""Partner profile, plans and checkout, all served by the hosted backend."""
	
	@staticmethod
	async def get_partner_profile(client: BackendClient, access_token: str) -> Optional[PartnerProfile]:
		"""
		Fetch the partner's profile, API key and subscriptions.
		
		The profile row is required; a missing API key or failing subscriptions
		lookup only leaves those fields empty.
		
		Args:
			client: Backend client
			access_token: Partner access token
		
		Returns:
			PartnerProfile, or None if the user or profile could not be resolved
		"""
		try:
			user = await client.get_user(access_token)
		except httpx.HTTPError as e:
			logger.error(f"Auth error while resolving partner: {str(e)}")
			return None
		
		user_id = user.get("id") if isinstance(user, dict) else None
		if not user_id:
			logger.warning("Access token did not resolve to a user")
			return None
		
		try:
			profile = await client.select_single("user_profiles", {"id": f"eq.{user_id}"}, access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Profile fetch failed for user {user_id}: {str(e)}")
			return None
		
		api_key_row: Optional[Dict[str, Any]] = None
		try:
			api_key_row = await client.select_single(
				"api_keys",
				{"select": "api_key,plan,status", "user_id": f"eq.{user_id}"},
				access_token=access_token
			)
		except httpx.HTTPError as e:
			logger.error(f"API key fetch failed for user {user_id}: {str(e)}")
		
		subscriptions: List[Dict[str, Any]] = []
		try:
			subscriptions = await client.select("user_subscriptions", {"user_id": f"eq.{user_id}"}, access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Subscriptions fetch failed for user {user_id}: {str(e)}")
		
		return PartnerProfile.model_validate({
			**(profile or {}),
			"api_key": api_key_row.get("api_key") if api_key_row else None,
			"api_plan": api_key_row.get("plan") if api_key_row else None,
			"api_status": api_key_row.get("status") if api_key_row else None,
			"user_subscriptions": subscriptions,
		})
	
	@staticmethod
	async def get_plans(client: BackendClient, access_token: str) -> Any:
		"""
		List the available subscription plans.
		
		Raises:
			ServiceError: if the plans function fails
		"""
		try:
			return await client.invoke_function(settings.plans_function, method="GET", access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Edge function {settings.plans_function} failed: {str(e)}")
			raise ServiceError(backend_error_message(e, "Failed to retrieve plans."))
	
	@staticmethod
	async def create_checkout_session(
		client: BackendClient,
		access_token: str,
		request: CheckoutSessionRequest
	) -> Any:
		"""
		Create a hosted payment checkout session for a plan.
		
		Returns:
			The checkout function's response (session id / redirect URL)
		
		Raises:
			ServiceError: if the checkout function fails
		"""
		body = {
			"planId": request.plan_id,
			"success_url": request.success_url,
			"cancel_url": request.cancel_url,
			"name": request.name,
		}
		try:
			return await client.invoke_function(settings.checkout_function, body=body, access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Edge function {settings.checkout_function} failed: {str(e)}")
			raise ServiceError(backend_error_message(e, "Failed to create checkout session. Please try again."))
	
	@staticmethod
	async def create_payment_intent(
		client: BackendClient,
		access_token: str,
		request: PaymentIntentRequest
	) -> Dict[str, Any]:
		"""
		Create a card payment intent for a plan.
		
		Args:
			client: Backend client
			access_token: Partner access token
			request: Plan, amount in cents and currency
		
		Returns:
			{"clientSecret": ...} used by the frontend to confirm the payment
		
		Raises:
			ValidationError: if the amount is not positive
			ServiceError: if the payment function fails or returns no client secret
		"""
		if request.amount <= 0:
			raise ValidationError(f"Invalid payment amount: {request.amount}")
		
		body = {
			"planId": request.plan_id,
			"amount": request.amount,
			"currency": request.currency.lower(),
		}
		try:
			result = await client.invoke_function(settings.payment_intent_function, body=body, access_token=access_token)
		except httpx.HTTPError as e:
			logger.error(f"Edge function {settings.payment_intent_function} failed: {str(e)}")
			raise ServiceError(backend_error_message(e, "Failed to create payment intent on backend."))
		
		client_secret = result.get("clientSecret") if isinstance(result, dict) else None
		if not client_secret:
			logger.error(f"Edge function {settings.payment_intent_function} returned no client secret")
			raise ServiceError("Failed to create payment intent on backend.")
		return {"clientSecret": client_secret}
