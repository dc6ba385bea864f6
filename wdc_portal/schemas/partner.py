from typing import Any, Dict, List, Optional
from pydantic import ConfigDict, Field
from wdc_portal.schemas.base import BaseSchema


class LoginRequest(BaseSchema):
	email: str
	password: str


class RegisterRequest(BaseSchema):
	name: str
	email: str
	password: str


class PasswordResetRequest(BaseSchema):
	email: str


class AuthResult(BaseSchema):
	# Session access token; None when email confirmation is still pending.
	token: Optional[str] = None
	user: Dict[str, Any] = Field(default_factory=dict)


class PartnerProfile(BaseSchema):
	"""
	A partner's user_profiles row merged with their API key and subscriptions.
	Profile columns are passed through unchanged.
	"""
	model_config = ConfigDict(extra="allow")

	api_key: Optional[str] = None
	api_plan: Optional[str] = None
	api_status: Optional[str] = None
	user_subscriptions: List[Dict[str, Any]] = Field(default_factory=list)


class CheckoutSessionRequest(BaseSchema):
	plan_id: str
	success_url: str
	cancel_url: str
	name: Optional[str] = None


class PaymentIntentRequest(BaseSchema):
	plan_id: str
	# Smallest currency unit (cents)
	amount: int
	currency: str = "usd"


class WorldSummaryResponse(BaseSchema):
	message: str
