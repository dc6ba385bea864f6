from wdc_portal.schemas.alert import (
	Alert,
	AlertSource,
	AggregationWindow,
	DashboardData,
	GlobalSeverityLevel,
	GlobalSummary,
	MapMarkers,
)
from wdc_portal.schemas.raw_records import SeismicRaw, MultiHazardRaw, FireRaw, ConflictRaw
from wdc_portal.schemas.partner import (
	AuthResult,
	CheckoutSessionRequest,
	LoginRequest,
	PartnerProfile,
	PasswordResetRequest,
	PaymentIntentRequest,
	RegisterRequest,
	WorldSummaryResponse,
)

__all__ = [
	"Alert",
	"AlertSource",
	"AggregationWindow",
	"DashboardData",
	"GlobalSeverityLevel",
	"GlobalSummary",
	"MapMarkers",
	"SeismicRaw",
	"MultiHazardRaw",
	"FireRaw",
	"ConflictRaw",
	"AuthResult",
	"CheckoutSessionRequest",
	"LoginRequest",
	"PartnerProfile",
	"PasswordResetRequest",
	"PaymentIntentRequest",
	"RegisterRequest",
	"WorldSummaryResponse",
]
