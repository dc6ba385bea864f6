from wdc_portal.exceptions.base import (
	PortalException,
	NotFoundError,
	ValidationError,
	AuthenticationError,
	ServiceError,
)
from wdc_portal.exceptions.handler import handle_service_exceptions

__all__ = [
	"PortalException",
	"NotFoundError",
	"ValidationError",
	"AuthenticationError",
	"ServiceError",
	"handle_service_exceptions"
]
