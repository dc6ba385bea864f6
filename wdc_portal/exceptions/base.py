from fastapi import status
from typing import Optional

class PortalException(Exception):
	"""
	Base exception class for all portal exceptions.
	All service layer exceptions should inherit from this.
	"""
	def __init__(
		self,
		message: str,
		status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
		detail: Optional[str] = None
	):
		self.message = message
		self.status_code = status_code
		self.detail = detail or message
		super().__init__(self.message)

class NotFoundError(PortalException):
	"""
	Exception raised when a resource is not found.
	Maps to HTTP 404.
	"""
	def __init__(self, resource_type: str, resource_id: str):
		message = f"{resource_type} '{resource_id}' not found"
		super().__init__(
			message=message,
			status_code=status.HTTP_404_NOT_FOUND,
			detail=message
		)

class ValidationError(PortalException):
	"""
	Exception raised when validation fails.
	Maps to HTTP 400.
	"""
	def __init__(self, message: str, detail: Optional[str] = None):
		super().__init__(
			message=message,
			status_code=status.HTTP_400_BAD_REQUEST,
			detail=detail or message
		)

class AuthenticationError(PortalException):
	"""
	Exception raised when the backend rejects credentials or a session token.
	Maps to HTTP 401.
	"""
	def __init__(self, message: str = "User not authenticated."):
		super().__init__(
			message=message,
			status_code=status.HTTP_401_UNAUTHORIZED,
			detail=message
		)

class ServiceError(PortalException):
	"""
	Exception raised when a backend call fails.
	Maps to HTTP 502 by default, but can be customized.
	"""
	def __init__(self, message: str, status_code: int = status.HTTP_502_BAD_GATEWAY):
		super().__init__(
			message=message,
			status_code=status_code,
			detail=message
		)
