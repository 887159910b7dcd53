from typing import Optional, Any

class BazaarError(Exception):
    """
    Base exception for the marketplace application.
    """
    def __init__(self, message: str, code: str = "INTERNAL_ERROR", status_code: int = 500, details: Optional[Any] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

class AuthenticationError(BazaarError):
    """
    Raised when the caller has no valid identity.
    """
    def __init__(self, message: str = "Authentication failed", details: Optional[Any] = None):
        super().__init__(message, code="AUTHENTICATION_FAILED", status_code=401, details=details)

class ForbiddenError(BazaarError):
    """
    Raised when the caller's role or approval state does not allow the action.
    """
    def __init__(self, message: str = "Access denied", details: Optional[Any] = None):
        super().__init__(message, code="FORBIDDEN", status_code=403, details=details)

class ResourceNotFoundError(BazaarError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, code="NOT_FOUND", status_code=404, details=details)

class DuplicateApplicationError(BazaarError):
    """
    Raised when a user already has a seller application.
    """
    def __init__(self, message: str = "You have already applied to become a seller", details: Optional[Any] = None):
        super().__init__(message, code="DUPLICATE_APPLICATION", status_code=400, details=details)

class InvalidStateTransitionError(BazaarError):
    """
    Raised when a seller application cannot move to the requested status.
    """
    def __init__(self, message: str = "Invalid approval status transition", details: Optional[Any] = None):
        super().__init__(message, code="INVALID_STATE_TRANSITION", status_code=409, details=details)

class ValidationError(BazaarError):
    """
    Raised when input validation fails.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, code="VALIDATION_ERROR", status_code=422, details=details)

class StoreError(BazaarError):
    """
    Raised when the relational store fails. The message is never the driver's.
    """
    def __init__(self, message: str = "A database error occurred", details: Optional[Any] = None):
        super().__init__(message, code="STORE_ERROR", status_code=500, details=details)

class ExternalServiceError(BazaarError):
    """
    Raised when an external service (e.g., the identity provider) fails.
    """
    def __init__(self, message: str = "External service error", details: Optional[Any] = None):
        super().__init__(message, code="EXTERNAL_SERVICE_ERROR", status_code=502, details=details)
