"""
Custom exceptions for the frighet contact service.

Business errors map to 4xx responses, infrastructure errors to 5xx.
"""

from typing import Any, Dict, Optional, Sequence


class FrighetError(Exception):
    """Base exception for all frighet errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Business Errors (4xx)
# =============================================================================

class BusinessError(FrighetError):
    """Base exception for client faults (typically 4xx)."""
    pass


class MalformedRequestError(BusinessError):
    """Raised when the request body cannot be decoded into a submission."""

    def __init__(self, reason: str):
        super().__init__(
            f"Malformed request body: {reason}",
            {"reason": reason}
        )
        self.reason = reason


class ValidationError(BusinessError):
    """
    Raised when required submission fields are missing.

    The missing field names are kept for logging only; the message
    returned to the caller stays generic.
    """

    def __init__(self, missing_fields: Sequence[str]):
        super().__init__(
            "Missing required fields",
            {"missing_fields": list(missing_fields)}
        )
        self.missing_fields = tuple(missing_fields)


# =============================================================================
# Infrastructure Errors (5xx)
# =============================================================================

class InfrastructureError(FrighetError):
    """Base exception for infrastructure errors (typically 5xx)."""
    pass


class ConfigurationError(InfrastructureError):
    """Raised when a required configuration is missing."""

    def __init__(self, config_name: str, message: Optional[str] = None):
        msg = message or f"Configuration missing: {config_name}"
        super().__init__(msg, {"config_name": config_name})
        self.config_name = config_name


class ExternalServiceError(InfrastructureError):
    """Raised when an external service call fails."""

    def __init__(
        self,
        service_name: str,
        message: str,
        status_code: Optional[int] = None,
        duration_ms: Optional[int] = None,
    ):
        super().__init__(
            f"{service_name} error: {message}",
            {
                "service_name": service_name,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
        )
        self.service_name = service_name
        self.reason = message
        self.status_code = status_code
        self.duration_ms = duration_ms


class DispatchError(ExternalServiceError):
    """Raised when the notification sender fails to deliver an email."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        duration_ms: Optional[int] = None,
    ):
        super().__init__("Mailjet", message, status_code, duration_ms)
