"""Core package - Pure business logic with no external dependencies."""

from frighet.core.draft import SubmissionDraft
from frighet.core.estimator import (
    Estimate,
    ProductType,
    RateProfile,
    estimate,
    format_hours,
    format_price,
    parse_weight,
    rate_profile_for,
)
from frighet.core.exceptions import (
    BusinessError,
    ConfigurationError,
    DispatchError,
    ExternalServiceError,
    FrighetError,
    InfrastructureError,
    MalformedRequestError,
    ValidationError,
)

__all__ = [
    # Draft
    "SubmissionDraft",
    # Estimator
    "Estimate",
    "ProductType",
    "RateProfile",
    "estimate",
    "format_hours",
    "format_price",
    "parse_weight",
    "rate_profile_for",
    # Exceptions
    "BusinessError",
    "ConfigurationError",
    "DispatchError",
    "ExternalServiceError",
    "FrighetError",
    "InfrastructureError",
    "MalformedRequestError",
    "ValidationError",
]
