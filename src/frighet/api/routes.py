"""
Flask API Routes.

Defines all HTTP endpoints of the contact service.
"""

from typing import Any, Dict, Tuple

from flask import Blueprint, request
from pydantic import ValidationError as PydanticValidationError

from frighet import __version__
from frighet.api.validation import EstimateQuery
from frighet.core.estimator import ProductType, estimate, format_hours, format_price
from frighet.infrastructure.logging import get_logger
from frighet.infrastructure.metrics import get_metrics, metrics_endpoint
from frighet.services import SubmissionService


logger = get_logger(__name__)


api_bp = Blueprint("api", __name__)


def _error_response(
    message: str,
    status_code: int,
    error_type: str = "error",
) -> Tuple[Dict[str, Any], int]:
    """Create standardized error response."""
    return {
        "success": False,
        "message": message,
        "error_type": error_type,
    }, status_code


def _success_response(
    data: Dict[str, Any],
    status_code: int = 200,
) -> Tuple[Dict[str, Any], int]:
    """Create standardized success response."""
    return {
        "success": True,
        **data,
    }, status_code


# ============================================================================
# Health Check
# ============================================================================

@api_bp.route("/health", methods=["GET"])
def health_check() -> Tuple[Dict[str, Any], int]:
    """
    Health check endpoint for container orchestration.

    Returns:
        Health status response.
    """
    return _success_response({
        "status": "healthy",
        "service": "frighet-contact",
        "version": __version__,
    })


@api_bp.route("/", methods=["GET"])
def root() -> Tuple[Dict[str, Any], int]:
    """Root endpoint, same as /health."""
    return health_check()


@api_bp.route("/metrics", methods=["GET"])
def metrics():
    """Prometheus metrics endpoint."""
    return metrics_endpoint()


# ============================================================================
# Estimator Endpoints
# ============================================================================

@api_bp.route("/api/product-types", methods=["GET"])
def product_types() -> Tuple[Dict[str, Any], int]:
    """List the product categories of the contact form."""
    return _success_response({"product_types": ProductType.choices()})


@api_bp.route("/api/estimate", methods=["GET"])
def estimate_preview() -> Tuple[Dict[str, Any], int]:
    """
    Preview the price and time estimate for the form inputs.

    Query Parameters:
        productType (str): Product category.
        weight (str): Weight in kilograms.

    Returns:
        The estimate, with null values while inputs are incomplete.
    """
    try:
        query = EstimateQuery.model_validate(request.args.to_dict())
    except PydanticValidationError as e:
        return _error_response(
            str(e.errors()[0]["msg"]),
            400,
            "validation_error",
        )

    result = estimate(query.product_type, query.weight)
    get_metrics().estimates_total.inc(available=str(result.is_available).lower())

    return _success_response({
        "available": result.is_available,
        "estimatedPrice": result.price,
        "estimatedTime": result.time,
        "formattedPrice": format_price(result.price),
        "formattedTime": format_hours(result.time),
    })


# ============================================================================
# Contact Endpoint
# ============================================================================

@api_bp.route("/api/contact", methods=["POST"])
def contact() -> Tuple[Dict[str, Any], int]:
    """
    Forward a contact form submission by email.

    Request Body:
        name, email, productType, weight (str): Required.
        message (str): Optional.
        estimatedPrice, estimatedTime (float | null): Last estimate.

    Returns:
        The submission outcome.
    """
    outcome = SubmissionService().handle(request.get_data())
    return outcome.to_response()


# ============================================================================
# Error Handlers
# ============================================================================

@api_bp.errorhandler(Exception)
def handle_unexpected_error(error: Exception) -> Tuple[Dict[str, Any], int]:
    """Handle unexpected errors (500)."""
    logger.exception(
        f"Unexpected error: {error}",
        extra={"extra_fields": {"error_type": type(error).__name__}}
    )
    return _error_response(
        "An unexpected error occurred",
        500,
        "internal_error",
    )
