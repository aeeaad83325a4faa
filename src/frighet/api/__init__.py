"""
API Layer.

Flask HTTP endpoints and request models.
"""

# The services layer imports the request models from this package,
# so the blueprint is only imported on first access.

__all__ = ["api_bp"]


def __getattr__(name: str):
    """Lazy import to avoid circular dependencies."""
    if name == "api_bp":
        from frighet.api.routes import api_bp
        return api_bp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
