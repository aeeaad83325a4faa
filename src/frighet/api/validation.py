"""
API Request Validation.

Uses Pydantic to decode request payloads. Only shape and types are
checked here; required-field presence is a separate step of the
submission service.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SubmissionRequest(BaseModel):
    """Request body for the /api/contact endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    product_type: Optional[str] = Field(default=None, alias="productType")
    weight: Optional[str] = None
    message: Optional[str] = None
    estimated_price: Optional[float] = Field(
        default=None, alias="estimatedPrice", allow_inf_nan=False
    )
    estimated_time: Optional[float] = Field(
        default=None, alias="estimatedTime", allow_inf_nan=False
    )

    @field_validator("weight", mode="before")
    @classmethod
    def weight_as_text(cls, v: Any) -> Any:
        """Accept a bare number for the weight; zero counts as absent."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v) if v else None
        return v

    @model_validator(mode="after")
    def estimates_set_together(self) -> "SubmissionRequest":
        """Price and time come from the same computation."""
        if (self.estimated_price is None) != (self.estimated_time is None):
            raise ValueError("estimatedPrice and estimatedTime must both be set or both be null")
        return self

    def missing_fields(self) -> List[str]:
        """Names of required fields that are absent or blank."""
        required = {
            "name": self.name,
            "email": self.email,
            "productType": self.product_type,
            "weight": self.weight,
        }
        return [key for key, value in required.items() if not (value and value.strip())]


class EstimateQuery(BaseModel):
    """Query string of the /api/estimate endpoint."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    product_type: str = Field(default="", alias="productType", max_length=100)
    weight: str = Field(default="", max_length=50)
