"""
Contact form draft.

Caller-owned state of the contact form. Every change to the product
type or the weight re-runs the estimator, so the draft always carries
the estimate matching its inputs.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from frighet.core.estimator import Estimate, estimate


ESTIMATE_INPUTS = frozenset({"product_type", "weight"})


@dataclass(frozen=True)
class SubmissionDraft:
    """
    Contact form contents at a point in time.

    Attributes:
        name: Contact name.
        email: Contact email address.
        product_type: Selected product category.
        weight: Weight in kilograms, as typed.
        message: Optional free text.
        estimated_price: Last computed price, or None.
        estimated_time: Last computed time, or None.
    """
    name: str = ""
    email: str = ""
    product_type: str = ""
    weight: str = ""
    message: str = ""
    estimated_price: Optional[float] = None
    estimated_time: Optional[float] = None

    @classmethod
    def empty(cls) -> "SubmissionDraft":
        """Create a cleared draft."""
        return cls()

    @property
    def estimate(self) -> Estimate:
        """Current estimate of the draft."""
        return Estimate(price=self.estimated_price, time=self.estimated_time)

    def update(self, **changes: Any) -> "SubmissionDraft":
        """
        Return a copy of the draft with the given fields changed.

        Raises:
            TypeError: If an estimate field is set directly.
        """
        if "estimated_price" in changes or "estimated_time" in changes:
            raise TypeError("estimates are derived from product_type and weight")

        draft = replace(self, **changes)

        if ESTIMATE_INPUTS.intersection(changes):
            result = estimate(draft.product_type, draft.weight)
            draft = replace(
                draft,
                estimated_price=result.price,
                estimated_time=result.time,
            )

        return draft

    def to_payload(self) -> Dict[str, Any]:
        """Convert to the contact endpoint request body."""
        return {
            "name": self.name,
            "email": self.email,
            "productType": self.product_type,
            "weight": self.weight,
            "message": self.message,
            "estimatedPrice": self.estimated_price,
            "estimatedTime": self.estimated_time,
        }
