"""
Freeze-drying price and time estimator.

Linear model over product category and batch weight.
Pure business logic with no external dependencies.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, List, Optional, Union


# Minimum charge (RON) and minimum batch duration (hours), regardless of weight
BASE_PRICE = 150.0
BASE_TIME = 10.0

# Averages derived from a full batch
AVG_PRICE_PER_KG = 10.0
AVG_TIME_PER_KG = 0.32

NOT_AVAILABLE = "N/A"


class ProductType(str, Enum):
    """Product categories offered on the contact form."""
    FRUITS_VEGETABLES = "Fruits/Vegetables"
    MEAT_DAIRY = "Meat/Dairy"
    PREPARED_MEALS = "Prepared Meals"
    PHARMACEUTICAL_BIOLOGICAL = "Pharmaceutical/Biological"
    PLANTS_FLOWERS = "Plants/Flowers"
    OTHER = "Other"

    @classmethod
    def choices(cls) -> List[str]:
        """Category labels in display order."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class RateProfile:
    """Multipliers applied to the per-kilogram baseline rates."""
    price_multiplier: float = 1.0
    time_multiplier: float = 1.0


DEFAULT_RATE_PROFILE = RateProfile()

RATE_PROFILES: Dict[ProductType, RateProfile] = {
    ProductType.FRUITS_VEGETABLES: RateProfile(1.0, 1.0),
    ProductType.MEAT_DAIRY: RateProfile(1.0, 1.0),
    ProductType.PREPARED_MEALS: RateProfile(0.9, 0.8),    # meals dry faster
    ProductType.PHARMACEUTICAL_BIOLOGICAL: RateProfile(1.8, 1.2),
    ProductType.PLANTS_FLOWERS: RateProfile(1.1, 1.0),    # delicate
    ProductType.OTHER: DEFAULT_RATE_PROFILE,
}


@dataclass(frozen=True)
class Estimate:
    """
    Result of an estimation.

    Attributes:
        price: Estimated price in RON, or None when inputs are incomplete.
        time: Estimated duration in hours, or None when inputs are incomplete.
    """
    price: Optional[float] = None
    time: Optional[float] = None

    @property
    def is_available(self) -> bool:
        """Check if both values were computed."""
        return self.price is not None and self.time is not None


NO_ESTIMATE = Estimate()


def rate_profile_for(product_type: str) -> RateProfile:
    """
    Look up the rate profile of a product category.

    Unknown categories use the default profile of "Other".
    """
    try:
        return RATE_PROFILES[ProductType(product_type)]
    except ValueError:
        return DEFAULT_RATE_PROFILE


def parse_weight(weight_text: Union[str, float, int, None]) -> Optional[float]:
    """
    Parse a weight in kilograms.

    Args:
        weight_text: Weight as typed in the form, or a number.

    Returns:
        The weight when it is a finite number greater than zero, else None.
    """
    if weight_text is None or isinstance(weight_text, bool):
        return None

    if isinstance(weight_text, str):
        weight_text = weight_text.strip()
        if not weight_text:
            return None

    try:
        weight = float(weight_text)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(weight) or weight <= 0:
        return None
    return weight


def estimate(
    product_type: Optional[str],
    weight_text: Union[str, float, int, None],
) -> Estimate:
    """
    Estimate price and drying time for a batch.

    Incomplete or invalid input is not an error: it yields an empty
    Estimate, meaning no estimate is available yet.

    Args:
        product_type: Product category label.
        weight_text: Batch weight in kilograms.

    Returns:
        Estimate with both values set, or both None.
    """
    if not product_type:
        return NO_ESTIMATE

    weight = parse_weight(weight_text)
    if weight is None:
        return NO_ESTIMATE

    profile = rate_profile_for(product_type)

    price_per_kg = AVG_PRICE_PER_KG * profile.price_multiplier
    time_per_kg = AVG_TIME_PER_KG * profile.time_multiplier

    return Estimate(
        price=BASE_PRICE + weight * price_per_kg,
        time=BASE_TIME + weight * time_per_kg,
    )


def _round_half_up(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def format_price(value: Optional[float]) -> str:
    """Format a price with two decimals, e.g. "195.00 RON"."""
    if value is None:
        return NOT_AVAILABLE
    return f"{_round_half_up(value, 2)} RON"


def format_hours(value: Optional[float]) -> str:
    """Format a duration in whole hours, e.g. "11 hours"."""
    if value is None:
        return NOT_AVAILABLE
    return f"{_round_half_up(value, 0)} hours"
