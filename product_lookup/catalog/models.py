"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for catalog records and lookup results.

==============================================================================
"""

import math
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from product_lookup.utils.numbers import to_single_precision


class Product(BaseModel):
    """
    Product record held in the catalog.

    Records are frozen: once built, assigning to a field raises a
    ValidationError.

    Attributes:
        name: Product name, used as the lookup key
        weight: Non-negative weight at single precision
        unit: Free-form unit label (e.g., "kg", "lb", "ea")
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Product name")
    weight: float = Field(..., ge=0, allow_inf_nan=False, description="Product weight")
    unit: str = Field(..., description="Unit label")

    @field_validator("weight")
    @classmethod
    def round_weight(cls, value: float) -> float:
        """Round to float32, rejecting values that overflow it."""
        rounded = to_single_precision(value)
        if not math.isfinite(rounded):
            raise ValueError("weight exceeds single-precision range")
        return rounded


class ProductInfo(BaseModel):
    """Weight and unit copied out of a matching record."""

    model_config = ConfigDict(frozen=True)

    weight: float
    unit: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductInfo":
        """Create lookup result from Product model."""
        return cls(weight=product.weight, unit=product.unit)

    def as_tuple(self) -> Tuple[float, str]:
        return self.weight, self.unit
