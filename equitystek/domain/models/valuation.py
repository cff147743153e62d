"""Valuation result model.

A valuation is a disposable, derived record: five comparison estimates,
the maintenance contribution and the composite headline value.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, Field, model_validator

# Method field -> display label
VALUATION_METHODS = {
    "comparable_sales_value": "Comparable Sales",
    "per_square_foot_value": "Per Square Foot",
    "automated_model_value": "Automated Model",
    "cost_approach_value": "Cost Approach",
    "income_approach_value": "Income Approach",
}


class Valuation(BaseModel):
    """Computed valuation of a single property."""

    property_id: int | str | None = Field(None, description="Valued property")

    # Physical-attribute estimate every method is offset from
    base_value: float = Field(..., description="Base value in $")

    # Comparison methods
    comparable_sales_value: float = Field(..., ge=0)
    per_square_foot_value: float = Field(..., ge=0)
    automated_model_value: float = Field(..., ge=0)
    cost_approach_value: float = Field(..., ge=0)
    income_approach_value: float = Field(..., ge=0)

    # Maintenance contribution and headline value
    maintenance_added_value: float = Field(default=0.0, ge=0)
    composite_value: float = Field(..., description="Equitystek value in $")

    clamped_fields: tuple[str, ...] = Field(
        default=(), description="Method values raised to zero from a negative result"
    )

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def check_composite(self) -> "Valuation":
        expected = self.base_value + self.maintenance_added_value
        if not math.isclose(self.composite_value, expected, rel_tol=1e-9, abs_tol=1e-6):
            raise ValueError(
                f"composite_value {self.composite_value} != base_value + "
                f"maintenance_added_value ({expected})"
            )
        return self

    def method_values(self) -> dict[str, float]:
        """Comparison values keyed by display label."""
        return {label: getattr(self, field) for field, label in VALUATION_METHODS.items()}
