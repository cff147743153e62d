"""Subscription plan, subscription and price quote models.

Currency amounts are Decimals normalised to cents so that price
differences are exact.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from pydantic import AliasChoices, BaseModel, Field, computed_field, field_validator

CENTS = Decimal("0.01")


def to_cents(value: Decimal | float | int | str) -> Decimal:
    """Round a currency amount to cents (half up)."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class SubscriptionPlan(BaseModel):
    """Pricing policy: base price covers one property, each extra one adds a flat rate."""

    id: int | str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    name: str = Field(..., description="Plan name")
    description: str | None = Field(None)

    base_price: Decimal = Field(
        ..., ge=0,
        validation_alias=AliasChoices("base_price", "basePrice"),
        description="Price covering one property",
    )
    price_per_property: Decimal = Field(
        ..., ge=0,
        validation_alias=AliasChoices("price_per_property", "pricePerProperty", "propertyPrice"),
        description="Marginal price per additional property",
    )
    max_properties: int | None = Field(
        None, ge=1,
        validation_alias=AliasChoices("max_properties", "maxProperties"),
        description="Hard cap on properties, None for unlimited",
    )
    features: list[str] = Field(default_factory=list)
    billing_cycle: str = Field(
        default="monthly", validation_alias=AliasChoices("billing_cycle", "billingCycle"),
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @field_validator("base_price", "price_per_property")
    @classmethod
    def round_to_cents(cls, v: Decimal) -> Decimal:
        return to_cents(v)

    @field_validator("features", mode="before")
    @classmethod
    def unwrap_feature_list(cls, v):
        """Relational rows store features as {"featureList": [...]}."""
        if isinstance(v, dict):
            return v.get("featureList", [])
        return v


class Subscription(BaseModel):
    """A user's committed subscription."""

    user_id: int | str = Field(..., validation_alias=AliasChoices("user_id", "userId", "user"))
    plan_id: int | str = Field(..., validation_alias=AliasChoices("plan_id", "planId", "plan"))
    property_count: int = Field(
        default=1, ge=1, validation_alias=AliasChoices("property_count", "propertyCount"),
    )
    current_price: Decimal = Field(
        ..., ge=0, validation_alias=AliasChoices("current_price", "currentPrice"),
    )
    is_active: bool = Field(default=True, validation_alias=AliasChoices("is_active", "isActive"))

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class PriceQuote(BaseModel):
    """Before/after price comparison for a property-count change. Advisory only."""

    plan_id: int | str | None = Field(None)
    property_count: int = Field(..., ge=1, description="Proposed property count")
    current_price: Decimal = Field(..., description="Price under the committed count")
    estimated_price: Decimal = Field(..., description="Price under the proposed count")

    model_config = {
        "frozen": True,
    }

    @computed_field
    @property
    def price_difference(self) -> Decimal:
        """Estimated minus current price."""
        return self.estimated_price - self.current_price
