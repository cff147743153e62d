"""Property data model.

A property record holds the physical attributes the valuation calculator
works from. It is owned by the storage layer and read-only here.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field


class PropertyType(str, Enum):
    """Property categories tracked by the application."""

    SINGLE_FAMILY = "single_family"
    CONDOMINIUM = "condominium"
    TOWNHOUSE = "townhouse"
    MULTI_FAMILY = "multi_family"
    COMMERCIAL = "commercial"


class PropertyAttributes(BaseModel):
    """Physical attributes of a property.

    Accepts both snake_case keys and the camelCase keys stored by the
    document backend. square_feet may be missing on stored records; the
    valuation calculator rejects such records at computation time.
    """

    # Identity
    id: int | str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    owner_id: int | str | None = Field(
        None, validation_alias=AliasChoices("owner_id", "userId", "user"),
    )
    address: str | None = Field(None, description="Street address")
    property_type: PropertyType = Field(
        default=PropertyType.SINGLE_FAMILY,
        validation_alias=AliasChoices("property_type", "propertyType"),
        description="Property category",
    )

    # Physical characteristics
    square_feet: int | None = Field(
        None, ge=0,
        validation_alias=AliasChoices("square_feet", "squareFeet"),
        description="Living area in sq ft",
    )
    bedrooms: int | None = Field(None, ge=0, description="Number of bedrooms")
    bathrooms: float | None = Field(None, ge=0, description="Number of bathrooms (half baths allowed)")
    year_built: int | None = Field(
        None,
        validation_alias=AliasChoices("year_built", "yearBuilt"),
        description="Construction year",
    )

    # Acquisition
    purchase_price: float | None = Field(
        None, ge=0,
        validation_alias=AliasChoices("purchase_price", "purchasePrice"),
        description="Purchase price in $",
    )
    purchase_date: date | None = Field(
        None,
        validation_alias=AliasChoices("purchase_date", "purchaseDate"),
        description="Purchase date",
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }
