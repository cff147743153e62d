"""Maintenance event data model.

One row of a property's maintenance ledger: a completed or scheduled
repair/improvement with its cost and estimated contribution to value.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field


class MaintenanceCategory(str, Enum):
    """Maintenance work categories."""

    ROOF = "roof"
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    HVAC = "hvac"
    APPLIANCES = "appliances"
    FLOORING = "flooring"
    KITCHEN = "kitchen"
    BATHROOM = "bathroom"
    EXTERIOR = "exterior"
    LANDSCAPING = "landscaping"
    OTHER = "other"


class MaintenanceStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    SCHEDULED = "scheduled"


class MaintenanceEvent(BaseModel):
    """A maintenance action recorded against a property."""

    id: int | str | None = Field(None, validation_alias=AliasChoices("id", "_id"))
    property_id: int | str = Field(
        ..., validation_alias=AliasChoices("property_id", "propertyId", "property"),
    )
    category: MaintenanceCategory = Field(default=MaintenanceCategory.OTHER)
    title: str | None = Field(None, description="Short description of the work")

    cost: float = Field(default=0.0, ge=0, description="Cost in $")
    estimated_value_added: float | None = Field(
        None, ge=0,
        validation_alias=AliasChoices("estimated_value_added", "estimatedValueAdded"),
        description="Estimated value added to the property in $",
    )

    completed_date: datetime | None = Field(
        None, validation_alias=AliasChoices("completed_date", "completedDate"),
    )
    trade_person_id: int | str | None = Field(
        None, validation_alias=AliasChoices("trade_person_id", "tradePersonId"),
    )
    status: MaintenanceStatus = Field(default=MaintenanceStatus.COMPLETED)

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def value_added(self) -> float:
        """Estimated value added, 0 when not recorded."""
        return self.estimated_value_added or 0.0
