"""Data models for equitystek."""

from .maintenance import MaintenanceCategory, MaintenanceEvent, MaintenanceStatus
from .property import PropertyAttributes, PropertyType
from .subscription import PriceQuote, Subscription, SubscriptionPlan
from .valuation import VALUATION_METHODS, Valuation

__all__ = [
    "MaintenanceCategory",
    "MaintenanceEvent",
    "MaintenanceStatus",
    "PropertyAttributes",
    "PropertyType",
    "PriceQuote",
    "Subscription",
    "SubscriptionPlan",
    "VALUATION_METHODS",
    "Valuation",
]
