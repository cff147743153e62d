"""Pytest fixtures for equitystek tests."""

import os
import sys
from datetime import datetime
from decimal import Decimal

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def sample_property_data():
    """2000 sq ft, 3 bed / 2 bath single-family home."""
    return {
        "id": 1,
        "owner_id": 10,
        "address": "12 Harbour St",
        "property_type": "single_family",
        "square_feet": 2000,
        "bedrooms": 3,
        "bathrooms": 2,
        "year_built": 1995,
        "purchase_price": 420000,
    }


@pytest.fixture
def sample_events_data():
    """Maintenance ledger of property 1."""
    return [
        {
            "id": 100,
            "property_id": 1,
            "category": "roof",
            "title": "Roof replacement",
            "cost": 12000,
            "estimated_value_added": 8000,
            "completed_date": datetime(2024, 3, 1),
            "trade_person_id": 7,
        },
        {
            "id": 101,
            "property_id": 1,
            "category": "kitchen",
            "title": "Kitchen refit",
            "cost": 20000,
            "estimated_value_added": 25000,
            "completed_date": datetime(2024, 8, 15),
        },
        {
            "id": 102,
            "property_id": 1,
            "category": "plumbing",
            "title": "Leak repair",
            "cost": 450,
            "estimated_value_added": None,
            "completed_date": datetime(2024, 9, 2),
            "trade_person_id": 8,
        },
    ]


@pytest.fixture
def sample_plan_data():
    """Plan priced 9.99 for one property plus 5.00 per additional property."""
    return {
        "id": "starter",
        "name": "Starter",
        "base_price": Decimal("9.99"),
        "price_per_property": Decimal("5"),
        "max_properties": 5,
        "features": ["Valuation", "Maintenance tracking"],
    }


@pytest.fixture
def portfolio_records(sample_property_data, sample_events_data, sample_plan_data):
    """Raw records for an in-memory repository: two valuable properties, one unusable."""
    properties = [
        sample_property_data,
        {
            "id": 2,
            "owner_id": 10,
            "address": "4 Mill Lane",
            "property_type": "condominium",
            "square_feet": 900,
            "bedrooms": 1,
            "bathrooms": 1,
        },
        # Stored without a floor area: cannot be valued
        {"id": 3, "owner_id": 10, "address": "Plot 9", "property_type": "commercial"},
        {"id": 4, "owner_id": 20, "address": "77 Elm Rd", "square_feet": 1500, "bedrooms": 2},
    ]
    subscriptions = [
        {"user_id": 10, "plan_id": "starter", "property_count": 2, "current_price": Decimal("14.99")},
    ]
    return {
        "properties": properties,
        "events": sample_events_data,
        "plans": [sample_plan_data],
        "subscriptions": subscriptions,
    }
