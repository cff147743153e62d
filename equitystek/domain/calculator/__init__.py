"""Pure calculators: valuation, subscription pricing, ledger, portfolio and investment metrics."""

from .pricing import calculate_subscription_price, check_plan_capacity, quote_price_change
from .valuation import (
    DEFAULT_RATES,
    ValuationRates,
    calculate_base_value,
    calculate_maintenance_added_value,
    calculate_valuation,
)

__all__ = [
    "DEFAULT_RATES",
    "ValuationRates",
    "calculate_base_value",
    "calculate_maintenance_added_value",
    "calculate_valuation",
    "calculate_subscription_price",
    "check_plan_capacity",
    "quote_price_change",
]
