"""Subscription pricing service.

Looks up plans and committed subscriptions and quotes property-count
changes before they are committed. Never mutates a subscription.
"""

from __future__ import annotations

from decimal import Decimal

from equitystek.application.services.repository import Key, PortfolioRepository
from equitystek.core.exceptions import InvalidInputError, PlanLimitExceededError
from equitystek.core.logging import get_logger
from equitystek.domain.calculator.pricing import calculate_subscription_price, quote_price_change
from equitystek.domain.models.subscription import PriceQuote, SubscriptionPlan

log = get_logger(__name__)

# Default catalogue seeded on a fresh install
DEFAULT_PLANS: list[SubscriptionPlan] = [
    SubscriptionPlan(
        id=1,
        name="Basic",
        description="Perfect for individual property owners",
        base_price=Decimal("9.99"),
        price_per_property=Decimal("4.99"),
        max_properties=3,
        features=["Property management", "Basic maintenance tracking", "Simple valuation"],
    ),
    SubscriptionPlan(
        id=2,
        name="Professional",
        description="For property managers and small portfolios",
        base_price=Decimal("19.99"),
        price_per_property=Decimal("3.99"),
        max_properties=10,
        features=[
            "All Basic features",
            "Advanced valuation tools",
            "Document storage",
            "Maintenance scheduling",
        ],
    ),
    SubscriptionPlan(
        id=3,
        name="Enterprise",
        description="For large property portfolios and teams",
        base_price=Decimal("49.99"),
        price_per_property=Decimal("2.99"),
        max_properties=None,
        features=[
            "All Professional features",
            "Team access",
            "API integration",
            "Custom reporting",
            "Priority support",
        ],
    ),
]


class SubscriptionService:
    """Quotes subscription prices for plans held in a repository."""

    def __init__(self, repository: PortfolioRepository):
        self.repository = repository

    def price_for(self, plan_id: Key, property_count: int) -> Decimal:
        """Price of a stored plan for a property count."""
        plan = self.repository.get_plan(plan_id)
        try:
            return calculate_subscription_price(plan, property_count)
        except PlanLimitExceededError as e:
            log.info(
                "plan_limit_exceeded",
                plan=e.plan_name,
                max_properties=e.max_properties,
                requested=e.requested,
            )
            raise

    def quote_for_user(self, user_id: Key, property_count: int) -> PriceQuote:
        """Quote moving a user's subscription to a new property count.

        Raises:
            RecordNotFoundError: no subscription or plan
            PlanLimitExceededError: new count exceeds the plan cap
        """
        subscription = self.repository.get_subscription(user_id)
        plan = self.repository.get_plan(subscription.plan_id)
        try:
            quote = quote_price_change(plan, subscription.property_count, property_count)
        except PlanLimitExceededError as e:
            log.info(
                "plan_limit_exceeded",
                user_id=user_id,
                plan=e.plan_name,
                max_properties=e.max_properties,
                requested=e.requested,
            )
            raise

        if quote.current_price != subscription.current_price:
            log.warning(
                "subscription_price_drift",
                user_id=user_id,
                stored=str(subscription.current_price),
                computed=str(quote.current_price),
            )
        log.info(
            "price_quoted",
            user_id=user_id,
            plan_id=plan.id,
            property_count=property_count,
            difference=str(quote.price_difference),
        )
        return quote

    def quote_property_change(self, user_id: Key, delta: int) -> PriceQuote:
        """Quote the effect of adding (delta > 0) or removing (delta < 0) properties."""
        subscription = self.repository.get_subscription(user_id)
        new_count = subscription.property_count + delta
        if new_count < 1:
            raise InvalidInputError(
                "delta", delta, f"would leave {new_count} properties on the subscription"
            )
        return self.quote_for_user(user_id, new_count)
