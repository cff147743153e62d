"""Subscription pricing calculator.

price(plan, count) = base_price + max(0, count - 1) * price_per_property

The first property is covered by the base price; every additional one adds
the same flat marginal rate (no volume tiers).
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union

from pydantic import ValidationError

from equitystek.core.exceptions import InvalidInputError, PlanLimitExceededError
from equitystek.domain.models.subscription import PriceQuote, SubscriptionPlan, to_cents

PlanInput = Union[SubscriptionPlan, Mapping[str, Any]]


def _as_plan(plan: PlanInput) -> SubscriptionPlan:
    if isinstance(plan, SubscriptionPlan):
        return plan
    try:
        return SubscriptionPlan.model_validate(plan)
    except ValidationError as e:
        err = e.errors()[0]
        loc = ".".join(str(p) for p in err.get("loc", ())) or "plan"
        raise InvalidInputError(f"plan.{loc}", err.get("input"), err.get("msg", "")) from e


def _require_count(property_count: Any, name: str = "property_count") -> int:
    # bool is an int subclass but never a property count
    if isinstance(property_count, bool) or not isinstance(property_count, int):
        raise InvalidInputError(name, property_count, "must be an integer")
    if property_count < 1:
        raise InvalidInputError(name, property_count, "a subscription covers at least one property")
    return property_count


def check_plan_capacity(plan: PlanInput, property_count: int) -> None:
    """Ensure a property count fits within the plan's hard cap.

    Raises:
        InvalidInputError: count is not a positive integer
        PlanLimitExceededError: count exceeds plan.max_properties
    """
    plan = _as_plan(plan)
    count = _require_count(property_count)
    if plan.max_properties is not None and count > plan.max_properties:
        raise PlanLimitExceededError(plan.name, plan.max_properties, count)


def _price(plan: SubscriptionPlan, property_count: int) -> Decimal:
    # no cap check: a committed count may already sit above the cap
    additional = max(0, property_count - 1)
    return to_cents(plan.base_price + additional * plan.price_per_property)


def calculate_subscription_price(plan: PlanInput, property_count: int) -> Decimal:
    """Calculate the recurring price of a plan for a property count.

    Args:
        plan: Subscription plan (model or mapping)
        property_count: Number of covered properties (>= 1)

    Returns:
        Price rounded to cents
    """
    plan = _as_plan(plan)
    check_plan_capacity(plan, property_count)
    return _price(plan, property_count)


def quote_price_change(plan: PlanInput, old_count: int, new_count: int) -> PriceQuote:
    """Quote the price effect of moving from old_count to new_count properties.

    The quote is advisory; nothing is committed.

    Raises:
        InvalidInputError: a count is not a positive integer or the plan is invalid
        PlanLimitExceededError: new_count exceeds the plan cap
    """
    plan = _as_plan(plan)
    old_count = _require_count(old_count, "old_count")
    new_count = _require_count(new_count, "new_count")
    check_plan_capacity(plan, new_count)
    return PriceQuote(
        plan_id=plan.id,
        property_count=new_count,
        current_price=_price(plan, old_count),
        estimated_price=_price(plan, new_count),
    )
