"""Storage-agnostic access to portfolio records.

The calculators never fetch; services read through a PortfolioRepository.
Relational and document backends adapt their rows to the canonical models
(the models accept both snake_case and camelCase keys).
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, Union

from equitystek.core.exceptions import RecordNotFoundError
from equitystek.domain.models.maintenance import MaintenanceEvent
from equitystek.domain.models.property import PropertyAttributes
from equitystek.domain.models.subscription import Subscription, SubscriptionPlan

Key = Union[int, str]


class PortfolioRepository(Protocol):
    """Read interface the services depend on."""

    def get_property(self, property_id: Key) -> PropertyAttributes: ...

    def list_properties(self, owner_id: Key | None = None) -> list[PropertyAttributes]: ...

    def list_maintenance_events(self, property_id: Key) -> list[MaintenanceEvent]: ...

    def get_plan(self, plan_id: Key) -> SubscriptionPlan: ...

    def list_plans(self) -> list[SubscriptionPlan]: ...

    def get_subscription(self, user_id: Key) -> Subscription: ...


def _load(model, records: Iterable[Any]) -> list:
    return [r if isinstance(r, model) else model.model_validate(r) for r in records]


class InMemoryPortfolioRepository:
    """PortfolioRepository over in-process records (tests, embedding, fixtures).

    Accepts models or raw backend rows (mappings).
    """

    def __init__(
        self,
        properties: Iterable[PropertyAttributes | Mapping[str, Any]] = (),
        events: Iterable[MaintenanceEvent | Mapping[str, Any]] = (),
        plans: Iterable[SubscriptionPlan | Mapping[str, Any]] = (),
        subscriptions: Iterable[Subscription | Mapping[str, Any]] = (),
    ):
        self._properties = {str(p.id): p for p in _load(PropertyAttributes, properties)}
        self._events: dict[str, list[MaintenanceEvent]] = defaultdict(list)
        for e in _load(MaintenanceEvent, events):
            self._events[str(e.property_id)].append(e)
        self._plans = {str(p.id): p for p in _load(SubscriptionPlan, plans)}
        self._subscriptions = {str(s.user_id): s for s in _load(Subscription, subscriptions)}

    def get_property(self, property_id: Key) -> PropertyAttributes:
        try:
            return self._properties[str(property_id)]
        except KeyError:
            raise RecordNotFoundError("Property", property_id) from None

    def list_properties(self, owner_id: Key | None = None) -> list[PropertyAttributes]:
        props = list(self._properties.values())
        if owner_id is None:
            return props
        return [p for p in props if str(p.owner_id) == str(owner_id)]

    def list_maintenance_events(self, property_id: Key) -> list[MaintenanceEvent]:
        return list(self._events.get(str(property_id), []))

    def get_plan(self, plan_id: Key) -> SubscriptionPlan:
        try:
            return self._plans[str(plan_id)]
        except KeyError:
            raise RecordNotFoundError("Subscription plan", plan_id) from None

    def list_plans(self) -> list[SubscriptionPlan]:
        return list(self._plans.values())

    def get_subscription(self, user_id: Key) -> Subscription:
        try:
            return self._subscriptions[str(user_id)]
        except KeyError:
            raise RecordNotFoundError("Subscription", user_id) from None
