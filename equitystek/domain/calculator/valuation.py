"""Property valuation calculator.

Derives a base value from physical attributes, offsets it into five
comparison methods and adds the maintenance ledger's contribution to
obtain the composite (Equitystek) value.

The offsets are placeholders for pluggable valuation models: what matters
is the shape of the output, so every rate lives in ``ValuationRates``.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import ValidationError

from equitystek.core.exceptions import ConfigurationError, DomainWarning, InvalidInputError
from equitystek.core.settings import AppSettings, get_settings
from equitystek.domain.models.maintenance import MaintenanceEvent
from equitystek.domain.models.property import PropertyAttributes
from equitystek.domain.models.valuation import Valuation

PropertyInput = Union[PropertyAttributes, Mapping[str, Any]]
EventInput = Union[MaintenanceEvent, Mapping[str, Any]]


@dataclass(frozen=True)
class ValuationRates:
    """Market calibration for the valuation methods."""
    rate_per_sqft: float = 200.0
    bedroom_value: float = 15_000.0
    bathroom_value: float = 10_000.0
    alt_rate_per_sqft: float = 195.0
    comparable_offset: float = 15_000.0
    automated_offset: float = 20_000.0
    cost_offset: float = 10_000.0
    income_offset: float = 5_000.0

    def __post_init__(self):
        for name in ("rate_per_sqft", "bedroom_value", "bathroom_value", "alt_rate_per_sqft"):
            value = getattr(self, name)
            if value < 0:
                raise ConfigurationError(f"Valuation rate '{name}' must be >= 0, got {value!r}")

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "ValuationRates":
        """Build rates from application settings (environment overrides)."""
        s = settings or get_settings()
        return cls(
            rate_per_sqft=s.rate_per_sqft,
            bedroom_value=s.bedroom_value,
            bathroom_value=s.bathroom_value,
            alt_rate_per_sqft=s.alt_rate_per_sqft,
            comparable_offset=s.comparable_offset,
            automated_offset=s.automated_offset,
            cost_offset=s.cost_offset,
            income_offset=s.income_offset,
        )


DEFAULT_RATES = ValuationRates()


def _validation_reason(exc: ValidationError) -> tuple[str, Any, str]:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ())) or "input"
    return loc, err.get("input"), err.get("msg", "")


def coerce_property(prop: PropertyInput) -> PropertyAttributes:
    if isinstance(prop, PropertyAttributes):
        return prop
    try:
        return PropertyAttributes.model_validate(prop)
    except ValidationError as e:
        raise InvalidInputError(*_validation_reason(e)) from e


def coerce_events(events: Iterable[EventInput] | None) -> list[MaintenanceEvent]:
    result = []
    for i, event in enumerate(events or ()):
        if isinstance(event, MaintenanceEvent):
            result.append(event)
            continue
        try:
            result.append(MaintenanceEvent.model_validate(event))
        except ValidationError as e:
            name, value, reason = _validation_reason(e)
            raise InvalidInputError(f"events[{i}].{name}", value, reason) from e
    return result


def _require_square_feet(prop: PropertyAttributes) -> int:
    if not prop.square_feet or prop.square_feet <= 0:
        raise InvalidInputError(
            "square_feet", prop.square_feet, "a positive living area is required for valuation"
        )
    return prop.square_feet


def calculate_base_value(
    prop: PropertyInput,
    rates: ValuationRates = DEFAULT_RATES,
) -> float:
    """Calculate the physical-attribute base value.

    base = sqft * rate_per_sqft + bedrooms * bedroom_value + bathrooms * bathroom_value

    Args:
        prop: Property attributes (model or mapping)
        rates: Market calibration

    Returns:
        Base value in $

    Raises:
        InvalidInputError: square_feet missing or zero
    """
    prop = coerce_property(prop)
    sqft = _require_square_feet(prop)
    return (
        sqft * rates.rate_per_sqft
        + (prop.bedrooms or 0) * rates.bedroom_value
        + (prop.bathrooms or 0) * rates.bathroom_value
    )


def calculate_maintenance_added_value(events: Iterable[EventInput] | None) -> float:
    """Sum of estimated value added over a maintenance ledger (absent counts as 0)."""
    return float(sum(e.value_added for e in coerce_events(events)))


def calculate_valuation(
    prop: PropertyInput,
    events: Iterable[EventInput] | None = None,
    rates: ValuationRates | None = None,
) -> Valuation:
    """Calculate all valuation methods and the composite value for one property.

    Method values that come out negative are clamped to zero and reported
    with a DomainWarning; this never aborts the computation.

    Args:
        prop: Property attributes (model or mapping)
        events: Maintenance events belonging to this property
        rates: Market calibration (defaults to the reference rates)

    Returns:
        Valuation with the five methods, maintenance contribution and composite

    Raises:
        InvalidInputError: missing square footage or negative cost/value input
    """
    rates = rates or DEFAULT_RATES
    prop = coerce_property(prop)
    ledger = coerce_events(events)
    if prop.id is not None:
        for event in ledger:
            if str(event.property_id) != str(prop.id):
                raise InvalidInputError(
                    "events.property_id", event.property_id,
                    f"event {event.id!r} belongs to another property than {prop.id!r}",
                )

    base_value = calculate_base_value(prop, rates)
    maintenance_added = calculate_maintenance_added_value(ledger)

    methods = {
        "comparable_sales_value": base_value - rates.comparable_offset,
        "per_square_foot_value": prop.square_feet * rates.alt_rate_per_sqft,
        "automated_model_value": base_value - rates.automated_offset,
        "cost_approach_value": base_value + rates.cost_offset,
        "income_approach_value": base_value + rates.income_offset,
    }

    clamped = tuple(name for name, value in methods.items() if value < 0)
    if clamped:
        warnings.warn(
            f"Property {prop.id!r}: negative {', '.join(clamped)} clamped to 0",
            DomainWarning,
            stacklevel=2,
        )
        for name in clamped:
            methods[name] = 0.0

    return Valuation(
        property_id=prop.id,
        base_value=base_value,
        maintenance_added_value=maintenance_added,
        composite_value=base_value + maintenance_added,
        clamped_fields=clamped,
        **methods,
    )
