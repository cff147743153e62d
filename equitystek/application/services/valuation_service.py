"""Valuation service.

Fetches property records and maintenance ledgers through the repository,
runs the valuation calculator and aggregates portfolio statistics.
"""

from __future__ import annotations

import warnings
from typing import Any, Optional

import pandas as pd

from equitystek.application.services.repository import Key, PortfolioRepository
from equitystek.core.exceptions import DomainWarning, InvalidInputError
from equitystek.core.logging import get_logger
from equitystek.domain.calculator.portfolio import (
    PortfolioStats,
    build_comparison_frame,
    calculate_portfolio_stats,
)
from equitystek.domain.calculator.valuation import ValuationRates, calculate_valuation
from equitystek.domain.models.valuation import Valuation

log = get_logger(__name__)


class ValuationService:
    """Values properties held in a repository."""

    def __init__(self, repository: PortfolioRepository, rates: Optional[ValuationRates] = None):
        """
        Args:
            repository: Source of properties and maintenance events
            rates: Market calibration, defaults to settings-derived rates
        """
        self.repository = repository
        self.rates = rates or ValuationRates.from_settings()

    def value_property(self, property_id: Key) -> Valuation:
        """Value a single property from its stored attributes and ledger.

        DomainWarnings from the calculator are logged and still raised
        through the warnings machinery.

        Raises:
            RecordNotFoundError: unknown property
            InvalidInputError: property cannot be valued
        """
        prop = self.repository.get_property(property_id)
        events = self.repository.list_maintenance_events(property_id)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", DomainWarning)
            try:
                valuation = calculate_valuation(prop, events, self.rates)
            except InvalidInputError as e:
                log.warning(
                    "valuation_failed",
                    property_id=property_id,
                    param=e.param_name,
                    reason=e.reason,
                )
                raise

        for w in caught:
            if issubclass(w.category, DomainWarning):
                log.warning("valuation_clamped", property_id=property_id, detail=str(w.message))
            warnings.warn(w.message, stacklevel=2)

        log.info(
            "valuation_computed",
            property_id=property_id,
            composite_value=valuation.composite_value,
            maintenance_events=len(events),
        )
        return valuation

    def value_portfolio(self, owner_id: Key | None = None) -> list[Valuation]:
        """Value every property of an owner (or all properties).

        Properties that cannot be valued are skipped; each skip is logged.
        """
        valuations = []
        for prop in self.repository.list_properties(owner_id):
            try:
                valuations.append(self.value_property(prop.id))
            except InvalidInputError:
                log.info("valuation_skipped", property_id=prop.id, owner_id=owner_id)
        return valuations

    def portfolio_stats(self, owner_id: Key | None = None) -> PortfolioStats:
        """Dashboard totals for an owner's portfolio."""
        return calculate_portfolio_stats(self.value_portfolio(owner_id))

    def comparison_table(self, owner_id: Key | None = None) -> pd.DataFrame:
        """Method-by-method comparison table, rows labelled by address."""
        props = self.repository.list_properties(owner_id)
        labels: dict[Any, str] = {p.id: p.address or str(p.id) for p in props}
        return build_comparison_frame(self.value_portfolio(owner_id), labels)
