"""Maintenance ledger reports for a property."""

from __future__ import annotations

from typing import Optional

import pandas as pd

from equitystek.application.services.directory import NameResolver, Pending
from equitystek.application.services.repository import Key, PortfolioRepository
from equitystek.core.logging import get_logger
from equitystek.domain.calculator.ledger import (
    LedgerTotals,
    ledger_frame,
    summarize_by_category,
    summarize_ledger,
)

log = get_logger(__name__)


class LedgerService:
    """Builds maintenance ledger tables with tradesperson names resolved."""

    def __init__(self, repository: PortfolioRepository, resolver: Optional[NameResolver] = None):
        self.repository = repository
        self.resolver = resolver

    def _name(self, person_id) -> Optional[str]:
        if person_id is None or self.resolver is None:
            return None
        result = self.resolver.resolve_name(person_id)
        return result.placeholder if isinstance(result, Pending) else result

    def events_table(self, property_id: Key) -> pd.DataFrame:
        """All events of a property, newest first, with a tradesperson column."""
        events = self.repository.list_maintenance_events(property_id)
        df = ledger_frame(events)
        df["tradesperson"] = [self._name(e.trade_person_id) for e in events]
        if not df.empty:
            df = df.sort_values("completed_date", ascending=False, na_position="last").reset_index(drop=True)
        return df

    def totals(self, property_id: Key) -> LedgerTotals:
        totals = summarize_ledger(self.repository.list_maintenance_events(property_id))
        log.debug("ledger_totals", property_id=property_id, **totals)
        return totals

    def by_category(self, property_id: Key) -> pd.DataFrame:
        return summarize_by_category(self.repository.list_maintenance_events(property_id))
