"""
Maintenance ledger summaries.
Totals and per-category breakdown of maintenance spending and value added.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TypedDict

import pandas as pd

from equitystek.domain.calculator.valuation import EventInput, coerce_events

LEDGER_COLUMNS = ["category", "events", "total_cost", "total_value_added", "value_return"]


class LedgerTotals(TypedDict):
    event_count: int
    total_cost: float
    total_value_added: float
    value_return: float


def value_return_ratio(value_added: float, cost: float) -> float:
    """Value added per dollar spent (0 when nothing was spent)."""
    if cost <= 0:
        return 0.0
    return value_added / cost


def ledger_frame(events: Iterable[EventInput] | None) -> pd.DataFrame:
    """One row per event with category, cost and value added."""
    rows = [
        {
            "id": e.id,
            "property_id": e.property_id,
            "category": e.category.value,
            "status": e.status.value,
            "completed_date": e.completed_date,
            "cost": e.cost,
            "value_added": e.value_added,
        }
        for e in coerce_events(events)
    ]
    return pd.DataFrame(
        rows,
        columns=["id", "property_id", "category", "status", "completed_date", "cost", "value_added"],
    )


def summarize_ledger(events: Iterable[EventInput] | None) -> LedgerTotals:
    """Calculate ledger-wide totals."""
    df = ledger_frame(events)
    if df.empty:
        return {"event_count": 0, "total_cost": 0.0, "total_value_added": 0.0, "value_return": 0.0}

    total_cost = float(df["cost"].sum())
    total_value = float(df["value_added"].sum())
    return {
        "event_count": int(len(df)),
        "total_cost": total_cost,
        "total_value_added": total_value,
        "value_return": value_return_ratio(total_value, total_cost),
    }


def summarize_by_category(events: Iterable[EventInput] | None) -> pd.DataFrame:
    """Per-category totals, sorted by value added (descending)."""
    df = ledger_frame(events)
    if df.empty:
        return pd.DataFrame(columns=LEDGER_COLUMNS)

    grouped = (
        df.groupby("category", as_index=False)
        .agg(events=("cost", "size"), total_cost=("cost", "sum"), total_value_added=("value_added", "sum"))
    )
    grouped["value_return"] = [
        value_return_ratio(v, c)
        for v, c in zip(grouped["total_value_added"], grouped["total_cost"])
    ]
    return (
        grouped.sort_values("total_value_added", ascending=False, kind="stable")
        .reset_index(drop=True)[LEDGER_COLUMNS]
    )
