"""
Portfolio-level aggregates over per-property valuations.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import TypedDict

import pandas as pd

from equitystek.domain.models.valuation import VALUATION_METHODS, Valuation


class PortfolioStats(TypedDict):
    property_count: int
    total_value: float
    total_maintenance_value: float
    value_before_maintenance: float
    value_increase_pct: float


def calculate_portfolio_stats(valuations: Iterable[Valuation]) -> PortfolioStats:
    """Total composite value and the share of it contributed by maintenance.

    value_increase_pct is maintenance value relative to the pre-maintenance
    value, 0 when that value is not positive.
    """
    valuations = list(valuations)
    total_value = sum(v.composite_value for v in valuations)
    total_maintenance = sum(v.maintenance_added_value for v in valuations)
    before = total_value - total_maintenance

    increase = (total_maintenance / before) * 100.0 if before > 0 else 0.0

    return {
        "property_count": len(valuations),
        "total_value": float(total_value),
        "total_maintenance_value": float(total_maintenance),
        "value_before_maintenance": float(before),
        "value_increase_pct": increase,
    }


def build_comparison_frame(
    valuations: Iterable[Valuation],
    labels: Mapping[object, str] | None = None,
) -> pd.DataFrame:
    """Comparison table: one row per property, one column per valuation method.

    Args:
        valuations: Computed valuations
        labels: Optional property_id -> display name (e.g. address)

    Returns:
        DataFrame indexed by property name with method, base, maintenance and
        composite columns
    """
    labels = labels or {}
    rows = []
    for v in valuations:
        row = {"property": labels.get(v.property_id, str(v.property_id))}
        row.update(v.method_values())
        row["Base Value"] = v.base_value
        row["Maintenance Value"] = v.maintenance_added_value
        row["With Maintenance"] = v.composite_value
        rows.append(row)

    columns = ["property", *VALUATION_METHODS.values(), "Base Value", "Maintenance Value", "With Maintenance"]
    return pd.DataFrame(rows, columns=columns).set_index("property")


def build_history_frame(snapshots: Iterable[tuple[date, float]]) -> pd.DataFrame:
    """Valuation history sorted by date with change from the previous value.

    Args:
        snapshots: (date, value) pairs in any order

    Returns:
        DataFrame with date, value, change and change_pct columns (first row 0)
    """
    df = pd.DataFrame(list(snapshots), columns=["date", "value"])
    if df.empty:
        return df.assign(change=pd.Series(dtype=float), change_pct=pd.Series(dtype=float))

    df = df.sort_values("date", kind="stable").reset_index(drop=True)
    df["value"] = df["value"].astype(float)
    df["change"] = df["value"].diff().fillna(0.0)
    df["change_pct"] = (df["value"].pct_change() * 100.0).fillna(0.0)
    return df
