"""Unit tests for equitystek.domain.calculator.portfolio."""

from datetime import date

import pytest

from equitystek.domain.calculator.portfolio import (
    build_comparison_frame,
    build_history_frame,
    calculate_portfolio_stats,
)
from equitystek.domain.calculator.valuation import calculate_valuation


@pytest.fixture
def valuations(sample_property_data, sample_events_data):
    return [
        calculate_valuation(sample_property_data, sample_events_data),
        calculate_valuation({"id": 2, "square_feet": 1000}, []),
    ]


class TestPortfolioStats:
    """Tests for calculate_portfolio_stats."""

    def test_totals(self, valuations):
        stats = calculate_portfolio_stats(valuations)
        assert stats["property_count"] == 2
        assert stats["total_value"] == 498_000 + 200_000
        assert stats["total_maintenance_value"] == 33_000
        assert stats["value_before_maintenance"] == 665_000
        assert stats["value_increase_pct"] == pytest.approx(33_000 / 665_000 * 100)

    def test_empty_portfolio(self):
        stats = calculate_portfolio_stats([])
        assert stats["total_value"] == 0
        assert stats["value_increase_pct"] == 0.0


class TestComparisonFrame:
    """Tests for build_comparison_frame."""

    def test_rows_and_columns(self, valuations):
        df = build_comparison_frame(valuations, {1: "12 Harbour St"})
        assert list(df.index) == ["12 Harbour St", "2"]
        assert df.loc["12 Harbour St", "Comparable Sales"] == 450_000
        assert df.loc["12 Harbour St", "Per Square Foot"] == 390_000
        assert df.loc["12 Harbour St", "With Maintenance"] == 498_000
        assert df.loc["2", "Maintenance Value"] == 0

    def test_empty(self):
        df = build_comparison_frame([])
        assert df.empty
        assert "Cost Approach" in df.columns


class TestHistoryFrame:
    """Tests for build_history_frame."""

    def test_sorted_with_changes(self):
        df = build_history_frame([
            (date(2024, 1, 1), 110_000),
            (date(2023, 1, 1), 100_000),
            (date(2025, 1, 1), 99_000),
        ])
        assert df["value"].tolist() == [100_000, 110_000, 99_000]
        assert df["change"].tolist() == [0.0, 10_000, -11_000]
        assert df["change_pct"].tolist() == pytest.approx([0.0, 10.0, -10.0])

    def test_empty(self):
        df = build_history_frame([])
        assert df.empty
        assert {"change", "change_pct"} <= set(df.columns)
