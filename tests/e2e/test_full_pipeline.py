"""End-to-end tests for the full portfolio pipeline.

These tests exercise the complete flow:
  Records -> Repository -> Valuation -> Portfolio stats -> Pricing quote -> Report

Run with: python -m pytest tests/e2e/test_full_pipeline.py -v
"""

import json
from datetime import date
from decimal import Decimal

import pytest

from equitystek.application.services import (
    DEFAULT_PLANS,
    DirectoryNameResolver,
    InMemoryPortfolioRepository,
    LedgerService,
    ReportExporter,
    SubscriptionService,
    ValuationService,
)
from equitystek.core.exceptions import PlanLimitExceededError
from equitystek.domain.calculator.financial import (
    calculate_growth_insights,
    calculate_investment_metrics,
    estimated_monthly_rent,
)
from equitystek.domain.calculator.valuation import DEFAULT_RATES


class TestFullPipeline:
    """End-to-end pipeline tests."""

    @pytest.fixture
    def backend_records(self):
        """Records shaped like the document backend (camelCase keys, _id)."""
        return {
            "properties": [
                {
                    "_id": "p1",
                    "userId": "u1",
                    "address": "3 Quay Road",
                    "propertyType": "townhouse",
                    "squareFeet": 1800,
                    "bedrooms": 3,
                    "bathrooms": 2.5,
                    "purchasePrice": 350000,
                    "purchaseDate": "2019-06-01",
                },
                {
                    "_id": "p2",
                    "userId": "u1",
                    "address": "18 Canal View",
                    "propertyType": "condominium",
                    "squareFeet": 750,
                    "bedrooms": 1,
                    "bathrooms": 1,
                },
            ],
            "events": [
                {
                    "_id": "e1",
                    "propertyId": "p1",
                    "category": "bathroom",
                    "title": "Bathroom remodel",
                    "cost": 9000,
                    "estimatedValueAdded": 11000,
                    "completedDate": "2024-02-10",
                    "tradePersonId": "t1",
                },
                {
                    "_id": "e2",
                    "propertyId": "p1",
                    "category": "hvac",
                    "title": "Boiler service",
                    "cost": 300,
                    "completedDate": "2024-05-20",
                    "tradePersonId": "t2",
                },
            ],
            "plans": DEFAULT_PLANS,
            "subscriptions": [
                {"userId": "u1", "planId": 1, "propertyCount": 2, "currentPrice": "14.98"},
            ],
        }

    @pytest.fixture
    def repository(self, backend_records):
        return InMemoryPortfolioRepository(**backend_records)

    def test_valuation_to_report(self, repository, tmp_path):
        """Value the portfolio, aggregate it and write the report."""
        service = ValuationService(repository, DEFAULT_RATES)
        valuations = service.value_portfolio("u1")
        assert len(valuations) == 2

        p1 = valuations[0]
        # 1800*200 + 3*15000 + 2.5*10000
        assert p1.base_value == 430_000
        assert p1.maintenance_added_value == 11_000
        assert p1.composite_value == 441_000

        stats = service.portfolio_stats("u1")
        assert stats["property_count"] == 2
        assert stats["total_maintenance_value"] == 11_000

        table = service.comparison_table("u1")
        assert table.loc["3 Quay Road", "With Maintenance"] == 441_000

        exporter = ReportExporter(output_dir=str(tmp_path))
        path = exporter.save_valuations(valuations, prefix="portfolio")
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
        assert payload["summary"]["total_value"] == pytest.approx(stats["total_value"])
        assert [v["property_id"] for v in payload["valuations"]] == ["p1", "p2"]

    def test_adding_property_quote(self, repository):
        """Adding a third property on Basic is quoted; a fourth exceeds the cap."""
        service = SubscriptionService(repository)

        quote = service.quote_property_change("u1", 1)
        assert quote.current_price == Decimal("14.98")
        assert quote.estimated_price == Decimal("19.97")
        assert quote.price_difference == Decimal("4.99")

        with pytest.raises(PlanLimitExceededError, match="up to 3 properties"):
            service.quote_property_change("u1", 2)

    def test_ledger_view(self, repository):
        directory = {"t1": {"fullName": "Bea Tiles"}}
        ledger = LedgerService(repository, DirectoryNameResolver(directory.get))

        table = ledger.events_table("p1")
        assert table["tradesperson"].tolist() == ["Tradesperson #t2", "Bea Tiles"]
        assert ledger.totals("p1")["total_cost"] == 9_300

    def test_investment_view(self, repository):
        """Composite value feeds the investment and growth metrics."""
        valuation = ValuationService(repository, DEFAULT_RATES).value_property("p1")
        prop = repository.get_property("p1")

        rent = estimated_monthly_rent(valuation.composite_value, 5.0)
        metrics = calculate_investment_metrics(
            purchase_price=prop.purchase_price,
            current_value=valuation.composite_value,
            monthly_rent=rent,
        )
        assert metrics["gross_yield_pct"] > 5.0
        assert metrics["monthly_mortgage_payment"] > 0

        growth = calculate_growth_insights(
            prop.purchase_price, prop.purchase_date, valuation.composite_value, date(2024, 6, 1)
        )
        assert growth["growth_value"] == pytest.approx(91_000)
        assert growth["annualized_return_pct"] > 0
        assert growth["doubling_time_years"] is not None
