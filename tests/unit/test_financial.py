"""Unit tests for equitystek.domain.calculator.financial module."""

from datetime import date

import pytest

from equitystek.domain.calculator.financial import (
    OperatingExpenses,
    annualized_return,
    calculate_growth_insights,
    calculate_investment_metrics,
    calculate_monthly_payment,
    cap_rate,
    doubling_time,
    estimated_monthly_rent,
    gross_yield,
    net_yield,
)


class TestCalculateMonthlyPayment:
    """Tests for calculate_monthly_payment function."""

    def test_standard_mortgage(self):
        """$200k over 30 years at 6% is about $1199/month."""
        pmt = calculate_monthly_payment(200_000, 6.0, 360)
        assert abs(pmt - 1199.10) < 0.05

    def test_zero_principal(self):
        assert calculate_monthly_payment(0, 5.5, 360) == 0.0

    def test_zero_rate(self):
        assert calculate_monthly_payment(120_000, 0.0, 120) == 1000.0

    def test_shorter_term_costs_more(self):
        assert calculate_monthly_payment(200_000, 5.5, 180) > calculate_monthly_payment(200_000, 5.5, 360)


class TestYields:
    """Tests for cap rate and yield helpers."""

    def test_expense_totals(self):
        exp = OperatingExpenses(property_tax=200, insurance=100, maintenance=50)
        assert exp.monthly_total == 350
        assert exp.annual_total == 4200

    def test_gross_yield(self):
        assert gross_yield(2000, 400_000) == pytest.approx(6.0)

    def test_net_yield(self):
        exp = OperatingExpenses(property_tax=500)
        assert net_yield(2000, exp, 400_000) == pytest.approx(4.5)

    def test_cap_rate(self):
        exp = OperatingExpenses(insurance=500)
        assert cap_rate(2000, exp, 300_000) == pytest.approx(6.0)

    def test_zero_denominators(self):
        exp = OperatingExpenses()
        assert gross_yield(2000, 0) == 0.0
        assert net_yield(2000, exp, 0) == 0.0
        assert cap_rate(2000, exp, 0) == 0.0


class TestInvestmentMetrics:
    """Tests for calculate_investment_metrics."""

    def test_default_loan_is_80_percent(self):
        m = calculate_investment_metrics(400_000, 450_000, 2500, annual_rate_pct=6.0, term_years=30)
        assert m["monthly_mortgage_payment"] == pytest.approx(
            calculate_monthly_payment(320_000, 6.0, 360)
        )

    def test_cash_on_cash(self):
        """Cash invested: 20% down + 4% closing costs."""
        m = calculate_investment_metrics(100_000, 100_000, 1000, loan_amount=0)
        # No loan: 12000 / (100000 + 4000)
        assert m["monthly_cash_flow"] == 1000
        assert m["cash_on_cash_pct"] == pytest.approx(12_000 / 104_000 * 100)

    def test_cash_flow_subtracts_expenses_and_payment(self):
        exp = OperatingExpenses(property_tax=300, management=200)
        m = calculate_investment_metrics(300_000, 320_000, 2500, expenses=exp)
        assert m["monthly_cash_flow"] == pytest.approx(2500 - 500 - m["monthly_mortgage_payment"])


class TestGrowth:
    """Tests for growth and return insights."""

    def test_annualized_return_doubling(self):
        """Doubling over ~10 years is ~7.18% per year."""
        r = annualized_return(100_000, 200_000, date(2010, 1, 1), date(2020, 1, 1))
        assert 7.1 < r < 7.2

    def test_short_period_is_zero(self):
        assert annualized_return(100_000, 110_000, date(2024, 1, 1), date(2024, 1, 20)) == 0.0

    def test_doubling_time(self):
        assert doubling_time(8.0) == 9.0
        assert doubling_time(0.0) is None
        assert doubling_time(-2.0) is None

    def test_estimated_rent(self):
        assert estimated_monthly_rent(480_000, 5.0) == 2000.0
        assert estimated_monthly_rent(480_000, 0) == 0.0

    def test_growth_insights(self):
        g = calculate_growth_insights(400_000, date(2015, 6, 1), 500_000, date(2025, 6, 1))
        assert g["growth_value"] == 100_000
        assert g["growth_pct"] == pytest.approx(25.0)
        assert g["annualized_return_pct"] > 0
        assert g["doubling_time_years"] == pytest.approx(72 / g["annualized_return_pct"])

    def test_growth_without_purchase_price(self):
        g = calculate_growth_insights(0, date(2015, 6, 1), 500_000, date(2025, 6, 1))
        assert g["growth_value"] == 0.0
        assert g["doubling_time_years"] is None
