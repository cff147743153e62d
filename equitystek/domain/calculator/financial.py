"""Investment metric functions.

Mortgage, yield and growth calculations for a held property.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TypedDict

import numpy_financial as npf

# Closing costs as a share of purchase price
CLOSING_COST_PCT = 4.0

# Shorter holding periods give meaningless annualised figures
MIN_ANNUALIZE_YEARS = 0.1
DAYS_PER_YEAR = 365.25


@dataclass
class OperatingExpenses:
    """Monthly operating expenses of a rental property."""
    property_tax: float = 0.0
    insurance: float = 0.0
    maintenance: float = 0.0
    management: float = 0.0
    utilities: float = 0.0
    other: float = 0.0

    @property
    def monthly_total(self) -> float:
        return (
            self.property_tax + self.insurance + self.maintenance
            + self.management + self.utilities + self.other
        )

    @property
    def annual_total(self) -> float:
        return self.monthly_total * 12.0


class InvestmentMetrics(TypedDict):
    monthly_mortgage_payment: float
    monthly_cash_flow: float
    cash_on_cash_pct: float
    cap_rate_pct: float
    gross_yield_pct: float
    net_yield_pct: float


class GrowthInsights(TypedDict):
    growth_value: float
    growth_pct: float
    annualized_return_pct: float
    doubling_time_years: float | None


def calculate_monthly_payment(
    principal: float,
    annual_rate_pct: float,
    term_months: int,
) -> float:
    """Calculate monthly mortgage payment (principal + interest).

    Args:
        principal: Loan amount in $
        annual_rate_pct: Annual interest rate as percentage (e.g., 5.5 for 5.5%)
        term_months: Loan term in months

    Returns:
        Monthly payment amount in $
    """
    if principal <= 0 or term_months <= 0:
        return 0.0

    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    if monthly_rate <= 0:
        return principal / term_months

    return float(-npf.pmt(monthly_rate, term_months, principal))


def cap_rate(monthly_rent: float, expenses: OperatingExpenses, current_value: float) -> float:
    """Net operating income over current value, as a percentage."""
    if current_value <= 0:
        return 0.0
    noi = monthly_rent * 12.0 - expenses.annual_total
    return noi / current_value * 100.0


def gross_yield(monthly_rent: float, purchase_price: float) -> float:
    """Annual rent over purchase price, as a percentage."""
    if purchase_price <= 0:
        return 0.0
    return monthly_rent * 12.0 / purchase_price * 100.0


def net_yield(monthly_rent: float, expenses: OperatingExpenses, purchase_price: float) -> float:
    """Annual rent net of operating expenses over purchase price, as a percentage."""
    if purchase_price <= 0:
        return 0.0
    return (monthly_rent * 12.0 - expenses.annual_total) / purchase_price * 100.0


def calculate_investment_metrics(
    purchase_price: float,
    current_value: float,
    monthly_rent: float,
    expenses: OperatingExpenses | None = None,
    loan_amount: float | None = None,
    annual_rate_pct: float = 5.5,
    term_years: int = 30,
) -> InvestmentMetrics:
    """Calculate the headline metrics of a rental investment.

    Args:
        purchase_price: Purchase price in $
        current_value: Current estimated value in $ (e.g. composite valuation)
        monthly_rent: Monthly rental income in $
        expenses: Monthly operating expenses
        loan_amount: Mortgage principal, defaults to 80% of purchase price
        annual_rate_pct: Mortgage rate %
        term_years: Mortgage term in years

    Returns:
        Dict of payment, cash flow and yield metrics (percentages as percent)
    """
    expenses = expenses or OperatingExpenses()
    if loan_amount is None:
        loan_amount = purchase_price * 0.8

    payment = calculate_monthly_payment(loan_amount, annual_rate_pct, term_years * 12)
    monthly_cf = monthly_rent - expenses.monthly_total - payment

    # Cash invested: down payment plus closing costs
    invested = (purchase_price - loan_amount) + purchase_price * CLOSING_COST_PCT / 100.0
    coc = (monthly_cf * 12.0) / invested * 100.0 if invested > 0 else 0.0

    return {
        "monthly_mortgage_payment": payment,
        "monthly_cash_flow": monthly_cf,
        "cash_on_cash_pct": coc,
        "cap_rate_pct": cap_rate(monthly_rent, expenses, current_value),
        "gross_yield_pct": gross_yield(monthly_rent, purchase_price),
        "net_yield_pct": net_yield(monthly_rent, expenses, purchase_price),
    }


def annualized_return(
    start_value: float,
    end_value: float,
    start_date: date,
    end_date: date,
) -> float:
    """Compound annual growth rate between two dated values, as a percentage.

    Returns 0 for holding periods under MIN_ANNUALIZE_YEARS or a
    non-positive start value.
    """
    years = (end_date - start_date).days / DAYS_PER_YEAR
    if years < MIN_ANNUALIZE_YEARS or start_value <= 0 or end_value < 0:
        return 0.0
    return ((end_value / start_value) ** (1.0 / years) - 1.0) * 100.0


def doubling_time(annual_return_pct: float) -> float | None:
    """Years to double at a given annual return (rule of 72); None if not growing."""
    if annual_return_pct <= 0:
        return None
    return 72.0 / annual_return_pct


def estimated_monthly_rent(current_value: float, rental_yield_pct: float) -> float:
    """Monthly rent implied by an annual gross yield."""
    if current_value <= 0 or rental_yield_pct <= 0:
        return 0.0
    return current_value * (rental_yield_pct / 100.0) / 12.0


def calculate_growth_insights(
    purchase_price: float,
    purchase_date: date,
    current_value: float,
    as_of: date,
) -> GrowthInsights:
    """Growth of a property from purchase to its current value.

    Args:
        purchase_price: Purchase price in $
        purchase_date: Purchase date
        current_value: Latest value in $
        as_of: Date of the latest value

    Returns:
        Dict with growth value/percentage, annualised return and doubling time
    """
    if purchase_price <= 0:
        return {
            "growth_value": 0.0,
            "growth_pct": 0.0,
            "annualized_return_pct": 0.0,
            "doubling_time_years": None,
        }

    growth_value = current_value - purchase_price
    annual = annualized_return(purchase_price, current_value, purchase_date, as_of)
    return {
        "growth_value": growth_value,
        "growth_pct": growth_value / purchase_price * 100.0,
        "annualized_return_pct": annual,
        "doubling_time_years": doubling_time(annual),
    }
