"""
equitystek - Property Valuation & Subscription Pricing Engine

This package contains the pure calculation core of the Equitystek
portfolio application and the thin services that feed it.

Modules:
    - core: Exceptions, settings and logging
    - domain.models: Pydantic data models for properties, maintenance, valuations and plans
    - domain.calculator: Valuation, pricing, ledger, portfolio and investment calculators
    - application.services: Repository adapters, valuation/subscription services, exporter
"""

__version__ = "1.4.0"
