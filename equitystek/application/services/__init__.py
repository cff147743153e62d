"""Application services."""

from .directory import DirectoryNameResolver, NameResolver, Pending
from .exporter import ReportExporter
from .ledger_service import LedgerService
from .repository import InMemoryPortfolioRepository, PortfolioRepository
from .subscription_service import DEFAULT_PLANS, SubscriptionService
from .valuation_service import ValuationService

__all__ = [
    "DEFAULT_PLANS",
    "DirectoryNameResolver",
    "InMemoryPortfolioRepository",
    "LedgerService",
    "NameResolver",
    "Pending",
    "PortfolioRepository",
    "ReportExporter",
    "SubscriptionService",
    "ValuationService",
]
