"""Core exceptions, settings and logging."""

from .exceptions import (
    ConfigurationError,
    DomainWarning,
    EquitystekError,
    InvalidInputError,
    PlanLimitExceededError,
    RecordNotFoundError,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AppSettings",
    "get_settings",
    # Exceptions
    "EquitystekError",
    "InvalidInputError",
    "PlanLimitExceededError",
    "RecordNotFoundError",
    "ConfigurationError",
    "DomainWarning",
]
