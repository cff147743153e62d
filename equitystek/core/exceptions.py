"""Custom exceptions for equitystek.

Domain-specific exception types for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any


class EquitystekError(Exception):
    """Base exception for all equitystek errors."""
    pass


# --- Input Errors ---

class InvalidInputError(EquitystekError, ValueError):
    """Missing, negative or otherwise invalid calculation input."""

    def __init__(self, param_name: str, value: Any, reason: str = ""):
        self.param_name = param_name
        self.value = value
        self.reason = reason
        msg = f"Invalid input '{param_name}': {value!r}"
        if reason:
            msg += f" - {reason}"
        super().__init__(msg)


# --- Subscription Errors ---

class PlanLimitExceededError(EquitystekError):
    """Property count exceeds the hard cap of a subscription plan.

    User-facing: callers render an "upgrade your plan" prompt from it.
    """

    def __init__(self, plan_name: str, max_properties: int, requested: int):
        self.plan_name = plan_name
        self.max_properties = max_properties
        self.requested = requested
        super().__init__(
            f"This plan only supports up to {max_properties} properties"
        )


# --- Data Errors ---

class RecordNotFoundError(EquitystekError):
    """A property, plan or subscription could not be found in storage."""

    def __init__(self, kind: str, key: Any):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key!r}")


# --- Configuration Errors ---

class ConfigurationError(EquitystekError):
    """Error in application configuration."""
    pass


# --- Warnings ---

class DomainWarning(UserWarning):
    """A derived value fell outside its expected range (e.g. negative valuation)."""
    pass
