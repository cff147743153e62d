"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Valuation rates (reference market calibration)
    rate_per_sqft: float = Field(default=200.0, ge=0, description="Base value per square foot")
    bedroom_value: float = Field(default=15_000.0, ge=0, description="Value per bedroom")
    bathroom_value: float = Field(default=10_000.0, ge=0, description="Value per bathroom")
    alt_rate_per_sqft: float = Field(default=195.0, ge=0, description="Per-square-foot method rate")

    # Valuation method offsets from the base value
    comparable_offset: float = Field(default=15_000.0, description="Subtracted for comparable sales")
    automated_offset: float = Field(default=20_000.0, description="Subtracted for automated model")
    cost_offset: float = Field(default=10_000.0, description="Added for cost approach")
    income_offset: float = Field(default=5_000.0, description="Added for income approach")

    # Export
    export_dir: str = Field(default="reports", description="Directory for valuation reports")

    model_config = {
        "env_prefix": "EQUITYSTEK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
