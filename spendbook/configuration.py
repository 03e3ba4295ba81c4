"""Mini README: Centralised configuration for the Spendbook presentation layer.

Structure:
    * SpendbookSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor so validation happens once per process.

Usage:
    Only the presenter and CLI read settings. The ledger and aggregation code
    never consult the environment, which keeps them deterministic under test.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .logging_utils import resolve_level


class SpendbookSettings(BaseSettings):
    """Runtime configuration for rendering and logging."""

    environment: str = Field(
        "development",
        description="Environment label, used only for log context.",
    )
    log_level: str = Field(
        "INFO",
        description="Name of the logging level applied to the root logger.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to amounts when rendering text output.",
        max_length=4,
    )
    report_period_format: str = Field(
        "%B %Y",
        description="strftime pattern for the report's month/year label.",
    )

    class Config:
        env_prefix = "SPENDBOOK_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: object) -> str:
        """Reject unknown level names early and store them upper-cased."""

        name = str(value).strip().upper()
        resolve_level(name)
        return name

    @validator("report_period_format")
    def _check_period_format(cls, value: str) -> str:
        """Make sure the pattern renders before it reaches a report."""

        datetime(2000, 1, 1).strftime(value)
        return value


@lru_cache()
def get_settings() -> SpendbookSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SpendbookSettings()
