"""Mini README: Centralised configuration models and helpers for Ledgerbook.

Structure:
    * LedgerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``LEDGERBOOK_*`` environment variables (or
    a local ``.env`` file). Settings are validated once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger service and CLI."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the JSON service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the JSON service exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "",
        description="Symbol prefixed to formatted balances, e.g. '$'.",
    )
    seed_demo_data: bool = Field(
        False,
        description="Populate a fresh ledger with demo transactions for the current month.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level name.",
    )

    class Config:
        env_prefix = "LEDGERBOOK_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level")
    def _check_log_level(cls, value: str) -> str:
        """Accept only level names the logging module understands."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
