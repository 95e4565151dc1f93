"""Application configuration via environment variables with DATE_ENTRY_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.locale import Granularity


class Settings(BaseSettings):
    """Date entry engine configuration.

    All settings are read from environment variables prefixed with
    ``DATE_ENTRY_``.
    """

    model_config = SettingsConfigDict(env_prefix="DATE_ENTRY_")

    # ── Locale ─────────────────────────────────────────────────────────────
    default_locale: str = "pt-BR"
    default_granularity: Granularity = Granularity.DAY

    # ── Edit lifecycle ─────────────────────────────────────────────────────
    # "change" commits on every edit that parses; "blur" waits for blur()
    commit_on: Literal["change", "blur"] = "change"

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # ── API ─────────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
