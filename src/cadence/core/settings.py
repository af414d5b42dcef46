"""
Settings for cadence.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.
    Schedules themselves take no configuration beyond their constructor
    arguments, but the process around them does: how construction is
    logged, and whether randomized start offsets should be reproducible
    (a fixed seed in development and tests, time-seeded in production).

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads ``CADENCE_*`` env vars and .env files
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from cadence.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment, cadence-core

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cadence.core.errors import InvalidConfigError

_LOG_FORMATS = ("json", "console", "auto")


class CadenceSettings(BaseSettings):
    """Process-wide cadence configuration.

    Fields
    ──────
    log_level    : Structlog log level
    log_format   : json, console, or auto (JSON when stdout is not a tty)
    service_name : ``service.name`` attached to every log line
    rand_seed    : Seed for randomized start offsets (None = seed from the clock)
    """

    model_config = SettingsConfigDict(
        env_prefix="CADENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="auto")
    service_name: str = Field(default="cadence")

    # ── Scheduling ───────────────────────────────────────────────
    rand_seed: int | None = Field(
        default=None,
        description="Seed for EveryWithRandInitial when no rng is passed",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in _LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(_LOG_FORMATS)}")
        return fmt


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, CadenceSettings] = {}


def get_settings(*, _force_reload: bool = False) -> CadenceSettings:
    """Load, validate, and cache a :class:`CadenceSettings` instance.

    Raises:
        InvalidConfigError: an environment value failed validation
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    try:
        settings = CadenceSettings()
    except ValidationError as exc:
        first = exc.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ())) or "settings"
        raise InvalidConfigError(key, first.get("input"), first.get("msg"), cause=exc) from exc

    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    _settings_cache.clear()


__all__ = ["CadenceSettings", "get_settings", "clear_settings_cache"]
