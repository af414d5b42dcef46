"""Core primitives for cadence: errors, logging, settings, timestamps, scheduling."""

from cadence.core.errors import (
    CadenceError,
    ConfigError,
    DescriptorParseError,
    DurationParseError,
    ErrorCategory,
    ErrorContext,
    InvalidConfigError,
    ScheduleError,
    ValidationError,
)
from cadence.core.logging import LogContext, configure_logging, get_logger
from cadence.core.settings import CadenceSettings, get_settings
from cadence.core.timestamps import EPOCH, utc_now

__all__ = [
    # Errors
    "CadenceError",
    "ConfigError",
    "DescriptorParseError",
    "DurationParseError",
    "ErrorCategory",
    "ErrorContext",
    "InvalidConfigError",
    "ScheduleError",
    "ValidationError",
    # Logging
    "LogContext",
    "configure_logging",
    "get_logger",
    # Settings
    "CadenceSettings",
    "get_settings",
    # Timestamps
    "EPOCH",
    "utc_now",
]
