"""
Structured error types for cadence.

The scheduling core itself never fails: requested durations are clamped and
truncated rather than rejected, and ``next`` is total over its input. Errors
only appear at the edges, where text is turned into schedules (duration
strings, ``@every`` descriptors) and where configuration is loaded from the
environment. Those edges raise typed errors that carry enough context to be
logged and reported without re-parsing the message.

Manifesto:
    - **Typed Error Hierarchy:** Parse, validation and config failures are
      distinguishable by type
    - **Explicit Retry Semantics:** Every error knows if it's retryable
      (none of the errors here are)
    - **Rich Context:** Errors carry the offending input for logging
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                       CadenceError                          │
        │  (category, retryable, context, cause)                      │
        ├─────────────────────────────────────────────────────────────┤
        │                                                             │
        │  ValidationError          ConfigError       ScheduleError   │
        │  (VALIDATION)             (CONFIG)          (SCHEDULE)      │
        │       │                        │                            │
        │  DurationParseError       InvalidConfigError                │
        │  DescriptorParseError                                       │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = DurationParseError("unknown unit", value="5x")
    >>> error.retryable
    False
    >>> error.to_dict()["value"]
    "'5x'"

Guardrails:
    ❌ DON'T: Raise from IntervalSchedule construction or next()
    ✅ DO: Normalize durations silently; raise only when parsing text

    ❌ DON'T: Swallow the original exception
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, cadence-core

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        PARSE: Duration or descriptor text could not be parsed
        VALIDATION: A value failed a constraint
        CONFIG: Missing or invalid settings
        SCHEDULE: Schedule construction or evaluation errors
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    PARSE = "PARSE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    SCHEDULE = "SCHEDULE"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields cover the places errors come from in this package (the
    schedule being built, the descriptor text, the settings key). Anything
    else goes into ``metadata``.

    Examples:
        >>> ctx = ErrorContext(descriptor="@every 5x")
        >>> ctx.to_dict()
        {'descriptor': '@every 5x'}

    Attributes:
        schedule: Name of the schedule being built, if the host supplied one
        descriptor: Raw descriptor text
        setting: Settings key that failed to load
        metadata: Additional key-value pairs
    """

    schedule: str | None = None
    descriptor: str | None = None
    setting: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["schedule", "descriptor", "setting"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class CadenceError(Exception):
    """
    Base exception for all cadence errors.

    Subclasses set ``default_category`` and ``default_retryable`` to give
    their domain sensible defaults.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CadenceError:
        """
        Add context to this error (fluent API).

        Usage:
            raise DescriptorParseError("bad descriptor").with_context(
                schedule="nightly-cleanup",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(CadenceError):
    """
    Input validation error.

    Never retryable - the input must be fixed.
    """

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result


class DurationParseError(ValidationError):
    """A duration string such as ``"1h30m"`` could not be parsed."""

    default_category = ErrorCategory.PARSE


class DescriptorParseError(ValidationError):
    """An ``@every`` descriptor could not be parsed."""

    default_category = ErrorCategory.PARSE

    def __init__(self, message: str, *, value: Any = None, **kwargs: Any):
        super().__init__(message, value=value, **kwargs)
        if isinstance(value, str):
            self.context.descriptor = value


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(CadenceError):
    """
    Configuration error.

    Never retryable - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None, **kwargs: Any):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}", **kwargs)
        self.context.setting = key


# =============================================================================
# SCHEDULE ERRORS
# =============================================================================


class ScheduleError(CadenceError):
    """Schedule usage error raised by helpers around the core (never by next())."""

    default_category = ErrorCategory.SCHEDULE
    default_retryable = False


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, CadenceError):
        return error.retryable
    return False


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, CadenceError):
        return error.category
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    if isinstance(error, (KeyError, AttributeError)):
        return ErrorCategory.CONFIG
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CadenceError",
    "ValidationError",
    "DurationParseError",
    "DescriptorParseError",
    "ConfigError",
    "InvalidConfigError",
    "ScheduleError",
    "is_retryable",
    "categorize_error",
]
