"""
Custom exceptions for Tasmee library.

All exceptions inherit from TasmeeError for easy catching of library-specific errors.
Scoring functions never raise for string input; these cover configuration
and the validation of reference data handed in by callers.
"""

from typing import Any


class TasmeeError(Exception):
    """Base exception for all Tasmee errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


class ConfigurationError(TasmeeError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        setting_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if setting_name:
            ctx["setting"] = setting_name
        super().__init__(message, ctx)
        self.setting_name = setting_name


class ReferenceDataError(TasmeeError):
    """Raised when reference verse data supplied by a caller is malformed."""

    def __init__(
        self,
        message: str = "Invalid reference verse data.",
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message, ctx)
        self.field = field
