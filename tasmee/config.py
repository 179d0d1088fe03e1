"""
Configuration for Tasmee library.

Settings are read from environment variables prefixed with ``TASMEE_``
(for example ``TASMEE_MAX_WORD_EDITS=2``) or from a ``.env`` file, and can
be overridden at runtime with :func:`configure`.
"""

from typing import Any, Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tasmee.exceptions import ConfigurationError


AlignmentStrategy = Literal["positional", "sequence"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class TasmeeSettings(BaseSettings):
    """
    Library-wide settings.

    Attributes:
        max_word_edits: Character edits tolerated before a heard word counts as wrong
        word_tolerance_ratio: Optional length-relative tolerance (edits per reference character)
        alignment_strategy: "positional" (index by index) or "sequence" (re-synchronizing)
        reference_cache_ttl: Seconds a tokenized reference stays cached
        reference_cache_size: Maximum cached references (None for unbounded)
        log_level: Log level used by the command line interface
    """

    model_config = SettingsConfigDict(
        env_prefix="TASMEE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_word_edits: int = Field(
        default=1,
        description="Maximum edit distance for a heard word to still count as correct",
        ge=0,
    )
    word_tolerance_ratio: Optional[float] = Field(
        default=None,
        description="Edits allowed per reference character; scales tolerance with word length",
        ge=0.0,
        le=1.0,
    )
    alignment_strategy: AlignmentStrategy = Field(
        default="positional",
        description="Word diff strategy used by match_text",
    )
    reference_cache_ttl: float = Field(
        default=3600.0,
        description="Lifetime of cached reference tokenizations (seconds)",
        gt=0.0,
    )
    reference_cache_size: Optional[int] = Field(
        default=512,
        description="Maximum number of cached reference tokenizations",
        ge=1,
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Log level for the command line interface",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


_settings: TasmeeSettings | None = None


def _first_error_field(error: ValidationError) -> str | None:
    errors = error.errors()
    if errors and errors[0]["loc"]:
        return str(errors[0]["loc"][0])
    return None


def get_settings() -> TasmeeSettings:
    """
    Get the active settings, loading them from the environment on first use.

    Returns:
        The process-wide TasmeeSettings instance

    Raises:
        ConfigurationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        try:
            _settings = TasmeeSettings()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid TASMEE_* environment setting: {e}",
                setting_name=_first_error_field(e),
            ) from e
    return _settings


def configure(**overrides: Any) -> TasmeeSettings:
    """
    Override settings at runtime.

    Args:
        **overrides: Setting names and their new values

    Returns:
        The new active settings

    Raises:
        ConfigurationError: If a setting name is unknown or a value is invalid

    Example:
        >>> configure(max_word_edits=2, alignment_strategy="sequence")
    """
    global _settings

    unknown = sorted(set(overrides) - set(TasmeeSettings.model_fields))
    if unknown:
        raise ConfigurationError(
            f"Unknown setting: {unknown[0]}",
            setting_name=unknown[0],
        )

    current = get_settings().model_dump()
    current.update(overrides)

    try:
        _settings = TasmeeSettings(**current)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid setting value: {e}",
            setting_name=_first_error_field(e),
        ) from e

    return _settings


def reset_settings() -> None:
    """Drop runtime overrides; the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
