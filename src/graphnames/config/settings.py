"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
naming service.

Usage:
    from graphnames.config import NamerSettings

    # Load from environment variables (GRAPHNAMES_*)
    settings = NamerSettings()

    # Or override with explicit values
    settings = NamerSettings(default_system_name="Effect")
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from graphnames.core.naming import DEFAULT_SYSTEM_NAME


class NamerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for SystemNamer.

    Attributes:
        default_system_name: Label shown for systems with an empty base name.
            Systems named exactly this share a group with unnamed ones.
        log_errors: Log naming failures at ERROR level. Failures are
            returned as NameResult values either way.

    Environment Variables:
        GRAPHNAMES_DEFAULT_SYSTEM_NAME
        GRAPHNAMES_LOG_ERRORS
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPHNAMES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_system_name: str = DEFAULT_SYSTEM_NAME
    log_errors: bool = True

    @field_validator("default_system_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_system_name must not be blank")
        return value
