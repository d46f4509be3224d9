"""Configuration settings using Pydantic Settings.

Usage:
    from selectorkit.config import CodecSettings

    # Load from environment variables (SELECTORKIT_JSON_*)
    settings = CodecSettings()

    # Or override with explicit values
    settings = CodecSettings(indent=2)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class CodecSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the JSON helpers.

    Attributes:
        indent: Spaces per indentation level (None for compact output).

    Environment Variables:
        SELECTORKIT_JSON_INDENT
    """

    model_config = SettingsConfigDict(
        env_prefix="SELECTORKIT_JSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    indent: int | None = None
