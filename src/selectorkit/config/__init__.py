"""Configuration module using Pydantic Settings.

Usage:
    from selectorkit.config import CodecSettings

    settings = CodecSettings(indent=2)
"""

from selectorkit.config.settings import CodecSettings

__all__ = [
    "CodecSettings",
]
