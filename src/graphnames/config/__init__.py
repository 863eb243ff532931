"""Configuration module using Pydantic Settings.

Usage:
    from graphnames.config import NamerSettings

    settings = NamerSettings(default_system_name="Effect")
"""

from graphnames.config.settings import NamerSettings

__all__ = [
    "NamerSettings",
]
