"""
Configuration management for the artist pair finder.

This module provides centralized configuration handling with support for
environment variables, .env.local files, and CLI overrides, validated
through a Pydantic schema.
"""

from .schema import ConfigSchema
from .loader import ConfigLoader, ConfigError

__all__ = ["ConfigError", "ConfigSchema", "ConfigLoader"]
