"""Application configuration helpers."""

from __future__ import annotations

from .display import DisplayConfig, OutputFormat, get_display_config
from .env import read_env_var
from .errors import ConfigurationError, InvalidConfigurationError
from .logging import configure_logging

__all__ = [
    "ConfigurationError",
    "DisplayConfig",
    "InvalidConfigurationError",
    "OutputFormat",
    "configure_logging",
    "get_display_config",
    "read_env_var",
]
