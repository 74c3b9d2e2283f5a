"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def read_env_var(name: str, default: str) -> str:
    """Return the environment variable ``name`` or ``default`` when absent/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
