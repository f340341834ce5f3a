"""Startup configuration read from the environment.

Only the admin secret is required; everything else has a default.
"""
from __future__ import annotations

import os

__all__ = [
    "ADMIN_PASSWORD_ENV",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ConfigError",
    "get_admin_password_from_env",
]

ADMIN_PASSWORD_ENV = "ADMIN_PASSWORD"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080


class ConfigError(RuntimeError):
    """Raised when required startup configuration is missing or invalid."""


def get_admin_password_from_env() -> str:
    """Read ADMIN_PASSWORD from the environment.

    Raises:
        ConfigError: if the variable is unset or empty.
    """
    pwd = os.getenv(ADMIN_PASSWORD_ENV, "")
    if not pwd:
        raise ConfigError(f"no admin password (env var {ADMIN_PASSWORD_ENV}) set")
    return pwd
