"""Configuration-related exceptions."""

from __future__ import annotations

from casktoken.exceptions.base import CaskTokenError


class ConfigError(CaskTokenError, ValueError):
    """Raised when casktoken configuration is invalid."""
