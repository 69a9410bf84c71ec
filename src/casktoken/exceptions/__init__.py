"""Shared exception hierarchy for casktoken."""

from __future__ import annotations

from .base import CaskTokenError
from .config import ConfigError
from .naming import NameDerivationError

__all__ = [
    "CaskTokenError",
    "ConfigError",
    "NameDerivationError",
]
