"""Configuration loading for casktoken.

This package facade re-exports the public names so callers can use
``from casktoken.config import ...``.
"""

from __future__ import annotations

from casktoken.config.loader import load_config
from casktoken.config.model import CaskTokenConfig

__all__ = [
    "CaskTokenConfig",
    "load_config",
]
