"""Base exception type for casktoken."""

from __future__ import annotations


class CaskTokenError(Exception):
    """Base class for all casktoken errors."""
