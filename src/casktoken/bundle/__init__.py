"""Application bundle metadata helpers."""

from __future__ import annotations

from casktoken.bundle.resolver import resolve_display_name

__all__ = ["resolve_display_name"]
