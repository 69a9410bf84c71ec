"""Shared type aliases for casktoken."""

from .naming import BundleLookup, CorpusLookup, NameException, StripPattern

__all__ = [
    "BundleLookup",
    "CorpusLookup",
    "NameException",
    "StripPattern",
]
