"""Typed building blocks for the naming pattern tables."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from re import Pattern
from typing import TypeAlias

BundleLookup: TypeAlias = Callable[[str], str | None]
CorpusLookup: TypeAlias = Callable[[str], bool]


@dataclass(frozen=True)
class NameException:
    """Hand-curated override: a raw-name pattern and the literal token it maps to."""

    pattern: Pattern[str]
    token: str

    def matches(self, name: str) -> bool:
        """Return whether ``name`` is covered by this override."""
        return self.pattern.search(name) is not None


@dataclass(frozen=True)
class StripPattern:
    """A trailing pattern eligible for removal from a candidate name.

    Patterns are matched against a whole suffix. A suffix normally has to
    start right after a separator character; ``at_case_boundary`` also allows
    it to start at a camelCase or snake_case transition.
    """

    pattern: Pattern[str]
    at_case_boundary: bool = False
