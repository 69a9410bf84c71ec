"""Split display names into word segments.

A segment starts after a run of separator characters or at a camelCase or
snake_case transition, so ``"MyAppPro_x86"`` reads as
``("My", "App", "Pro_", "x86")``. Joining the segments always yields the
original string; nothing is inserted into the name itself.

Preserved endings such as ``"3D"`` need no special handling here: stripping
never looks at the segments of a name that ends in one.
"""

from __future__ import annotations

from casktoken.constants.patterns import SEGMENT_BOUNDARY_PATTERN, SEPARATOR_CHARS


def tokenize(name: str) -> tuple[str, ...]:
    """Return the segments of ``name``."""
    return tuple(segment for segment in SEGMENT_BOUNDARY_PATTERN.split(name) if segment)


def segment_starts(name: str) -> list[tuple[int, bool]]:
    """Return ``(offset, after_separator)`` for every segment start but the first.

    ``after_separator`` is false when the segment starts at a case transition
    rather than after a separator character.
    """
    starts: list[tuple[int, bool]] = []
    offset = 0
    for segment in tokenize(name)[:-1]:
        offset += len(segment)
        starts.append((offset, name[offset - 1] in SEPARATOR_CHARS))
    return starts
