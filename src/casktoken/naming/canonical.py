"""Canonical application name derivation.

``canonicalize`` runs these steps in order:

1. substitute a bundle's display name for a non-ASCII bundle path,
2. reduce an existing path to its final component,
3. fold accented Latin letters to plain ASCII,
4. drop a trailing ``.app``,
5. return the literal token of the first matching exception, if any,
6. strip trailing qualifiers and versions until nothing more comes off,
7. replace a version sitting in front of an edition word with a hyphen.

Exceptions are consulted before stripping because their names may contain
digits that stripping would otherwise eat. They are consulted again after
every stripping pass and after interior version removal, so a name that only
reduces to an exception (``"iTerm2 for Mac"``) still gets its literal token.
"""

from __future__ import annotations

import logging
import unicodedata
from pathlib import Path

from casktoken.constants.patterns import (
    BUNDLE_EXTENSION_PATTERN,
    CLOSING_BRACKETS,
    EXCEPTION_TABLE,
    INTERIOR_VERSION_PATTERN,
    INTERIOR_VERSION_REPLACEMENT,
    PRESERVE_PATTERN,
    SEPARATOR_CHARS,
    TRAILING_STRIP_PATTERNS,
    TRAILING_TRIM_CHARS,
)
from casktoken.naming.segments import segment_starts
from casktoken.types.naming import BundleLookup, NameException, StripPattern

logger = logging.getLogger(__name__)


def canonicalize(
    raw: str,
    bundle_lookup: BundleLookup | None = None,
    *,
    exceptions: tuple[NameException, ...] = EXCEPTION_TABLE,
) -> str:
    """Return the canonical English name for ``raw``."""
    name = substitute_display_name(raw, bundle_lookup)
    name = path_basename(name)
    name = fold_to_ascii(name)
    name = BUNDLE_EXTENSION_PATTERN.sub("", name)

    override = match_exception(name, exceptions)
    if override is None:
        name = strip_trailing(name, exceptions=exceptions)
        override = match_exception(name, exceptions)
    if override is None:
        name = remove_interior_versions(name)
        override = match_exception(name, exceptions)
    if override is not None:
        logger.debug("Exception override for %r: %r", name, override)
        return override

    logger.debug("Canonical name for %r: %r", raw, name)
    return name


def substitute_display_name(raw: str, bundle_lookup: BundleLookup | None) -> str:
    """Replace a non-ASCII bundle path with the bundle's ASCII display name."""
    if bundle_lookup is None or raw.isascii() or not _path_exists(raw):
        return raw
    display_name = bundle_lookup(raw)
    if display_name and display_name.isascii():
        logger.debug("Using bundle display name %r for %r", display_name, raw)
        return display_name
    return raw


def path_basename(name: str) -> str:
    """Return the final path component when ``name`` is an existing path."""
    if not _path_exists(name):
        return name
    return Path(name).name or name


def fold_to_ascii(name: str) -> str:
    """Decompose accented Latin letters into ASCII, leaving other scripts untouched."""
    if name.isascii():
        return name
    decomposed = unicodedata.normalize("NFKD", name)
    folded = "".join(char for char in decomposed if not unicodedata.combining(char))
    if not folded.isascii():
        logger.debug("Cannot fold %r to ASCII; keeping it as is", name)
        return name
    return folded


def match_exception(name: str, exceptions: tuple[NameException, ...] = EXCEPTION_TABLE) -> str | None:
    """Return the token of the first exception matching ``name``."""
    for exception in exceptions:
        if exception.matches(name):
            return exception.token
    return None


def strip_trailing(
    name: str,
    patterns: tuple[StripPattern, ...] = TRAILING_STRIP_PATTERNS,
    *,
    exceptions: tuple[NameException, ...] = (),
) -> str:
    """Strip trailing qualifiers and version suffixes until a fixpoint is reached.

    Stops early at the first intermediate name matching one of ``exceptions``.
    """
    while match_exception(name, exceptions) is None:
        stripped = _strip_trailing_once(name, patterns)
        if stripped == name:
            break
        logger.debug("Stripped %r -> %r", name, stripped)
        name = stripped
    return name


def remove_interior_versions(name: str) -> str:
    """Replace ``"App 2.0 Pro"`` style interior versions with a hyphen."""
    return INTERIOR_VERSION_PATTERN.sub(INTERIOR_VERSION_REPLACEMENT, name)


def _strip_trailing_once(name: str, patterns: tuple[StripPattern, ...]) -> str:
    if PRESERVE_PATTERN.search(name):
        return name

    trimmed = name.rstrip(TRAILING_TRIM_CHARS)
    if trimmed != name:
        return trimmed or name

    for start, after_separator in segment_starts(name):
        suffix = name[start:].rstrip(CLOSING_BRACKETS)
        for strip_pattern in patterns:
            if not (after_separator or strip_pattern.at_case_boundary):
                continue
            if strip_pattern.pattern.fullmatch(suffix) is None:
                continue
            kept = name[:start].rstrip(SEPARATOR_CHARS)
            if kept:
                return kept
    return name


def _path_exists(name: str) -> bool:
    try:
        return Path(name).exists()
    except (OSError, ValueError):
        return False
