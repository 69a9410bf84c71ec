"""Best-effort display name lookup for macOS application bundles."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from casktoken.constants.bundle import (
    DISPLAY_NAME_KEY,
    EXECUTABLE_NAME_KEY,
    INFO_PLIST_PATH,
    LOCALIZED_STRINGS_DIRS,
    LOCALIZED_STRINGS_FILENAME,
    LOCALIZED_STRINGS_KEYS,
    SHORT_NAME_KEY,
    STRINGS_ENCODINGS,
    STRINGS_ENTRY_PATTERN,
)

logger = logging.getLogger(__name__)


def resolve_display_name(path: str) -> str | None:
    """Return the first ASCII display name recorded in the bundle at ``path``.

    Probes, in order: the ``CFBundleDisplayName`` and ``CFBundleName`` keys of
    ``Info.plist``, the localized ``InfoPlist.strings`` resource, and the
    ``CFBundleExecutable`` key. Unreadable sources are skipped.
    """
    bundle = Path(path)
    info = _read_plist(bundle / INFO_PLIST_PATH)
    probes = (
        lambda: info.get(DISPLAY_NAME_KEY),
        lambda: info.get(SHORT_NAME_KEY),
        lambda: _localized_name(bundle),
        lambda: info.get(EXECUTABLE_NAME_KEY),
    )
    for probe in probes:
        candidate = _usable_name(probe())
        if candidate is not None:
            return candidate
    logger.debug("No ASCII display name found in %s", bundle)
    return None


def _usable_name(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not value or not value.isascii():
        return None
    return value


def _read_plist(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            loaded = plistlib.load(handle)
    except (OSError, ExpatError, plistlib.InvalidFileException, ValueError) as exc:
        logger.debug("Cannot read property list %s: %s", path, exc)
        return {}
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _localized_name(bundle: Path) -> str | None:
    resources = bundle / "Contents" / "Resources"
    for directory in LOCALIZED_STRINGS_DIRS:
        strings_path = resources / directory / LOCALIZED_STRINGS_FILENAME
        if not strings_path.is_file():
            continue
        entries = _read_strings(strings_path)
        for key in LOCALIZED_STRINGS_KEYS:
            name = _usable_name(entries.get(key))
            if name is not None:
                return name
    return None


def _read_strings(path: Path) -> dict[str, Any]:
    """Read a ``.strings`` file stored as a property list or as old-style text."""
    parsed = _read_plist(path)
    if parsed:
        return parsed
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.debug("Cannot read strings file %s: %s", path, exc)
        return {}
    for encoding in STRINGS_ENCODINGS:
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            continue
        return {match.group("key"): match.group("value") for match in STRINGS_ENTRY_PATTERN.finditer(text)}
    return {}
