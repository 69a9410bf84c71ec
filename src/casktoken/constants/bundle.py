"""Application bundle layout and metadata keys."""

from __future__ import annotations

import re
from re import Pattern

INFO_PLIST_PATH: str = "Contents/Info.plist"

DISPLAY_NAME_KEY: str = "CFBundleDisplayName"
SHORT_NAME_KEY: str = "CFBundleName"
EXECUTABLE_NAME_KEY: str = "CFBundleExecutable"

LOCALIZED_STRINGS_FILENAME: str = "InfoPlist.strings"
LOCALIZED_STRINGS_DIRS: tuple[str, ...] = ("en.lproj", "English.lproj", "Base.lproj")
LOCALIZED_STRINGS_KEYS: tuple[str, ...] = (DISPLAY_NAME_KEY, SHORT_NAME_KEY)
STRINGS_ENCODINGS: tuple[str, ...] = ("utf-8-sig", "utf-16")

STRINGS_ENTRY_PATTERN: Pattern[str] = re.compile(
    r'"?(?P<key>[A-Za-z0-9_.]+)"?\s*=\s*"(?P<value>(?:[^"\\]|\\.)*)"\s*;',
)
