"""Pattern tables driving canonical name, file name and identifier derivation."""

from __future__ import annotations

import re
from re import Pattern

from casktoken.types.naming import NameException, StripPattern

DEFINITION_FILE_EXTENSION: str = ".rb"
BUNDLE_EXTENSION: str = ".app"
DECLARATION_BASE_CLASS: str = "Cask"

BUNDLE_EXTENSION_PATTERN: Pattern[str] = re.compile(re.escape(BUNDLE_EXTENSION) + r"\Z", re.IGNORECASE)
DEFINITION_EXTENSION_PATTERN: Pattern[str] = re.compile(
    re.escape(DEFINITION_FILE_EXTENSION) + r"\Z",
    re.IGNORECASE,
)

EXPANDED_SYMBOLS: dict[str, str] = {
    "+": "plus",
    "@": "at",
}

EXPANDED_DIGITS: tuple[tuple[str, str], ...] = (
    ("0", "zero"),
    ("1", "one"),
    ("2", "two"),
    ("3", "three"),
    ("4", "four"),
    ("5", "five"),
    ("6", "six"),
    ("7", "seven"),
    ("8", "eight"),
    ("9", "nine"),
)

# Characters that separate words inside a display name.
SEPARATOR_CHARS: str = " \t._-()[]"
# Characters trimmed off the end of a name on every stripping pass.
TRAILING_TRIM_CHARS: str = " \t._-"
CLOSING_BRACKETS: str = ")]"

SEGMENT_BOUNDARY_PATTERN: Pattern[str] = re.compile(
    r"(?<=[\s._\-()\[\]])(?=[^\s._\-()\[\]])"  # after a separator run
    r"|(?<=[a-z0-9])(?=[A-Z])"  # camelCase
    r"|(?<=[A-Z])(?=[A-Z][a-z])"  # acronym followed by a word
)

_VERSION = r"(?:v|r|version\s*)?\d+(?:[._-]\d+)*(?:[a-z]{1,2}\d*)?"


def _exception(pattern: str, token: str) -> NameException:
    return NameException(pattern=re.compile(pattern, re.IGNORECASE), token=token)


def _strip(pattern: str, *, at_case_boundary: bool = False) -> StripPattern:
    return StripPattern(pattern=re.compile(pattern, re.IGNORECASE), at_case_boundary=at_case_boundary)


# Names that look like they carry a version or qualifier but do not.
EXCEPTION_TABLE: tuple[NameException, ...] = (
    _exception(r"\Aiterm\s*2?\Z", "iterm2"),
    _exception(r"\A1password(?:\s*\d+)?\Z", "1password"),
    _exception(r"\A3dconnexion\Z", "3dconnexion"),
    _exception(r"\A4k[\s-]*video[\s-]*downloader\Z", "4k-video-downloader"),
    _exception(r"\A8x8(?:[\s-]*virtual[\s-]*office)?\Z", "8x8-virtual-office"),
    _exception(r"\Ab1[\s-]*free[\s-]*archiver\Z", "b1-free-archiver"),
    _exception(r"\Amicrosoft[\s-]*office[\s-]*2011\Z", "microsoft-office-2011"),
    _exception(r"\Apgadmin\s*4\Z", "pgadmin4"),
    _exception(r"\Ax2go(?:[\s-]*client)?\Z", "x2goclient"),
)

TRAILING_STRIP_PATTERNS: tuple[StripPattern, ...] = (
    _strip(r"app|application"),
    _strip(r"for\s+(?:mac(?:intosh)?(?:\s*os(?:\s*x)?)?|os\s*x|macos)"),
    _strip(r"mac(?:\s*os(?:\s*x)?)?|macos|os\s*x|osx"),
    _strip(r"x86(?:[_-]64)?|x64|i[36]86|amd64|arm64|ppc|powerpc|universal|intel|(?:32|64)[\s-]?bits?"),
    _strip(r"java|gtk\+?\d*|qt\d*|wx(?:widgets)?", at_case_boundary=True),
    _strip(r"beta|alpha|rc\d*|preview|nightly"),
    _strip(r"en[_-](?:us|gb)|english"),
    _strip(r"build\s*\d+"),
    _strip(_VERSION, at_case_boundary=True),
)

# A name ending in one of these is never stripped.
PRESERVE_PATTERN: Pattern[str] = re.compile(
    r"(?:mp[34]|id3|diff3|\d+d|[xh]\.?26[45]|x11)\Z",
    re.IGNORECASE,
)

INTERIOR_VERSION_FOLLOWERS: tuple[str, ...] = (
    "Pro",
    "Server",
    "Viewer",
    "Launcher",
    "Installer",
    "Client",
    "CE",
    "Host",
    "Lite",
    "Studio",
    "Plus",
)

# The version must be its own word so digits inside "MP3" or "x264" stay put.
INTERIOR_VERSION_PATTERN: Pattern[str] = re.compile(
    r"(?<=[a-z])[\s._-]+v?\d+(?:[._-]\d+)*[\s._-]*"
    r"(?=(?:" + "|".join(INTERIOR_VERSION_FOLLOWERS) + r")\b)",
    re.IGNORECASE,
)
INTERIOR_VERSION_REPLACEMENT: str = "-"

FILE_NAME_SPACE_RUN_PATTERN: Pattern[str] = re.compile(r" +")
FILE_NAME_INVALID_CHAR_PATTERN: Pattern[str] = re.compile(r"[^a-z0-9-]")
FILE_NAME_HYPHEN_RUN_PATTERN: Pattern[str] = re.compile(r"-{2,}")
FILE_NAME_HYPHEN_BEFORE_DIGIT_PATTERN: Pattern[str] = re.compile(r"-(?=\d)")
CONVENTIONAL_STEM_PATTERN: Pattern[str] = re.compile(r"\A[a-z0-9]+(?:-[a-z0-9]+)*\Z")
DIGIT_PATTERN: Pattern[str] = re.compile(r"\d")
