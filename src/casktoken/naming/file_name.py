"""Definition file name derivation from a canonical name."""

from __future__ import annotations

import logging

from casktoken.constants.patterns import (
    DEFINITION_EXTENSION_PATTERN,
    DEFINITION_FILE_EXTENSION,
    EXCEPTION_TABLE,
    EXPANDED_DIGITS,
    EXPANDED_SYMBOLS,
    FILE_NAME_HYPHEN_BEFORE_DIGIT_PATTERN,
    FILE_NAME_HYPHEN_RUN_PATTERN,
    FILE_NAME_INVALID_CHAR_PATTERN,
    FILE_NAME_SPACE_RUN_PATTERN,
)
from casktoken.exceptions import NameDerivationError
from casktoken.types.naming import NameException

logger = logging.getLogger(__name__)


def derive_file_name(name: str, *, exceptions: tuple[NameException, ...] = EXCEPTION_TABLE) -> str:
    """Derive the definition file name (``google-chrome.rb``) for a canonical name.

    Raises:
        NameDerivationError: if nothing usable is left of ``name``.
    """
    stem = strip_definition_extension(name)
    if stem not in exception_tokens(exceptions):
        stem = normalize_stem(stem)
    if not stem:
        raise NameDerivationError(name)
    return add_definition_extension(stem)


def normalize_stem(stem: str) -> str:
    """Reduce a canonical name to lowercase ASCII letters, digits and single hyphens."""
    normalized = stem.lower()
    for symbol, word in EXPANDED_SYMBOLS.items():
        normalized = normalized.replace(symbol, f" {word} ")
    normalized = FILE_NAME_SPACE_RUN_PATTERN.sub("-", normalized)
    normalized = FILE_NAME_INVALID_CHAR_PATTERN.sub("", normalized)
    normalized = FILE_NAME_HYPHEN_RUN_PATTERN.sub("-", normalized)
    normalized = normalized.lstrip("-")
    normalized = FILE_NAME_HYPHEN_BEFORE_DIGIT_PATTERN.sub("", normalized)
    # Each rule sees the result of the previous one; only a leading digit is spelled out.
    for digit, word in EXPANDED_DIGITS:
        if normalized.startswith(digit):
            normalized = word + normalized[len(digit) :]
    normalized = normalized.rstrip("-")
    logger.debug("File name stem for %r: %r", stem, normalized)
    return normalized


def exception_tokens(exceptions: tuple[NameException, ...] = EXCEPTION_TABLE) -> frozenset[str]:
    """Return the literal tokens of an exception table."""
    return frozenset(exception.token for exception in exceptions)


def strip_definition_extension(name: str) -> str:
    """Remove a trailing definition file extension, if present."""
    return DEFINITION_EXTENSION_PATTERN.sub("", name)


def add_definition_extension(stem: str) -> str:
    """Append the definition file extension unless already present."""
    if DEFINITION_EXTENSION_PATTERN.search(stem):
        return stem
    return stem + DEFINITION_FILE_EXTENSION
