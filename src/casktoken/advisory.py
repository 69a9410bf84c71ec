"""Advisory checks on derived names.

Warnings never alter the derived names; callers decide whether to print
them and how they affect the exit status.
"""

from __future__ import annotations

import logging

from casktoken.constants.patterns import DIGIT_PATTERN, EXCEPTION_TABLE
from casktoken.naming.file_name import exception_tokens, strip_definition_extension
from casktoken.types.naming import CorpusLookup, NameException

logger = logging.getLogger(__name__)


def check(
    canonical: str,
    file_name: str,
    corpus: CorpusLookup | None = None,
    *,
    exceptions: tuple[NameException, ...] = EXCEPTION_TABLE,
) -> tuple[str, ...]:
    """Return advisory warnings for a derived file name."""
    warnings: list[str] = []
    stem = strip_definition_extension(file_name)

    if DIGIT_PATTERN.search(stem) and canonical not in exception_tokens(exceptions):
        warnings.append(f"'{stem}' contains digits. Digits which are version numbers should be removed.")

    if corpus is not None and _exists(corpus, file_name):
        warnings.append(
            f"the file '{file_name}' already exists. Prepend the vendor name if this is not a duplicate."
        )

    return tuple(warnings)


def _exists(corpus: CorpusLookup, file_name: str) -> bool:
    try:
        return corpus(file_name)
    except OSError as exc:
        logger.debug("Cannot check for existing %s: %s", file_name, exc)
        return False
