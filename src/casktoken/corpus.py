"""Lookup of existing definition files in a cask repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from casktoken.constants.config import DEFAULT_DEFINITIONS_DIR, REPOSITORY_MARKERS

logger = logging.getLogger(__name__)


def find_repository_root(start: Path, definitions_dir: str = DEFAULT_DEFINITIONS_DIR) -> Path | None:
    """Return the nearest directory at or above ``start`` that looks like a cask repository.

    A directory qualifies when it holds ``definitions_dir`` or one of the
    repository markers (``.git``).
    """
    start = start.resolve()
    for candidate in (start, *start.parents):
        if (candidate / definitions_dir).is_dir():
            return candidate
        if any((candidate / marker).exists() for marker in REPOSITORY_MARKERS):
            return candidate
    logger.debug("No repository root found above %s", start)
    return None


@dataclass(frozen=True)
class DefinitionCorpus:
    """Existing definition files under ``root / definitions_dir``."""

    root: Path
    definitions_dir: str = DEFAULT_DEFINITIONS_DIR

    @property
    def directory(self) -> Path:
        return self.root / self.definitions_dir

    def path_for(self, file_name: str) -> Path:
        return self.directory / file_name

    def __call__(self, file_name: str) -> bool:
        """Return whether a definition named ``file_name`` already exists."""
        return self.path_for(file_name).is_file()
