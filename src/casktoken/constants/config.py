"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "casktoken.yaml"
DEFAULT_DEFINITIONS_DIR: str = "Casks"
REPOSITORY_MARKERS: tuple[str, ...] = (".git",)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"definitions_dir", "exceptions"})
