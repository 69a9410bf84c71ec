"""Config loading and normalization for casktoken."""

from __future__ import annotations

import difflib
import re
from pathlib import Path
from typing import Any

import yaml

from casktoken.config.model import CaskTokenConfig
from casktoken.constants.config import ALLOWED_CONFIG_KEYS, CONFIG_FILENAME, DEFAULT_DEFINITIONS_DIR
from casktoken.constants.patterns import CONVENTIONAL_STEM_PATTERN
from casktoken.exceptions import ConfigError
from casktoken.types.naming import NameException


def load_config(root: Path | None, config_path: Path | None = None) -> CaskTokenConfig:
    """Load config from ``casktoken.yaml`` under ``root`` or an explicit path."""
    if config_path is not None:
        path = config_path.resolve()
    elif root is not None:
        path = root.resolve() / CONFIG_FILENAME
    else:
        return CaskTokenConfig()

    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CaskTokenConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in raw:
        if key not in ALLOWED_CONFIG_KEYS:
            raise ConfigError(f"Unknown config key `{key}` in {path}{_suggest_key(str(key))}")

    definitions_dir = raw.get("definitions_dir", DEFAULT_DEFINITIONS_DIR)
    if not isinstance(definitions_dir, str) or not definitions_dir.strip():
        raise ConfigError("definitions_dir must be a non-empty string")

    return CaskTokenConfig(
        definitions_dir=definitions_dir.strip(),
        extra_exceptions=_build_exceptions(raw.get("exceptions", {})),
    )


def _build_exceptions(value: Any) -> tuple[NameException, ...]:
    """Compile the ``exceptions`` mapping of pattern -> token."""
    if value is None:
        return ()
    if not isinstance(value, dict):
        raise ConfigError("exceptions must be a mapping of pattern to token")

    compiled: list[NameException] = []
    for pattern, token in value.items():
        if not isinstance(pattern, str) or not isinstance(token, str):
            raise ConfigError("exceptions must map string patterns to string tokens")
        if not CONVENTIONAL_STEM_PATTERN.match(token):
            raise ConfigError(
                f"exceptions.{pattern}: token {token!r} must be lowercase letters, digits and single hyphens"
            )
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise ConfigError(f"exceptions.{pattern}: invalid pattern: {exc}") from exc
        compiled.append(NameException(pattern=regex, token=token))
    return tuple(compiled)


def _suggest_key(unknown: str) -> str:
    """Return a ' (did you mean ...?)' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    if matches:
        return f" (did you mean `{matches[0]}`?)"
    return ""
