"""Config data model for casktoken."""

from __future__ import annotations

from dataclasses import dataclass

from casktoken.constants.config import DEFAULT_DEFINITIONS_DIR
from casktoken.constants.patterns import EXCEPTION_TABLE
from casktoken.types.naming import NameException


@dataclass(frozen=True)
class CaskTokenConfig:
    """Resolved casktoken config."""

    definitions_dir: str = DEFAULT_DEFINITIONS_DIR
    extra_exceptions: tuple[NameException, ...] = ()

    @property
    def exceptions(self) -> tuple[NameException, ...]:
        """Built-in exception table followed by configured exceptions."""
        return EXCEPTION_TABLE + self.extra_exceptions
