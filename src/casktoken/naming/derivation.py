"""Per-run name derivation with each stage computed once."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

from casktoken.constants.patterns import DECLARATION_BASE_CLASS, EXCEPTION_TABLE
from casktoken.naming.canonical import canonicalize
from casktoken.naming.file_name import derive_file_name, strip_definition_extension
from casktoken.naming.identifier import derive_identifier
from casktoken.types.naming import BundleLookup, NameException


@dataclass(frozen=True)
class CaskNaming:
    """All names derived from one raw application name.

    Each property is evaluated lazily and cached, so ``file_name`` reuses the
    canonical name computed for ``canonical_name`` and so on down the chain.
    """

    raw_name: str
    bundle_lookup: BundleLookup | None = None
    exceptions: tuple[NameException, ...] = EXCEPTION_TABLE

    @cached_property
    def canonical_name(self) -> str:
        return canonicalize(self.raw_name, self.bundle_lookup, exceptions=self.exceptions)

    @cached_property
    def file_name(self) -> str:
        """Definition file name; raises ``NameDerivationError`` when none can be derived."""
        return derive_file_name(self.canonical_name, exceptions=self.exceptions)

    @property
    def token(self) -> str:
        """The file name without its extension."""
        return strip_definition_extension(self.file_name)

    @cached_property
    def identifier(self) -> str:
        return derive_identifier(self.file_name)

    @property
    def declaration(self) -> str:
        """Preview of the class declaration opening the definition file."""
        return f"class {self.identifier} < {DECLARATION_BASE_CLASS}"
