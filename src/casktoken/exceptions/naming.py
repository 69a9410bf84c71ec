"""Name derivation exceptions."""

from __future__ import annotations

from casktoken.exceptions.base import CaskTokenError


class NameDerivationError(CaskTokenError, ValueError):
    """Raised when no usable definition file name can be derived."""

    def __init__(self, name: str) -> None:
        super().__init__(f"could not determine a name from {name!r}")
        self.name = name
