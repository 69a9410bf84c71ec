"""Name derivation pipeline: raw name -> canonical name -> file name -> identifier."""

from __future__ import annotations

from casktoken.naming.canonical import canonicalize
from casktoken.naming.derivation import CaskNaming
from casktoken.naming.file_name import derive_file_name, exception_tokens
from casktoken.naming.identifier import derive_identifier
from casktoken.naming.segments import tokenize

__all__ = [
    "CaskNaming",
    "canonicalize",
    "derive_file_name",
    "derive_identifier",
    "exception_tokens",
    "tokenize",
]
