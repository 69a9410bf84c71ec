"""Identifier derivation from a definition file name."""

from __future__ import annotations

from pathlib import PurePath

from casktoken.naming.file_name import strip_definition_extension


def derive_identifier(file_name: str) -> str:
    """Return the PascalCase identifier for ``file_name`` (``google-chrome.rb`` -> ``GoogleChrome``)."""
    stem = strip_definition_extension(PurePath(file_name).name)
    return "".join(segment[0].upper() + segment[1:] for segment in stem.split("-") if segment)
