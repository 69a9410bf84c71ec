"""Tests for identifier derivation."""

from __future__ import annotations

import pytest

from casktoken.naming.identifier import derive_identifier


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("google-chrome.rb", "GoogleChrome"),
        ("iterm2.rb", "Iterm2"),
        ("mytool.rb", "Mytool"),
        ("Casks/seven-zip.rb", "SevenZip"),
        ("foo--bar.rb", "FooBar"),
        ("c-plus-plus-builder", "CPlusPlusBuilder"),
    ],
)
def test_derive_identifier(file_name: str, expected: str) -> None:
    assert derive_identifier(file_name) == expected
