"""Tests for the memoized per-run name derivation."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from casktoken.exceptions import NameDerivationError
from casktoken.naming import CaskNaming
from casktoken.naming.canonical import canonicalize


@pytest.mark.parametrize(
    ("raw", "canonical", "file_name", "identifier"),
    [
        pytest.param("Google Chrome.app", "Google Chrome", "google-chrome.rb", "GoogleChrome", id="chrome"),
        pytest.param("MyTool 3.2.1 for Mac", "MyTool", "mytool.rb", "Mytool", id="mytool"),
        pytest.param("iTerm", "iterm2", "iterm2.rb", "Iterm2", id="iterm"),
        pytest.param("7-Zip", "7-Zip", "seven-zip.rb", "SevenZip", id="seven-zip"),
        pytest.param(
            "1Password 7 for Mac", "1password", "1password.rb", "1password", id="exception-after-stripping"
        ),
    ],
)
def test_cask_naming_scenarios(raw: str, canonical: str, file_name: str, identifier: str) -> None:
    naming = CaskNaming(raw)

    assert naming.canonical_name == canonical
    assert naming.file_name == file_name
    assert naming.identifier == identifier


def test_cask_naming_computes_canonical_name_once() -> None:
    with patch("casktoken.naming.derivation.canonicalize", wraps=canonicalize) as spy:
        naming = CaskNaming("Google Chrome.app")
        _ = naming.canonical_name
        _ = naming.file_name
        _ = naming.identifier
        _ = naming.declaration

    assert spy.call_count == 1


def test_cask_naming_token_and_declaration() -> None:
    naming = CaskNaming("Google Chrome.app")

    assert naming.token == "google-chrome"
    assert naming.declaration == "class GoogleChrome < Cask"


def test_cask_naming_file_name_raises_on_empty_stem() -> None:
    naming = CaskNaming("日本語")

    assert naming.canonical_name == "日本語"
    with pytest.raises(NameDerivationError):
        _ = naming.file_name
