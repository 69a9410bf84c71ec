"""Shared pytest fixtures for bundle and repository layouts."""

from __future__ import annotations

import plistlib
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture()
def make_bundle(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating a minimal ``.app`` bundle under ``tmp_path``."""

    def _make(
        name: str = "Example.app",
        info: dict[str, Any] | None = None,
        strings: dict[str, bytes] | None = None,
    ) -> Path:
        bundle = tmp_path / name
        contents = bundle / "Contents"
        contents.mkdir(parents=True)
        if info is not None:
            with (contents / "Info.plist").open("wb") as handle:
                plistlib.dump(info, handle)
        for lproj, payload in (strings or {}).items():
            lproj_dir = contents / "Resources" / lproj
            lproj_dir.mkdir(parents=True)
            (lproj_dir / "InfoPlist.strings").write_bytes(payload)
        return bundle

    return _make


@pytest.fixture()
def cask_repo(tmp_path: Path) -> Path:
    """Return a repository root with an empty ``Casks`` directory."""
    root = tmp_path / "repo"
    (root / "Casks").mkdir(parents=True)
    return root
