"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "casktoken"
CLI_DESCRIPTION: str = "\n".join(
    (
        f"{BRAND_NAME}: generate the conventional token for a cask",
        "",
        "NAME may be an application name or a path to an .app bundle.",
        "The definition file name and its declaration are printed.",
    )
)
WARNING_PREFIX: str = "Warning:"
