"""CLI entrypoint for casktoken."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from casktoken import __version__
from casktoken.advisory import check
from casktoken.bundle import resolve_display_name
from casktoken.config import CaskTokenConfig, load_config
from casktoken.constants.branding import BRAND_NAME, CLI_DESCRIPTION, WARNING_PREFIX
from casktoken.corpus import DefinitionCorpus, find_repository_root
from casktoken.exceptions import ConfigError, NameDerivationError
from casktoken.naming import CaskNaming

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("name", help="Application name or path to an .app bundle")
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show the intermediate canonical name and debug logging",
    )
    parser.add_argument(
        "-r",
        "--root",
        type=Path,
        default=None,
        help="Cask repository root (discovered from the working directory if omitted)",
    )
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    root = args.root.resolve() if args.root is not None else find_repository_root(Path.cwd())
    try:
        config = load_config(root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    naming = CaskNaming(args.name, bundle_lookup=resolve_display_name, exceptions=config.exceptions)
    try:
        file_name = naming.file_name
    except NameDerivationError as exc:
        print(f"Naming error: {exc}", file=sys.stderr)
        return 1

    if args.debug:
        print(f"Canonical name: {naming.canonical_name}")
    print(f"File name: {config.definitions_dir}/{file_name}")
    print(f"Declaration: {naming.declaration}")

    warnings = check(
        naming.canonical_name,
        file_name,
        _corpus_for(root, config),
        exceptions=config.exceptions,
    )
    for warning in warnings:
        print(f"{WARNING_PREFIX} {warning}", file=sys.stderr)
    return 1 if warnings else 0


def _corpus_for(root: Path | None, config: CaskTokenConfig) -> DefinitionCorpus | None:
    if root is None:
        logger.debug("No repository root; skipping duplicate check")
        return None
    return DefinitionCorpus(root=root, definitions_dir=config.definitions_dir)


if __name__ == "__main__":
    raise SystemExit(main())
