"""Command line entry point: build (or check) the Token List page.

Invoked without arguments it renders the default network's registry snapshot
into the default output path.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from src.registry import RegistryError, SnapshotRegistry
from src.tokendocs.assembler import build_from_registry
from src.tokendocs.config import BuildConfig, load_config
from src.tokendocs.writer import page_is_current, write_page

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the synth Token List markdown page")
    parser.add_argument("--config", type=Path, default=None, help="Path to config YAML")
    parser.add_argument("--network", default=None, help="Registry network (default: mainnet)")
    parser.add_argument("--registry", type=Path, default=None, help="Registry snapshot (JSON or YAML)")
    parser.add_argument("--output", type=Path, default=None, help="Markdown file to write")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 when the page on disk is out of date",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def run(config: BuildConfig, check: bool = False) -> int:
    """
    Render the page for `config` and write or check it.

    Returns:
        Process exit code
    """
    LOGGER.info("Building %s", config.output_path.name)
    registry = SnapshotRegistry.from_path(config.registry_path, network=config.network)
    content = build_from_registry(registry, config.settings)

    if check:
        if page_is_current(config.output_path, content):
            LOGGER.info("%s is up to date", config.output_path)
            return 0
        LOGGER.error("%s is out of date, rebuild it", config.output_path)
        return 1

    write_page(config.output_path, content)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        "network": args.network,
        "registry_path": str(args.registry.resolve()) if args.registry else None,
        "output_path": str(args.output.resolve()) if args.output else None,
    }
    try:
        config = load_config(args.config, overrides=overrides)
        return run(config, check=args.check)
    except (RegistryError, ValueError) as exc:
        LOGGER.error("Build failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
