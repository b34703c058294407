"""CLI entrypoint for cargocache."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

from cargocache import __version__
from cargocache.cli.handlers import build_run_context, handle_restore, handle_save
from cargocache.config import load_config
from cargocache.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from cargocache.constants.config import VALID_LOG_FORMATS
from cargocache.coordinator import RunContext
from cargocache.exceptions import ConfigError
from cargocache.host.log import configure_logging
from cargocache.segments import short_names

_HANDLERS: dict[str, Callable[[RunContext], int]] = {
    "restore": handle_restore,
    "save": handle_save,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    restore = subparsers.add_parser("restore", help="Restore cached segments at the start of a job")
    save = subparsers.add_parser("save", help="Save changed segments at the end of a job")
    for sub in (restore, save):
        sub.add_argument(
            "--cache-only",
            default=None,
            help=f"Whitespace-separated segments to cache: {', '.join(short_names())} (default: all)",
        )
        sub.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
        sub.add_argument(
            "--cache-dir",
            type=Path,
            default=None,
            help="Directory holding cache archives for the local backend",
        )
        sub.add_argument(
            "--log-format",
            choices=sorted(VALID_LOG_FORMATS),
            default=None,
            help="Log output style (default: github on hosted runners, plain otherwise)",
        )
        sub.add_argument("-v", "--verbose", action="store_true", help="Show debug diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            config_path=args.config,
            cache_only=args.cache_only,
            local_cache_dir=args.cache_dir,
            log_format=args.log_format,
        )
        segments = config.segments
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    configure_logging(config.log_format, verbose=args.verbose)
    return _HANDLERS[args.command](build_run_context(config, segments))


def restore(argv: list[str] | None = None) -> int:
    """Entry point for the restore phase."""
    return main(["restore", *(argv if argv is not None else sys.argv[1:])])


def save(argv: list[str] | None = None) -> int:
    """Entry point for the save phase."""
    return main(["save", *(argv if argv is not None else sys.argv[1:])])


if __name__ == "__main__":
    raise SystemExit(main())
