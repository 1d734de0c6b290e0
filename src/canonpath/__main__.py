"""CLI entry point for canonpath."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .canonical import canonicalize
from .config import CanonConfig, load_config
from .filesystem import create_symlink, entry_exists
from .paths import native
from .resolver import resolve_link

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, emoji=False, highlight=False)


def _configure_logging(config: CanonConfig, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _print_path(path: str, check_exists: bool) -> None:
    if check_exists and not entry_exists(path):
        console.print(f"{escape(path)} [dim](missing)[/dim]")
    else:
        console.print(escape(path))


def _run_canon(args: argparse.Namespace, config: CanonConfig) -> None:
    for raw in args.paths:
        logger.debug("Canonicalizing %s (cwd=%s)", raw, config.working_dir)
        _print_path(canonicalize(raw, cwd=config.working_dir), config.check_exists)


def _run_resolve(args: argparse.Namespace, config: CanonConfig) -> None:
    for raw in args.paths:
        path = native.normalize(native.absolute(raw, config.working_dir))
        logger.debug("Resolving link %s", path)
        _print_path(resolve_link(path), config.check_exists)


def _run_link(args: argparse.Namespace, config: CanonConfig) -> None:
    link = native.absolute(args.link, config.working_dir)
    # plain relative targets are stored literally
    target = native.absolute(args.target, config.working_dir) if args.relative else args.target
    created = create_symlink(target, link, relative=args.relative)
    console.print(f"Created {escape(created)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="canonpath",
        description="Print canonical paths, resolving symlinks even when they are broken or cyclic.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", dest="config_path", default=None, help="Path to config.yaml")
    parser.add_argument("--cwd", default=None, help="Base directory for relative paths (default: cwd)")
    parser.add_argument(
        "--check-exists",
        dest="check_exists",
        action="store_true",
        default=None,
        help="Mark results that do not exist on disk",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    canon_parser = subparsers.add_parser("canon", help="Print the canonical form of each path")
    canon_parser.add_argument("paths", nargs="+", help="Paths to canonicalize")

    resolve_parser = subparsers.add_parser("resolve", help="Follow the symlink chain of each path")
    resolve_parser.add_argument("paths", nargs="+", help="Paths to resolve")

    link_parser = subparsers.add_parser("link", help="Create a symlink")
    link_parser.add_argument("target", help="Path the link points to")
    link_parser.add_argument("link", help="Path of the link to create")
    link_parser.add_argument(
        "--relative",
        action="store_true",
        help="Store the target relative to the link's canonical directory",
    )
    return parser


_COMMANDS = {
    "canon": _run_canon,
    "resolve": _run_resolve,
    "link": _run_link,
}


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    try:
        config = load_config(Path(args.config_path) if args.config_path else None)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.cwd:
        config.working_dir = str(Path(args.cwd).absolute())
    if args.check_exists:
        config.check_exists = True

    _configure_logging(config, args.verbose)

    try:
        _COMMANDS[args.command](args, config)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
