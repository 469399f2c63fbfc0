"""CLI parser construction."""

from __future__ import annotations

import argparse
from pathlib import Path

from create_init import __version__
from create_init.models import CliInvocation
from create_init.naming import normalize_target_dir


def _package_version() -> str:
    return __version__


def build_parser() -> argparse.ArgumentParser:
    # -h/--help is a plain flag so the template list can be rendered in color.
    parser = argparse.ArgumentParser(prog="create-init", add_help=False)
    parser.add_argument("directory", nargs="?", default=None, help="Target directory")
    parser.add_argument("--template", "-t", default=None, metavar="NAME", help="Use a specific template")
    parser.add_argument("--help", "-h", action="store_true", help="Show usage and available templates")
    parser.add_argument(
        "--update",
        "-u",
        action="store_true",
        help="Update the dependencies of an existing project",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON settings file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def invocation_from_args(args: argparse.Namespace) -> CliInvocation:
    return CliInvocation(
        target_dir=normalize_target_dir(args.directory) or None,
        template=args.template,
        help=args.help,
        update=args.update,
        config=Path(args.config) if args.config else None,
        verbose=args.verbose,
    )


__all__ = ["build_parser", "invocation_from_args"]
