"""CLI entry point for mdpick."""

import argparse
import sys
from typing import NoReturn

from .. import __version__
from ..core.config import Config
from ..core.exceptions import MdPickError
from ..core.logs import configure_logging
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdpick",
        description="Pick random markdown documents using their front matter tags",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="TOML config file (default: $MDPICK_CONFIG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    pick_parser = subparsers.add_parser("pick", help="Pick random documents")
    commands.add_pick_arguments(pick_parser)

    scan_parser = subparsers.add_parser("scan", help="List documents and their tags")
    commands.add_scan_arguments(scan_parser)

    show_parser = subparsers.add_parser("show", help="Show one document's front matter")
    commands.add_show_arguments(show_parser)

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_or_file(args.config)
        configure_logging(config.log_level, verbose=args.verbose)

        if args.command == "pick":
            commands.handle_pick(args, config)
        elif args.command == "scan":
            commands.handle_scan(args, config)
        elif args.command == "show":
            commands.handle_show(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except MdPickError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
