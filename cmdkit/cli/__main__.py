"""CLI main entry point - bootstraps the built-in application and lists its commands."""

import argparse
import sys
from typing import List, Optional

from cmdkit.cli.core import App, CLIErrorHandler, bootstrap
from cmdkit.lib.config import get_config
from cmdkit.lib.constants import ALL_VERBOSITY_NAMES, ERR, HELP_COMMAND, OK
from cmdkit.lib.logging import setup_logging
from cmdkit.lib.verbosity import Verbosity, VerbosityController
from cmdkit.models.command import Command


def create_parser() -> argparse.ArgumentParser:
    """Create main CLI argument parser with subcommands.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="cmdkit",
        description="cmdkit - command catalog and lifecycle hooks",
        epilog="For command-specific help: cmdkit <command> --help",
    )

    parser.add_argument("--version", action="version", version="cmdkit v1.0.0")

    # Verbosity (mutually exclusive)
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "--debug", action="store_true", help="Report everything (verbosity: crazy)"
    )
    verbosity_group.add_argument(
        "--quiet", action="store_true", help="Report nothing (verbosity: quiet)"
    )
    verbosity_group.add_argument(
        "--verbose",
        metavar="LEVEL",
        help=f"Verbosity level, 0-5 or one of: {', '.join(ALL_VERBOSITY_NAMES)}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    # Command: list
    list_parser = subparsers.add_parser(
        "list",
        help="List registered commands",
        description="List registered commands with their modules and aliases",
    )
    list_parser.add_argument("--module", "-m", help="Only list commands of this module")

    return parser


def builtin_commands() -> List[Command]:
    """Commands every cmdkit application starts with."""
    return [
        Command(HELP_COMMAND, use_for="Display help information", aliases=["h"]),
        Command("list", use_for="List registered commands", aliases=["ls"]),
    ]


def format_commands(app: App, module: Optional[str] = None) -> List[str]:
    """Render one line per command, names padded to the catalog column width.

    Args:
        app: Application whose catalog is listed
        module: Only include commands of this module

    Returns:
        Lines sorted by command name
    """
    aliases_by_name: dict[str, List[str]] = {}
    for alias, name in app.catalog.aliases().items():
        aliases_by_name.setdefault(name, []).append(alias)

    if module is None:
        commands = app.commands()
    else:
        commands = app.catalog.module_commands(module)

    lines = []
    for name in sorted(commands):
        command = commands[name]
        line = f"{name.ljust(app.name_max_length)}  {command.use_for}"
        if aliases_by_name.get(name):
            line += f" (alias: {', '.join(sorted(aliases_by_name[name]))})"
        lines.append(line.rstrip())
    return lines


def resolve_verbosity(args: argparse.Namespace, default: str) -> Verbosity:
    """Pick the verbosity requested on the command line.

    Args:
        args: Parsed arguments
        default: Level used when no verbosity flag was given

    Returns:
        Requested level

    Raises:
        ValueError: If --verbose does not name a level
    """
    if args.debug:
        return Verbosity.CRAZY
    if args.quiet:
        return Verbosity.QUIET
    if args.verbose is not None:
        return Verbosity.parse(args.verbose)
    return Verbosity.parse(default)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config()
        setup_logging(config.log_level, config.log_format)

        # Registration diagnostics must already follow the requested level
        verbosity = VerbosityController(resolve_verbosity(args, config.verbosity))
        app = bootstrap(commands=builtin_commands(), config=config, verbosity=verbosity)

        if args.command == "list":
            for line in format_commands(app, args.module):
                print(line)
            return OK

        parser.print_help()
        return ERR

    except (KeyboardInterrupt, ValueError) as e:
        return CLIErrorHandler.handle_error(e, command_name=args.command)


if __name__ == "__main__":
    sys.exit(main())
