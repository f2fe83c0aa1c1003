"""Entry point for the gator command line."""

import argparse
import sys
from typing import List, Optional

from gator.cli.commands import Command, Commands, State
from gator.cli.handlers import register_handlers
from gator.config.logging_config import setup_logging
from gator.config.user_config import ConfigStore
from gator.errors import ConfigReadError, GatorError


def create_argument_parser(commands: Commands) -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="gator",
        description="Gator feed aggregator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Available commands: " + ", ".join(commands.names())
        + """

Examples:
  # Set the current user
  gator login alice
        """,
    )

    parser.add_argument("command", nargs="?", help="Command to run")
    parser.add_argument(
        "args", nargs=argparse.REMAINDER, help="Arguments passed to the command"
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to the config file (default: ~/.gatorconfig.json)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Write a rotating debug log to this directory",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug output"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run one gator command.

    Returns:
        Process exit status
    """
    commands = Commands()
    register_handlers(commands)

    parser = create_argument_parser(commands)
    args = parser.parse_args(argv)

    logger = setup_logging("gator", log_dir=args.log_dir, verbose=args.verbose)

    store = ConfigStore(args.config)
    try:
        store.read()
    except ConfigReadError as e:
        logger.debug(
            f"Failed to load config from {store.config_path}", exc_info=True
        )
        print(f"error reading config: {e}", file=sys.stderr)
        return 1

    state = State(store=store)

    if not args.command:
        print("no command provided")
        return 1

    command = Command(name=args.command, args=list(args.args))
    try:
        commands.run(state, command)
    except GatorError as e:
        logger.debug(f"Command '{command.name}' failed", exc_info=True)
        print(f"error running command: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
