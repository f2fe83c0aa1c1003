"""Handlers for the built-in commands."""

from gator.cli.commands import Command, Commands, State
from gator.errors import ArgumentError


def handler_login(state: State, command: Command) -> None:
    """Set the current user to the first argument."""
    if not command.args:
        raise ArgumentError("login expects a single argument, the username")

    state.store.set_user(command.args[0])

    print(f"User set to {state.config.current_username}")


def register_handlers(commands: Commands) -> None:
    """Register every built-in command."""
    commands.register("login", handler_login)
