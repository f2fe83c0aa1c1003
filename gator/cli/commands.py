"""Command registry and dispatch."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from gator.config.user_config import Config, ConfigStore
from gator.errors import ConfigReadError, UnknownCommandError

logger = logging.getLogger(__name__)


@dataclass
class State:
    """Process state shared with every handler."""

    store: ConfigStore

    @property
    def config(self) -> Config:
        if self.store.config is None:
            raise ConfigReadError("config has not been read")
        return self.store.config


@dataclass
class Command:
    """A parsed invocation: command name plus its arguments."""

    name: str
    args: List[str] = field(default_factory=list)


Handler = Callable[[State, Command], None]


class Commands:
    """Maps command names to handler functions."""

    def __init__(self):
        self.handlers: Dict[str, Handler] = {}

    def register(self, name: str, handler: Handler) -> None:
        """Register ``handler`` under ``name``, replacing any previous one."""
        self.handlers[name] = handler

    def names(self) -> List[str]:
        return sorted(self.handlers)

    def run(self, state: State, command: Command) -> None:
        """Dispatch ``command`` to its handler.

        Raises:
            UnknownCommandError: If no handler is registered for the name
        """
        handler = self.handlers.get(command.name)
        if handler is None:
            logger.debug(f"No handler registered for '{command.name}'")
            raise UnknownCommandError(f"unknown command: {command.name}")

        logger.debug(f"Running command: {command}")
        handler(state, command)
