"""Exceptions raised by the gator CLI."""


class GatorError(Exception):
    """Base class for errors reported to the user."""


class ConfigReadError(GatorError):
    """The config file is missing, unreadable or not valid JSON."""


class ConfigWriteError(GatorError):
    """The config could not be serialized or written back to disk."""


class UnknownCommandError(GatorError):
    """No handler is registered under the requested command name."""


class ArgumentError(GatorError):
    """A handler rejected the arguments it was given."""
