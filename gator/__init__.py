"""gator: command-line scaffold for a feed aggregator."""

__version__ = "0.1.0"
