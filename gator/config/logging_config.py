"""Configure logging for the gator CLI."""
import logging
import logging.handlers
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


def setup_logging(
    name: str = None,
    log_dir: Optional[Union[str, Path]] = None,
    verbose: bool = False,
) -> logging.Logger:
    """Set up logging configuration.

    Args:
        name: Optional name for the logger. If None, returns root logger.
        log_dir: Directory for the rotating log file. No file is written if None.
        verbose: Show debug messages on the console.

    Returns:
        Configured logger instance
    """
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # Console goes to stderr so command output on stdout stays clean
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(console_formatter)

    logger = logging.getLogger(name) if name else logging.getLogger()
    logger.setLevel(logging.DEBUG)

    # Remove any existing handlers to avoid duplicates
    logger.handlers = []

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d")
        log_file = log_dir / f"gator_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_file, maxBytes=10485760, backupCount=5  # 10MB
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.addHandler(console_handler)

    return logger
