"""User configuration stored as JSON in the home directory."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Set, Union

from gator.errors import ConfigReadError, ConfigWriteError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".gatorconfig.json"


def get_config_file_path() -> Path:
    """Return the default location of the config file."""
    return Path.home() / CONFIG_FILE_NAME


@dataclass
class Config:
    """In-memory copy of the config file."""

    current_username: Optional[str] = None
    db_url: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    # Known keys present in the file, kept on rewrite even when null
    loaded_keys: Set[str] = field(default_factory=set, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a config from a parsed JSON object.

        Keys other than ``current_username`` and ``db_url`` are kept in
        ``extra`` so they survive a rewrite.
        """
        extra = dict(data)
        return cls(
            current_username=extra.pop("current_username", None),
            db_url=extra.pop("db_url", None),
            extra=extra,
            loaded_keys={k for k in ("current_username", "db_url") if k in data},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the on-disk representation."""
        data: Dict[str, Any] = {}
        if (
            self.current_username is not None
            or "current_username" in self.loaded_keys
        ):
            data["current_username"] = self.current_username
        if self.db_url is not None or "db_url" in self.loaded_keys:
            data["db_url"] = self.db_url
        data.update(self.extra)
        return data


class ConfigStore:
    """Reads and rewrites the user config file."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize the store.

        Args:
            config_path: Path to the JSON config file. Defaults to
                ``~/.gatorconfig.json``.
        """
        self.config_path = (
            Path(config_path) if config_path is not None else get_config_file_path()
        )
        self.config: Optional[Config] = None

    def read(self) -> Config:
        """Load the config file.

        Returns:
            The parsed config, also cached on ``self.config``

        Raises:
            ConfigReadError: If the file is missing, unreadable or malformed
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigReadError(
                f"could not read {self.config_path}: {str(e)}"
            ) from e

        if not isinstance(data, dict):
            raise ConfigReadError(
                f"invalid config format in {self.config_path}: expected a JSON object"
            )

        self.config = Config.from_dict(data)
        logger.debug(f"Read config: {self.config}")
        return self.config

    def set_user(self, username: str) -> None:
        """Set the current user and persist the whole config.

        Raises:
            ConfigWriteError: If the config has not been read or cannot be written
        """
        if self.config is None:
            raise ConfigWriteError("config has not been read")

        self.config.current_username = username
        self.write()

    def write(self, config: Optional[Config] = None) -> None:
        """Overwrite the config file with ``config`` (or the cached config)."""
        if config is not None:
            self.config = config
        if self.config is None:
            raise ConfigWriteError("no config to write")

        # Serialize first so a bad value never truncates the existing file
        try:
            payload = json.dumps(self.config.to_dict(), indent=2)
        except (TypeError, ValueError) as e:
            raise ConfigWriteError(f"could not serialize config: {str(e)}") from e

        try:
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(payload + "\n")
        except OSError as e:
            raise ConfigWriteError(
                f"could not write {self.config_path}: {str(e)}"
            ) from e

        logger.info(f"Wrote config to {self.config_path}")
