"""Config file storage.

Infrastructure component that reads and writes the user's config file.
Services depend on the ConfigStore protocol so they can be tested with a
temporary file or a fake store instead of the real home directory.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ghdiff.domain.config import Config

CONFIG_DIR = Path.home() / ".gh-diff-extractor"
CONFIG_FILE = CONFIG_DIR / "config.json"


class ConfigError(Exception):
    """Raised when the config file cannot be written."""

    pass


class ConfigStore(Protocol):
    """Protocol for loading and saving persisted settings."""

    def read(self) -> Config:
        """Return the stored config, or an empty Config if there is none."""
        ...

    def write(self, config: Config) -> None:
        """Persist config, replacing what was stored before."""
        ...


@dataclass
class JsonConfigStore:
    """Stores Config as pretty-printed JSON on disk.

    This is the production implementation of ConfigStore.
    """

    path: Path = field(default=CONFIG_FILE)

    def read(self) -> Config:
        """Read the config file.

        A missing file is not an error. An unreadable or corrupt file is
        reported on stderr and treated as empty so a bad file never blocks
        commands that can get a token elsewhere.
        """
        path = Path(self.path)
        if not path.exists():
            return Config()
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            print(f"Error reading config file: {e}", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def write(self, config: Config) -> None:
        """Write the config file, creating its directory if needed.

        Raises:
            ConfigError: If the directory or file cannot be written
        """
        path = Path(self.path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e
