"""CLI command implementations."""

from ghdiff.commands.config import cmd_config
from ghdiff.commands.fetch import cmd_fetch
from ghdiff.commands.validate import cmd_validate

__all__ = ["cmd_config", "cmd_fetch", "cmd_validate"]
