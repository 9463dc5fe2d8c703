"""Credential service.

Resolves the GitHub token from, in order of precedence:

1. An explicitly provided token (--token)
2. The GITHUB_TOKEN environment variable
3. The persisted config file

The config file is reached through an injected ConfigStore, so nothing here
touches the home directory unless the caller asks for it.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from ghdiff.infrastructure.config_store import ConfigStore

ENV_TOKEN_NAME = "GITHUB_TOKEN"


class MissingTokenError(Exception):
    """Raised when no GitHub token could be found."""

    pass


@dataclass
class CredentialService:
    """Looks up and persists the GitHub token.

    Uses ConfigStore for the config file (dependency injection) and reads the
    environment from ``environ`` so tests can pass a plain dict.
    """

    store: ConfigStore
    environ: Mapping[str, str] = field(default_factory=lambda: os.environ)

    def get_token(self, explicit_token: str | None = None) -> str | None:
        """Return the first token found, or None.

        Empty strings are treated as not set.
        """
        if explicit_token:
            return explicit_token

        env_token = self.environ.get(ENV_TOKEN_NAME)
        if env_token:
            return env_token

        return self.store.read().token

    def require_token(self, explicit_token: str | None = None) -> str:
        """Return a token or raise MissingTokenError."""
        return validate_token(self.get_token(explicit_token))

    def save_token(self, token: str) -> None:
        """Persist token, keeping any other settings in the config file.

        Raises:
            ConfigError: If the config file cannot be written
        """
        config = self.store.read()
        config.token = token
        self.store.write(config)


def validate_token(token: str | None) -> str:
    """Return token unchanged, or raise MissingTokenError if it is empty."""
    if not token:
        raise MissingTokenError(
            "GitHub token not found. Please provide a token using one of these methods:\n"
            f"  1. Set the {ENV_TOKEN_NAME} environment variable\n"
            "  2. Run 'gh-diff-extractor config --token YOUR_TOKEN' to save it in the config file\n"
            "  3. Pass the token directly with the --token option"
        )
    return token
