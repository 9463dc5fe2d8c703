"""Config command - persist the GitHub token."""

from __future__ import annotations

import sys

from ghdiff.infrastructure.config_store import ConfigError, JsonConfigStore
from ghdiff.services.credentials import CredentialService


def cmd_config(
    token: str | None = None,
    credentials: CredentialService | None = None,
) -> int:
    """Save settings to the config file.

    Args:
        token: GitHub token to store. If None, nothing is changed.
        credentials: Credential service (defaults to the user's config file)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if credentials is None:
        credentials = CredentialService(JsonConfigStore())

    if not token:
        print("No configuration options provided. Use --token to set your GitHub token.")
        return 0

    try:
        credentials.save_token(token)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("GitHub token saved successfully")
    return 0
