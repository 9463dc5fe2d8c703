"""Validate command - check that the resolved token is accepted by GitHub."""

from __future__ import annotations

import sys

from ghdiff.infrastructure.config_store import JsonConfigStore
from ghdiff.infrastructure.github.client import GitHubClient
from ghdiff.services.credentials import CredentialService


def cmd_validate(
    token: str | None = None,
    credentials: CredentialService | None = None,
) -> int:
    """Validate a GitHub token.

    Args:
        token: Token to validate. Falls back to GITHUB_TOKEN, then the config file.
        credentials: Credential service (defaults to the user's config file)

    Returns:
        Exit code (0 if the token is valid, 1 otherwise)
    """
    if credentials is None:
        credentials = CredentialService(JsonConfigStore())

    resolved_token = credentials.get_token(token)
    if not resolved_token:
        print(
            "Error: No token found. Please provide a token using --token option "
            "or set it in the configuration.",
            file=sys.stderr,
        )
        return 1

    client = GitHubClient(resolved_token)
    if not client.validate_token():
        print(
            "Error: Token validation failed. The token may be invalid or may not "
            "have the necessary permissions.",
            file=sys.stderr,
        )
        return 1

    print("Token is valid and has the necessary permissions.")
    return 0
