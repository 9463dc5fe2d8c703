"""Fetch command - download and display a pull request diff.

Thin command that orchestrates the URL resolver, credential lookup, GitHub
client and diff formatter:

    URL -> PullRequestIdentifier -> token -> diff text
        -> normalize -> [stats] -> [colorize] -> file or stdout
"""

from __future__ import annotations

import sys
from pathlib import Path

from ghdiff.domain.pull_request import DiffFormat
from ghdiff.infrastructure.config_store import JsonConfigStore
from ghdiff.infrastructure.github.client import GitHubApiError, GitHubClient
from ghdiff.services.credentials import CredentialService, MissingTokenError
from ghdiff.services.diff_formatter import (
    colorize_diff,
    compute_diff_stats,
    normalize_diff,
)
from ghdiff.services.url_resolver import PullRequestUrlError, parse_pr_url


def cmd_fetch(
    url: str,
    token: str | None = None,
    output: str | None = None,
    patch: bool = False,
    verbose: bool = False,
    color: bool = True,
    stats: bool = False,
    credentials: CredentialService | None = None,
) -> int:
    """Fetch a pull request diff and print or save it.

    Args:
        url: GitHub pull request URL
        token: Explicit GitHub token (overrides environment and config file)
        output: File to write to. If None, prints to stdout.
        patch: Fetch patch format instead of diff format
        verbose: Print what is being fetched
        color: Colorize terminal output (ignored when writing to a file)
        stats: Print a files/insertions/deletions summary line
        credentials: Credential service (defaults to the user's config file)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    if credentials is None:
        credentials = CredentialService(JsonConfigStore())
    diff_format = DiffFormat.PATCH if patch else DiffFormat.DIFF

    # --------------------------------------------------------
    # 1. Resolve pull request and token
    # --------------------------------------------------------
    try:
        identifier = parse_pr_url(url)
        resolved_token = credentials.require_token(token)
    except (PullRequestUrlError, MissingTokenError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Fetch from GitHub
    # --------------------------------------------------------
    if verbose:
        print(
            f"Fetching {diff_format.value} for PR #{identifier.number} "
            f"from {identifier.owner}/{identifier.repository}"
        )

    client = GitHubClient(resolved_token)
    try:
        content = client.fetch(identifier, diff_format)
    except GitHubApiError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 3. Format and output
    # --------------------------------------------------------
    formatted = normalize_diff(content)

    if stats:
        print(compute_diff_stats(formatted).summary())

    if output:
        try:
            write_output(Path(output), formatted)
        except OSError as e:
            print(f"Error: Failed to write {output}: {e}", file=sys.stderr)
            return 1
        print(f"Diff saved to {output}")
        return 0

    if color:
        formatted = colorize_diff(formatted)
    print(formatted, end="")
    return 0


def write_output(path: Path, content: str) -> None:
    """Write content to path, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
