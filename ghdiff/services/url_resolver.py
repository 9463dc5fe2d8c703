"""Pull request URL resolver.

Turns a pull request URL copied from the browser into a PullRequestIdentifier,
and an identifier into the REST endpoint that serves its diff.

Checks run from cheapest to most specific so the first error reported is the
one the user can act on:

    empty input -> URL syntax -> host -> path shape -> "pull" keyword
    -> number -> owner/repository names

Supported forms:
    https://github.com/owner/repo/pull/123
    https://github.com/owner/repo/pull/123/files
    http://github.com/owner/repo/pull/123/commits
    github.com/owner/repo/pull/123
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from ghdiff.domain.pull_request import PullRequestIdentifier

GITHUB_HOST = "github.com"
API_BASE_URL = f"https://api.{GITHUB_HOST}"

# GitHub caps user and organization names at 39 characters
MAX_NAME_LENGTH = 39

_NAME_PATTERN = re.compile(r"[A-Za-z0-9-]+")
_NUMBER_PATTERN = re.compile(r"[0-9]+")
_FORBIDDEN_HOST_CHARS = re.compile(r"[\s<>\\^|%]")


# ============================================================
# Errors
# ============================================================


class PullRequestUrlError(ValueError):
    """Base class for all pull request URL failures."""

    pass


class InvalidInputError(PullRequestUrlError):
    """Raised when the URL is missing, empty, or not a string."""

    pass


class MalformedUrlError(PullRequestUrlError):
    """Raised when the URL cannot be parsed at all."""

    pass


class WrongHostError(PullRequestUrlError):
    """Raised when the URL points at a host other than github.com."""

    def __init__(self, hostname: str):
        self.hostname = hostname
        super().__init__(f"URL must be from {GITHUB_HOST}, got: {hostname}")


class MalformedPathError(PullRequestUrlError):
    """Raised when the path has fewer than owner/repo/pull/number segments."""

    pass


class NotAPullRequestUrlError(PullRequestUrlError):
    """Raised when the URL is a GitHub URL but not a pull request (e.g. an issue)."""

    pass


class InvalidNumberError(PullRequestUrlError):
    """Raised when the pull request number is not a positive integer."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid pull request number: {text}")


class InvalidNameError(PullRequestUrlError):
    """Raised when an owner or repository name breaks GitHub naming rules.

    Attributes:
        field: Which name failed, "owner" or "repository"
        name: The offending name
    """

    _LABELS = {"owner": "owner name", "repository": "repository name"}

    def __init__(self, field: str, name: str):
        self.field = field
        self.name = name
        super().__init__(f"Invalid {self._LABELS.get(field, field)}: {name}")


# ============================================================
# Public API
# ============================================================


def parse_pr_url(url: str) -> PullRequestIdentifier:
    """Parse a GitHub pull request URL.

    Args:
        url: Pull request URL, with or without scheme; trailing segments such
            as /files or /commits are ignored

    Returns:
        PullRequestIdentifier with owner, repository and number taken
        verbatim from the URL

    Raises:
        InvalidInputError: If url is empty or not a string
        MalformedUrlError: If url is not valid URL syntax
        WrongHostError: If the host is not github.com
        MalformedPathError: If the path is shorter than owner/repo/pull/number
        NotAPullRequestUrlError: If the third path segment is not "pull"
        InvalidNumberError: If the number is not a positive integer
        InvalidNameError: If the owner or repository name is invalid
    """
    if not url or not isinstance(url, str):
        raise InvalidInputError("URL must be a non-empty string")

    normalized = url.strip()
    if not normalized.startswith(("http://", "https://")):
        normalized = f"https://{normalized}"

    hostname, path = _split_url(normalized, original=url)

    if hostname != GITHUB_HOST:
        raise WrongHostError(hostname)

    # Expected: /owner/repo/pull/123[/files|/commits|/checks]
    segments = [part for part in path.split("/") if part]
    if len(segments) < 4:
        raise MalformedPathError(
            f"Invalid GitHub PR URL format. "
            f"Expected: {GITHUB_HOST}/owner/repo/pull/123, got: {url}"
        )

    owner, repository, keyword, number_text = segments[:4]

    if keyword != "pull":
        raise NotAPullRequestUrlError(
            f"URL must be a pull request URL (contain '/pull/'), got: {url}"
        )

    number = _parse_number(number_text)

    if not is_valid_name(owner):
        raise InvalidNameError("owner", owner)
    if not is_valid_name(repository):
        raise InvalidNameError("repository", repository)

    return PullRequestIdentifier(owner=owner, repository=repository, number=number)


def build_endpoint(identifier: PullRequestIdentifier) -> str:
    """Build the REST endpoint URL for a pull request.

    The identifier is assumed valid; nothing is re-checked here.
    """
    return (
        f"{API_BASE_URL}/repos/{identifier.owner}/{identifier.repository}"
        f"/pulls/{identifier.number}"
    )


def is_valid_name(name: str) -> bool:
    """Check a GitHub user, organization or repository name.

    Names are 1-39 ASCII letters, digits or hyphens and may not start or end
    with a hyphen.
    """
    if not name or len(name) > MAX_NAME_LENGTH:
        return False
    if not _NAME_PATTERN.fullmatch(name):
        return False
    return not (name.startswith("-") or name.endswith("-"))


# ============================================================
# Helpers
# ============================================================


def _split_url(normalized: str, original: str) -> tuple[str, str]:
    """Return (hostname, path) or raise MalformedUrlError."""
    try:
        parts = urlsplit(normalized)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise MalformedUrlError(f"Invalid URL format: {original}") from e

    hostname = parts.hostname
    if not hostname or _FORBIDDEN_HOST_CHARS.search(hostname):
        raise MalformedUrlError(f"Invalid URL format: {original}")
    return hostname, parts.path


def _parse_number(text: str) -> int:
    if not _NUMBER_PATTERN.fullmatch(text):
        raise InvalidNumberError(text)
    number = int(text)
    if number <= 0:
        raise InvalidNumberError(text)
    return number
