"""GitHub REST client.

Infrastructure component that fetches pull request diffs and patches over
HTTPS with requests. HTTP failures are translated into GitHubApiError
subclasses carrying a message the CLI can print as-is.
"""

from __future__ import annotations

import requests

from ghdiff import __version__
from ghdiff.domain.pull_request import DiffFormat, PullRequestIdentifier
from ghdiff.services.url_resolver import API_BASE_URL, build_endpoint

USER_AGENT = f"gh-diff-extractor/{__version__}"

DEFAULT_TIMEOUT = 30.0
VALIDATE_TIMEOUT = 10.0


# ============================================================
# Errors
# ============================================================


class GitHubApiError(Exception):
    """Raised when a GitHub API request fails.

    Attributes:
        status_code: HTTP status of the failed response, or None when no
            response was received
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubAuthenticationError(GitHubApiError):
    """Raised on 401: the token is missing, expired or wrong."""

    pass


class GitHubForbiddenError(GitHubApiError):
    """Raised on 403: insufficient permissions or rate limiting."""

    pass


class PullRequestNotFoundError(GitHubApiError):
    """Raised on 404: repository or pull request missing or not visible."""

    pass


class GitHubValidationError(GitHubApiError):
    """Raised on 422: GitHub rejected the request as unprocessable."""

    pass


class GitHubNetworkError(GitHubApiError):
    """Raised when GitHub could not be reached at all."""

    pass


# ============================================================
# Client
# ============================================================


class GitHubClient:
    """Fetches pull request content from the GitHub REST API."""

    def __init__(self, token: str, timeout: float = DEFAULT_TIMEOUT):
        """Initialize the client.

        Args:
            token: GitHub personal access token
            timeout: Seconds to wait for the diff response
        """
        self.token = token
        self.timeout = timeout
        self.headers = {
            "Authorization": f"token {token}",
            "User-Agent": USER_AGENT,
        }

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def fetch(
        self,
        identifier: PullRequestIdentifier,
        diff_format: DiffFormat = DiffFormat.DIFF,
    ) -> str:
        """Fetch a pull request as diff or patch text.

        Args:
            identifier: Pull request to fetch
            diff_format: DiffFormat.DIFF or DiffFormat.PATCH

        Returns:
            Raw diff or patch text

        Raises:
            GitHubApiError: If the request fails (see subclasses)
        """
        url = build_endpoint(identifier)
        headers = {**self.headers, "Accept": diff_format.media_type}

        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            raise _error_for_response(e.response, identifier) from e
        except (requests.ConnectionError, requests.Timeout) as e:
            raise GitHubNetworkError(
                "Network error: Unable to reach GitHub API. "
                "Please check your internet connection."
            ) from e
        except requests.RequestException as e:
            raise GitHubApiError(f"Request error: {e}") from e

        if response.encoding is None:
            response.encoding = "utf-8"
        return response.text

    def fetch_diff(self, identifier: PullRequestIdentifier) -> str:
        return self.fetch(identifier, DiffFormat.DIFF)

    def fetch_patch(self, identifier: PullRequestIdentifier) -> str:
        return self.fetch(identifier, DiffFormat.PATCH)

    def validate_token(self) -> bool:
        """Check the token against the authenticated-user endpoint.

        Returns:
            True if GitHub accepted the token, False on any failure
        """
        try:
            response = requests.get(
                f"{API_BASE_URL}/user",
                headers=self.headers,
                timeout=VALIDATE_TIMEOUT,
            )
            response.raise_for_status()
        except requests.RequestException:
            return False
        return True


# ============================================================
# Helpers
# ============================================================


def _api_message(response: requests.Response | None) -> str | None:
    """Extract the ``message`` field from a GitHub error body, if any."""
    if response is None:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return None


def _error_for_response(
    response: requests.Response | None,
    identifier: PullRequestIdentifier,
) -> GitHubApiError:
    status = response.status_code if response is not None else None
    message = _api_message(response)

    if status == 401:
        return GitHubAuthenticationError(
            "Authentication failed. Please check your GitHub token. "
            "Make sure it has the necessary permissions to access the repository.",
            status,
        )
    if status == 403:
        return GitHubForbiddenError(
            "Access forbidden. This could be due to:\n"
            "- Insufficient token permissions\n"
            "- Rate limiting\n"
            "- Repository access restrictions",
            status,
        )
    if status == 404:
        return PullRequestNotFoundError(
            f"Pull request not found: {identifier.slug}\n"
            "Please check that:\n"
            "- The repository exists\n"
            "- The pull request number is correct\n"
            "- You have access to the repository",
            status,
        )
    if status == 422:
        return GitHubValidationError(
            f"Invalid request: {message or 'Unknown validation error'}",
            status,
        )
    return GitHubApiError(
        f"GitHub API error ({status}): {message or 'Unknown error'}",
        status,
    )
