"""GitHub REST API access."""

from ghdiff.infrastructure.github.client import (
    GitHubApiError,
    GitHubAuthenticationError,
    GitHubClient,
    GitHubForbiddenError,
    GitHubNetworkError,
    GitHubValidationError,
    PullRequestNotFoundError,
)

__all__ = [
    "GitHubApiError",
    "GitHubAuthenticationError",
    "GitHubClient",
    "GitHubForbiddenError",
    "GitHubNetworkError",
    "GitHubValidationError",
    "PullRequestNotFoundError",
]
