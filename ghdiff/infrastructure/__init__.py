"""Infrastructure components for gh-diff-extractor.

This layer handles external system interactions:
- GitHub REST API via requests
- Config file on disk

Organized into:
- config_store.py - JSON config file behind the ConfigStore protocol
- github/ - GitHub API client
"""

# Config file
from .config_store import (
    CONFIG_FILE,
    ConfigError,
    ConfigStore,
    JsonConfigStore,
)

# GitHub API
from .github import (
    GitHubApiError,
    GitHubAuthenticationError,
    GitHubClient,
    GitHubForbiddenError,
    GitHubNetworkError,
    GitHubValidationError,
    PullRequestNotFoundError,
)

__all__ = [
    # Config file
    "CONFIG_FILE",
    "ConfigError",
    "ConfigStore",
    "JsonConfigStore",
    # GitHub API
    "GitHubApiError",
    "GitHubAuthenticationError",
    "GitHubClient",
    "GitHubForbiddenError",
    "GitHubNetworkError",
    "GitHubValidationError",
    "PullRequestNotFoundError",
]
